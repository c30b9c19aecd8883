import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from src.decision.interfaces.risk_analyzer import RiskAnalyzer
from src.decision.domain.strategy import Strategy, StrategySpace, StrategyType
from src.decision.domain.variables import VariablesAndConstraints
from src.decision.domain.risk import OutcomeDistribution, RiskRewardAnalysis


@dataclass(frozen=True)
class OutcomeBucket:
    probability: float
    description: str


DISTRIBUTION_TEMPLATES: Dict[StrategyType, Tuple[OutcomeBucket, ...]] = {
    StrategyType.AGGRESSIVE: (
        OutcomeBucket(20, "目标达成，收益符合或超出预期"),
        OutcomeBucket(35, "部分达成，结果低于预期但有所收获"),
        OutcomeBucket(30, "遇到较大阻力，需要调整计划或延长周期"),
        OutcomeBucket(15, "执行失败，需要承受损失并重新规划"),
    ),
    StrategyType.CONSERVATIVE: (
        OutcomeBucket(25, "等待期间情况明朗，获得更好的行动时机"),
        OutcomeBucket(30, "情况未明显变化，继续处于等待状态"),
        OutcomeBucket(25, "窗口期收窄，后续行动成本上升"),
        OutcomeBucket(20, "机会丧失，需要转向其他路径"),
    ),
    StrategyType.HEDGE: (
        OutcomeBucket(20, "主路径成功，备选路径平稳退出"),
        OutcomeBucket(35, "两条路径都有进展，需要做出最终选择"),
        OutcomeBucket(30, "精力分散，两条路径进展都不理想"),
        OutcomeBucket(15, "资源耗尽，被迫放弃其中一条或两条路径"),
    ),
    StrategyType.EXIT: (
        OutcomeBucket(30, "成功转向，新方向发展良好"),
        OutcomeBucket(35, "转向后需要较长适应期，短期内有阵痛"),
        OutcomeBucket(20, "新方向也遇到挑战，需要再次调整"),
        OutcomeBucket(15, "产生后悔情绪，对放弃的路径念念不忘"),
    ),
}

FALLBACK_DISTRIBUTION: Tuple[OutcomeBucket, ...] = (
    OutcomeBucket(25, "结果好于预期"),
    OutcomeBucket(50, "结果符合预期"),
    OutcomeBucket(25, "结果低于预期"),
)

UNCERTAINTY_SATURATION = 4
MIDDLE_BUCKETS = (1, 2)
MIDDLE_SHIFT = -5.0
TAIL_SHIFT = 2.5
MIN_PROBABILITY = 5.0
MAX_PROBABILITY = 50.0


def uncertainty_level(uncertainty_count: int) -> float:
    """Scalar in [0, 1]; saturates at four uncertainty sources."""
    return min(uncertainty_count / UNCERTAINTY_SATURATION, 1.0)


def adjust_for_uncertainty(probabilities: List[float], level: float) -> List[float]:
    """
    Move weight from the middle outcomes to the tails as uncertainty grows.
    """
    adjusted = []
    for index, probability in enumerate(probabilities):
        shift = MIDDLE_SHIFT if index in MIDDLE_BUCKETS else TAIL_SHIFT
        value = probability + shift * level
        adjusted.append(max(MIN_PROBABILITY, min(MAX_PROBABILITY, value)))
    return adjusted


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def normalize_probabilities(probabilities: List[float]) -> List[int]:
    """
    Rescale to integer percentages summing to exactly 100.

    Each bucket is rounded half-up independently; any residue left by
    rounding is assigned to the largest bucket (earliest on ties).
    """
    total = sum(probabilities)
    if total <= 0:
        raise ValueError("Outcome probabilities must have a positive total")

    rounded = [_round_half_up(p / total * 100) for p in probabilities]
    remainder = 100 - sum(rounded)
    if remainder:
        largest = rounded.index(max(rounded))
        rounded[largest] += remainder
    return rounded


class TemplateRiskAnalyzer(RiskAnalyzer):
    """
    Heuristic outcome distributions per strategy type.
    Not a calibrated model: only the number of uncertainties is read.
    """

    def analyze(
            self,
            strategy_space: StrategySpace,
            variables: VariablesAndConstraints
    ) -> List[RiskRewardAnalysis]:
        level = uncertainty_level(len(variables.uncertainties))
        return [self._analyze_strategy(strategy, level) for strategy in strategy_space.strategies]

    def _analyze_strategy(self, strategy: Strategy, level: float) -> RiskRewardAnalysis:
        buckets = DISTRIBUTION_TEMPLATES.get(strategy.type)

        if buckets is None:
            distributions = [
                OutcomeDistribution(int(b.probability), b.description) for b in FALLBACK_DISTRIBUTION
            ]
        else:
            adjusted = adjust_for_uncertainty([b.probability for b in buckets], level)
            probabilities = normalize_probabilities(adjusted)
            distributions = [
                OutcomeDistribution(probability, bucket.description)
                for probability, bucket in zip(probabilities, buckets)
            ]

        return RiskRewardAnalysis(
            strategy_id=strategy.id,
            strategy_name=strategy.name,
            distributions=distributions
        )

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from src.decision.interfaces.strategy_generator import StrategyGenerator
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.variables import VariablesAndConstraints
from src.decision.domain.strategy import Strategy, StrategySpace, StrategyType


@dataclass(frozen=True)
class ConditionalStatement:
    """Statement appended only when `required_label` is present in the source list."""
    required_label: str
    statement: str


@dataclass(frozen=True)
class StrategyTemplate:
    id: str
    type: StrategyType
    type_label: str
    name: str
    preconditions: Tuple[str, ...]
    costs: Tuple[str, ...]
    triggers: Tuple[str, ...]
    worst_case: str
    extra_precondition: Optional[ConditionalStatement] = None  # checked against key_variables
    extra_trigger: Optional[ConditionalStatement] = None  # checked against uncertainties


COST_SEPARATOR = "；"

STRATEGY_TEMPLATES: Dict[StrategyType, StrategyTemplate] = {
    StrategyType.AGGRESSIVE: StrategyTemplate(
        id="A",
        type=StrategyType.AGGRESSIVE,
        type_label="激进型",
        name="立即行动",
        preconditions=(
            "对目标有清晰认知且决心坚定",
            "具备基本的资源和能力基础",
            "能够承受失败的最坏后果",
        ),
        costs=(
            "时间：需要全力投入，可能持续数月至数年",
            "资金：需要前期投入，回报周期不确定",
            "机会成本：放弃其他可能的路径",
            "心理成本：承受较大的不确定性压力",
        ),
        triggers=(
            "关键资源和条件已到位",
            "外部环境出现有利窗口",
            "继续等待的成本开始超过行动风险",
        ),
        worst_case="全力投入后失败，损失大量时间、资金和机会成本，且难以回到原点。可能需要承受较长的恢复期。",
        extra_precondition=ConditionalStatement("资金储备", "有足够的资金支持初期投入"),
    ),
    StrategyType.CONSERVATIVE: StrategyTemplate(
        id="B",
        type=StrategyType.CONSERVATIVE,
        type_label="保守型",
        name="观望等待",
        preconditions=(
            "当前状态可持续，无紧迫压力",
            "等待期间有持续信息收集渠道",
            "延迟行动不会导致机会永久丧失",
        ),
        costs=(
            "时间：等待期间的时间消耗",
            "机会成本：可能错过最佳窗口期",
            "心理成本：持续的不确定感和焦虑",
        ),
        triggers=(
            "获得更多关键信息",
            "不确定性显著降低",
            "出现明确的正面或负面信号",
        ),
        worst_case="等待期间窗口关闭，最佳时机永久错过。或者环境恶化，后续行动成本大幅上升。",
        extra_trigger=ConditionalStatement("政策变化", "政策环境明朗化"),
    ),
    StrategyType.HEDGE: StrategyTemplate(
        id="C",
        type=StrategyType.HEDGE,
        type_label="对冲型",
        name="双轨并行",
        preconditions=(
            "有精力和资源同时维护多条路径",
            "两条路径之间不存在严重冲突",
            "能够设定清晰的决策触发点",
        ),
        costs=(
            "精力：需要同时维护多条路径，可能分散注意力",
            "资金：可能需要双重投入",
            "效率损失：无法全力投入任一方向",
        ),
        triggers=(
            "设定明确的时间节点进行评估",
            "任一路径出现决定性进展",
            "资源消耗达到预设阈值",
        ),
        worst_case="两边都未能取得实质进展，资源分散导致竞争力不足。最终可能两边都失去机会。",
    ),
    StrategyType.EXIT: StrategyTemplate(
        id="D",
        type=StrategyType.EXIT,
        type_label="止损型",
        name="转向放弃",
        preconditions=(
            "存在可行的替代方向",
            "沉没成本在可接受范围内",
            "能够理性评估而非情绪化放弃",
        ),
        costs=(
            "沉没成本：之前的投入可能无法回收",
            "心理成本：需要接受'失败'或'放弃'的标签",
            "重建成本：在新方向重新开始的投入",
        ),
        triggers=(
            "核心假设被证伪",
            "成本超出预设止损线",
            "出现更优的替代选项",
            "个人状况发生重大变化",
        ),
        worst_case="放弃后原方向意外变好，产生强烈后悔。或者新方向也不如预期，陷入'草地更绿'的循环。",
    ),
}


def _with_conditional(
        baseline: Tuple[str, ...],
        extra: Optional[ConditionalStatement],
        labels: List[str]
) -> List[str]:
    statements = list(baseline)
    if extra is not None and extra.required_label in labels:
        statements.append(extra.statement)
    return statements


class TemplateStrategyGenerator(StrategyGenerator):
    """
    Instantiates the fixed four-member strategy space from per-type templates.
    Output depends only on strategy type and the presence of specific labels.
    """

    def generate(
            self,
            reframed: ReframedProblem,
            variables: VariablesAndConstraints
    ) -> StrategySpace:
        # Enum declaration order is the A-D order.
        strategies = [
            self._instantiate(STRATEGY_TEMPLATES[strategy_type], variables)
            for strategy_type in StrategyType
        ]
        return StrategySpace(strategies=strategies)

    def _instantiate(
            self,
            template: StrategyTemplate,
            variables: VariablesAndConstraints
    ) -> Strategy:
        return Strategy(
            id=template.id,
            name=f"策略 {template.id}：{template.name}",
            type=template.type,
            type_label=template.type_label,
            preconditions=_with_conditional(
                template.preconditions, template.extra_precondition, variables.key_variables
            ),
            execution_cost=COST_SEPARATOR.join(template.costs),
            trigger_points=_with_conditional(
                template.triggers, template.extra_trigger, variables.uncertainties
            ),
            worst_case=template.worst_case
        )

from typing import List

from src.decision.domain.decision_analysis import DecisionAnalysis
from src.decision.domain.strategy import Strategy
from src.decision.domain.risk import OutcomeDistribution

BAR_CHAR = "█"
BAR_UNIT = 5

REPORT_TITLE = "# 决策结构分析报告"
REPORT_FOOTER = "*本分析旨在暴露决策结构，而非给出答案。最终选择取决于你对自身目标和约束的权衡。*"


def _bullets(lines: List[str], items: List[str]) -> None:
    for item in items:
        lines.append(f"- {item}")


def format_distribution_row(distribution: OutcomeDistribution) -> str:
    bar = BAR_CHAR * (distribution.probability // BAR_UNIT)
    return f"{str(distribution.probability).rjust(2)}% {bar} {distribution.description}"


def _format_strategy(lines: List[str], strategy: Strategy) -> None:
    lines.append(f"### {strategy.name}（{strategy.type_label}）")
    lines.append("")
    lines.append("**前提条件：**")
    _bullets(lines, strategy.preconditions)
    lines.append("")
    lines.append("**执行成本：**")
    lines.append(strategy.execution_cost)
    lines.append("")
    lines.append("**触发点：**")
    _bullets(lines, strategy.trigger_points)
    lines.append("")
    lines.append("**最坏情况：**")
    lines.append(strategy.worst_case)
    lines.append("")


def format_analysis(analysis: DecisionAnalysis) -> str:
    """
    Render the analysis as a markdown report.

    Order-preserving projection of the data: title, five numbered sections
    mirroring the pipeline stages, then a closing reminder.
    """
    lines: List[str] = [REPORT_TITLE, ""]

    # 1. Reframed problem
    problem = analysis.reframed_problem
    lines.extend(["## 1. 问题重述", ""])
    lines.append("**原始问题：**")
    lines.append(f"> {problem.original}")
    lines.append("")
    lines.append("**重述后的核心问题：**")
    lines.append(f"> {problem.reframed}")
    lines.append("")
    if problem.emotional_elements:
        lines.append("**识别出的情绪化元素：**")
        _bullets(lines, problem.emotional_elements)
        lines.append("")

    # 2. Variables and constraints
    variables = analysis.variables_and_constraints
    lines.extend(["## 2. 变量与约束", ""])
    for heading, items in (
            ("目标", variables.goals),
            ("关键变量", variables.key_variables),
            ("硬约束", variables.hard_constraints),
            ("不确定性来源", variables.uncertainties),
    ):
        lines.append(f"### {heading}")
        _bullets(lines, items)
        lines.append("")

    # 3. Strategy space
    lines.extend(["## 3. 策略空间", ""])
    for strategy in analysis.strategy_space.strategies:
        _format_strategy(lines, strategy)

    # 4. Risk / reward
    lines.extend(["## 4. 风险与回报分布", ""])
    for risk in analysis.risk_reward_analysis:
        lines.append(f"### {risk.strategy_name}")
        lines.append("")
        lines.append("```")
        lines.extend(format_distribution_row(d) for d in risk.distributions)
        lines.append("```")
        lines.append("")

    # 5. Bias warnings
    lines.extend(["## 5. 认知偏差提示", ""])
    for bias in analysis.bias_warnings.biases:
        lines.append(f"### ⚠️ {bias.type_label}")
        lines.append("")
        lines.append(f"**表现：** {bias.description}")
        lines.append("")
        lines.append(f"**{bias.mitigation}**")
        lines.append("")

    lines.extend(["---", "", REPORT_FOOTER])
    return "\n".join(lines)

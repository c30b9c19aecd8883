import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from src.config.settings import settings
from src.decision.services.decision_pipeline import DecisionPipeline
from src.decision.services.report_formatter import format_analysis
from src.decision.services.analysis_serializer import analysis_to_json

ANALYZE_DECISION_DESCRIPTION = """对现实问题进行结构化策略分析。

这是一个"暴露现实结构"的决策思考引擎，而不是建议生成器。

功能：
1. 问题去情绪化重述 - 将模糊、情绪化的问题转化为客观、结构化的决策问题
2. 关键变量与约束识别 - 识别目标、关键变量、硬约束和不确定性来源
3. 策略空间生成 - 生成多个可选策略路径（激进、保守、对冲、止损）
4. 风险与回报分布分析 - 为每个策略生成概率分布，而非确定性预测
5. 认知偏差与幻觉提示 - 识别可能影响决策的认知偏差

注意：本工具不会告诉你"该不该做"，只会帮助你看清决策的结构和边界。"""

GET_ANALYSIS_JSON_DESCRIPTION = """获取决策分析的原始 JSON 数据结构。

与 analyze_decision 功能相同，但返回结构化的 JSON 数据而非格式化文本。
适用于需要程序化处理分析结果的场景。"""


class UnknownToolError(Exception):
    """Raised when a tool name is not present in the tool registry."""
    pass


def problem_text_schema(min_length: int, max_length: int, description: str) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "problem_text": {
                "type": "string",
                "minLength": min_length,
                "maxLength": max_length,
                "description": description,
            }
        },
        "required": ["problem_text"],
    }


@dataclass(frozen=True)
class DecisionTool:
    """
    A named entry point over the pipeline.
    `render` produces the success text, `render_error` the single error text.
    """
    name: str
    description: str
    input_schema: Dict[str, Any]
    render: Callable[[str], str]
    render_error: Callable[[Exception], str]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


class DecisionToolRegistry:
    """
    Runtime registry resolving tool names to pipeline-backed tools.
    """

    def __init__(self):
        self._tools: Dict[str, DecisionTool] = {}

    def register(self, tool: DecisionTool) -> None:
        self._tools[tool.name] = tool

    def resolve(self, name: str) -> DecisionTool:
        tool = self._tools.get(name)
        if tool is None:
            raise UnknownToolError(f"Unknown tool: {name}")
        return tool

    def list_tools(self) -> List[DecisionTool]:
        return list(self._tools.values())

    @classmethod
    def with_default_tools(
            cls,
            pipeline: Optional[DecisionPipeline] = None,
            min_length: int = settings.MIN_PROBLEM_TEXT_LENGTH,
            max_length: int = settings.MAX_PROBLEM_TEXT_LENGTH
    ) -> 'DecisionToolRegistry':
        pipeline = pipeline or DecisionPipeline()
        registry = cls()

        registry.register(DecisionTool(
            name="analyze_decision",
            description=ANALYZE_DECISION_DESCRIPTION,
            input_schema=problem_text_schema(
                min_length, max_length, "用户描述的决策问题，可以包含情绪、立场、焦虑等自然表达"
            ),
            render=lambda text: format_analysis(pipeline.analyze(text)),
            render_error=lambda error: f"分析过程中发生错误: {error}",
        ))
        registry.register(DecisionTool(
            name="get_analysis_json",
            description=GET_ANALYSIS_JSON_DESCRIPTION,
            input_schema=problem_text_schema(min_length, max_length, "用户描述的决策问题"),
            render=lambda text: analysis_to_json(pipeline.analyze(text)),
            render_error=lambda error: json.dumps({"error": str(error)}, ensure_ascii=False),
        ))
        return registry

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from src.decision.interfaces.bias_detector import BiasDetector
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.bias import BiasType, BiasWarnings, CognitiveBias


@dataclass(frozen=True)
class BiasRule:
    type: BiasType
    type_label: str
    patterns: Tuple[re.Pattern, ...]
    description: str
    mitigation: str

    def fires_on(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)

    def to_bias(self, description: Optional[str] = None) -> CognitiveBias:
        return CognitiveBias(
            type=self.type,
            type_label=self.type_label,
            description=description or self.description,
            mitigation=self.mitigation
        )


def _compile(*patterns: str) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(p) for p in patterns)


BIAS_RULES: Tuple[BiasRule, ...] = (
    BiasRule(
        type=BiasType.SURVIVORSHIP,
        type_label="幸存者偏差",
        patterns=_compile(r"别人.*成功", r"有人.*做到", r"朋友.*实现", r"看到.*案例",
                          r"成功.*例子", r"XXX都能", r"人家都"),
        description="可能将个别成功案例误认为普遍路径，忽视了大量未能成功的案例",
        mitigation="建议：主动寻找失败案例，了解失败的原因和概率。关注基础率而非个案。",
    ),
    BiasRule(
        type=BiasType.NARRATIVE,
        type_label="叙事谬误",
        patterns=_compile(r"听说", r"据说", r"有个故事", r"看了.*文章", r"网上说",
                          r"大V说", r"博主", r"up主"),
        description="可能被故事和叙事影响决策，而非基于数据和系统性分析",
        mitigation="建议：区分故事和数据，寻找系统性的统计信息。警惕情绪化的成功学叙事。",
    ),
    BiasRule(
        type=BiasType.GROUP_PRESSURE,
        type_label="群体压力",
        patterns=_compile(r"大家都", r"别人都", r"身边.*都", r"朋友都", r"同事都",
                          r"同龄人", r"周围.*人", r"趋势", r"风口"),
        description="可能因为'大家都这样做'而产生跟风冲动，忽视了个人条件的差异性",
        mitigation="建议：明确自己的独特条件和目标，不同人适合不同路径。避免为了'不落后'而盲目跟风。",
    ),
    BiasRule(
        type=BiasType.SHORT_TERM_FOCUS,
        type_label="短期聚焦偏差",
        patterns=_compile(r"马上", r"立刻", r"赶紧", r"来不及", r"错过", r"最后.*机会",
                          r"窗口.*关闭", r"再不.*就"),
        description="可能过度关注短期结果和紧迫感，而忽视长期结构性因素",
        mitigation="建议：拉长时间维度思考，区分'真紧迫'和'假紧迫'。多数人生决策的影响是长期的。",
    ),
    BiasRule(
        type=BiasType.CONFIRMATION_BIAS,
        type_label="确认偏差",
        patterns=_compile(r"我觉得.*应该", r"我认为.*对", r"明显.*更好", r"肯定是",
                          r"毫无疑问", r"怎么看都"),
        description="可能只关注支持已有观点的信息，忽视或贬低相反的证据",
        mitigation="建议：主动寻找反对意见，尝试论证相反立场。问自己：'什么情况下我会改变想法？'",
    ),
    BiasRule(
        type=BiasType.ANCHORING_BIAS,
        type_label="锚定效应",
        patterns=_compile(r"一开始", r"最初", r"第一.*想法", r"本来以为", r"原本.*计划"),
        description="可能过度依赖最初获得的信息或第一印象，难以根据新信息调整判断",
        mitigation="建议：定期重新评估假设，考虑如果从零开始会怎么选择。避免被沉没成本影响。",
    ),
    BiasRule(
        type=BiasType.SUNK_COST_FALLACY,
        type_label="沉没成本谬误",
        patterns=_compile(r"已经.*投入", r"花了.*时间", r"付出.*努力", r"不能.*白费",
                          r"坚持.*这么久", r"放弃.*可惜"),
        description="可能因为已经投入的成本而坚持错误方向，无法理性止损",
        mitigation="建议：关注未来的成本和收益，而非过去的投入。问自己：'如果重新选择，还会这样做吗？'",
    ),
)

RULES_BY_TYPE: Dict[BiasType, BiasRule] = {rule.type: rule for rule in BIAS_RULES}

# Emotional-element label marker -> bias type, checked in this order.
EMOTION_BIAS_MARKERS: Tuple[Tuple[str, BiasType], ...] = (
    ("群体压力", BiasType.GROUP_PRESSURE),
    ("紧迫感假设", BiasType.SHORT_TERM_FOCUS),
    ("竞争焦虑", BiasType.GROUP_PRESSURE),
    ("预设结论", BiasType.CONFIRMATION_BIAS),
    ("预设偏好", BiasType.CONFIRMATION_BIAS),
)

INFERRED_DESCRIPTION = "从表述中检测到：{element}"

GENERIC_REMINDER = CognitiveBias(
    type=BiasType.OTHER,
    type_label="通用提醒",
    description="未检测到明显的认知偏差，但请保持警惕",
    mitigation="建议：定期反思自己的假设和推理过程，寻求不同视角的意见。"
)

ELEMENT_LABEL_SEPARATOR = "："


def _element_label(element: str) -> str:
    return element.split(ELEMENT_LABEL_SEPARATOR, 1)[0]


class PatternBiasDetector(BiasDetector):
    """
    Heuristic bias flagging over the original wording and emotional elements.

    This is a coverage mechanism: it errs toward flagging and is not a
    precision-calibrated classifier.
    """

    def detect(self, reframed: ReframedProblem) -> BiasWarnings:
        biases = self.detect_from_text(reframed.original)
        seen = {bias.type for bias in biases}

        for bias in self.infer_from_emotions(reframed.emotional_elements):
            if bias.type not in seen:
                biases.append(bias)
                seen.add(bias.type)

        if not biases:
            biases.append(GENERIC_REMINDER)

        return BiasWarnings(biases=biases)

    def detect_from_text(self, text: str) -> List[CognitiveBias]:
        # Rule types are unique in BIAS_RULES, so each type fires at most once.
        return [rule.to_bias() for rule in BIAS_RULES if rule.fires_on(text or "")]

    def infer_from_emotions(self, emotional_elements: List[str]) -> List[CognitiveBias]:
        inferred: List[CognitiveBias] = []
        seen = set()

        for element in emotional_elements:
            label = _element_label(element)
            for marker, bias_type in EMOTION_BIAS_MARKERS:
                if marker not in label or bias_type in seen:
                    continue
                rule = RULES_BY_TYPE.get(bias_type)
                if rule is None:
                    continue
                seen.add(bias_type)
                inferred.append(rule.to_bias(INFERRED_DESCRIPTION.format(element=element)))

        return inferred

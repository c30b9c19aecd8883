import re
from dataclasses import dataclass
from typing import List, Tuple

from src.decision.interfaces.problem_reframer import ProblemReframer
from src.decision.domain.reframed_problem import ReframedProblem


@dataclass(frozen=True)
class LanguagePattern:
    category: str
    label: str
    pattern: re.Pattern


@dataclass(frozen=True)
class ThemeRule:
    label: str
    pattern: re.Pattern


EMOTIONAL_PATTERNS: Tuple[LanguagePattern, ...] = (
    LanguagePattern("anxiety", "焦虑情绪", re.compile(r"焦虑|担心|害怕|恐惧|紧张")),
    LanguagePattern("anger", "愤怒情绪", re.compile(r"愤怒|生气|气愤|不爽|烦")),
    LanguagePattern("despair", "绝望情绪", re.compile(r"绝望|无望|没希望|完蛋")),
    LanguagePattern("euphoria", "过度兴奋", re.compile(r"兴奋|激动|太棒了|amazing", re.IGNORECASE)),
    LanguagePattern("compulsion", "强迫性表达", re.compile(r"必须|一定要|只能|不得不")),
    LanguagePattern("over_certainty", "过度确定", re.compile(r"肯定会|绝对会|一定会|必然")),
    LanguagePattern("urgency", "紧迫感假设", re.compile(r"再不.*就.*来不及|错过.*机会|最后.*机会")),
    LanguagePattern("peer_pressure", "群体压力", re.compile(r"别人都|大家都|很多人都|身边.*都")),
    LanguagePattern("competitive_anxiety", "竞争焦虑", re.compile(r"卷|内卷|太卷|卷死")),
    LanguagePattern("escapism", "逃避性表达", re.compile(r"润|跑路|逃离|逃")),
    LanguagePattern("catastrophizing", "灾难化思维", re.compile(r"废了|完了|凉了|没戏")),
    LanguagePattern("decision_anxiety", "决策焦虑", re.compile(r"是不是该|要不要|该不该")),
)

STANCE_PATTERNS: Tuple[LanguagePattern, ...] = (
    LanguagePattern("preset_conclusion", "预设结论", re.compile(r"我觉得.*应该")),
    LanguagePattern("preset_preference", "预设偏好", re.compile(r"明显.*更好")),
    LanguagePattern("option_belittling", "贬低选项", re.compile(r"傻子才")),
    LanguagePattern("false_universality", "假设普遍性", re.compile(r"谁不想")),
)

# Test order is significant: the first matching theme selects the template.
THEME_RULES: Tuple[ThemeRule, ...] = (
    ThemeRule("职业发展", re.compile(r"工作|职业|转行|跳槽|辞职|offer|公司")),
    ThemeRule("地理迁移", re.compile(r"出国|移民|润|国外|海外|留学")),
    ThemeRule("教育投资", re.compile(r"读书|学习|考研|考博|学历|深造")),
    ThemeRule("财务决策", re.compile(r"投资|理财|买房|股票|创业|赚钱")),
    ThemeRule("人生关系", re.compile(r"结婚|离婚|分手|恋爱|家庭|孩子")),
)

GENERIC_THEME = "人生决策"

REFRAME_TEMPLATES = {
    "职业发展": "在当前个人条件（技能、经验、资源）和市场环境下，不同{themes}路径的长期收益与风险结构是什么？",
    "地理迁移": "在给定个人背景、目标和约束条件下，{themes}相比现状的长期价值与成本结构是什么？",
    "教育投资": "在当前阶段进行{themes}，其投入产出比和机会成本结构是什么？",
    "财务决策": "{themes}在不同情景下的风险收益分布和个人承受能力匹配度如何？",
    "人生关系": "{themes}决策涉及哪些关键变量、约束条件和不确定性？",
    GENERIC_THEME: "该决策涉及哪些关键变量、目标、约束和不确定性因素？不同选项的结构性差异是什么？",
}

THEME_SEPARATOR = "与"


def _format_element(label: str, matches: List[str]) -> str:
    return f"{label}：'" + "', '".join(matches) + "'"


class RuleBasedProblemReframer(ProblemReframer):
    """
    Deterministic reframer built on ordered pattern libraries.
    Reframing is template look-up keyed by theme, not text generation.
    """

    def reframe(self, problem_text: str) -> ReframedProblem:
        text = problem_text or ""
        emotional_elements = self.identify_emotional_elements(text)
        themes = self.classify_themes(text)

        return ReframedProblem(
            original=text,
            reframed=self._render_question(themes),
            emotional_elements=emotional_elements
        )

    def identify_emotional_elements(self, text: str) -> List[str]:
        elements = []
        for rule in EMOTIONAL_PATTERNS + STANCE_PATTERNS:
            matches = rule.pattern.findall(text)
            if matches:
                elements.append(_format_element(rule.label, matches))
        return elements

    def classify_themes(self, text: str) -> List[str]:
        themes = [rule.label for rule in THEME_RULES if rule.pattern.search(text)]
        return themes or [GENERIC_THEME]

    def _render_question(self, themes: List[str]) -> str:
        template = REFRAME_TEMPLATES.get(themes[0], REFRAME_TEMPLATES[GENERIC_THEME])
        return template.format(themes=THEME_SEPARATOR.join(themes))

import pytest
from dataclasses import asdict
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.services.problem_reframer import (
    RuleBasedProblemReframer, EMOTIONAL_PATTERNS, STANCE_PATTERNS, REFRAME_TEMPLATES, GENERIC_THEME
)

SCENARIO_TEXT = "我很焦虑，到底要不要辞职创业，已经投入了两年时间，感觉大家都在卷"


@pytest.fixture
def reframer():
    return RuleBasedProblemReframer()


def test_scenario_emotional_elements(reframer):
    result = reframer.reframe(SCENARIO_TEXT)

    assert isinstance(result, ReframedProblem)
    assert result.original == SCENARIO_TEXT
    assert result.emotional_elements == [
        "焦虑情绪：'焦虑'",
        "群体压力：'大家都'",
        "竞争焦虑：'卷'",
        "决策焦虑：'要不要'",
    ]


def test_scenario_theme_is_career(reframer):
    themes = reframer.classify_themes(SCENARIO_TEXT)
    assert themes[0] == "职业发展"
    assert themes == ["职业发展", "财务决策"]

    result = reframer.reframe(SCENARIO_TEXT)
    assert result.reframed == (
        "在当前个人条件（技能、经验、资源）和市场环境下，"
        "不同职业发展与财务决策路径的长期收益与风险结构是什么？"
    )


def test_all_matches_are_joined(reframer):
    result = reframer.reframe("我很担心，也很害怕这件事")
    assert result.emotional_elements == ["焦虑情绪：'担心', '害怕'"]


def test_euphoria_is_case_insensitive(reframer):
    result = reframer.reframe("This offer is AMAZING, 太棒了")
    assert "过度兴奋：'AMAZING', '太棒了'" in result.emotional_elements


def test_order_follows_library_not_text_position(reframer):
    result = reframer.reframe("要不要换个城市，我很焦虑")
    assert result.emotional_elements == ["焦虑情绪：'焦虑'", "决策焦虑：'要不要'"]


def test_stance_patterns_follow_emotional_patterns(reframer):
    result = reframer.reframe("我必须走，我觉得应该去，傻子才留下")
    assert result.emotional_elements == [
        "强迫性表达：'必须'",
        "预设结论：'我觉得应该'",
        "贬低选项：'傻子才'",
    ]


def test_first_matching_theme_selects_template(reframer):
    themes = reframer.classify_themes("想跳槽还是出国")
    assert themes == ["职业发展", "地理迁移"]

    result = reframer.reframe("想跳槽还是出国")
    assert result.reframed.startswith("在当前个人条件")
    assert "职业发展与地理迁移" in result.reframed


def test_single_theme_substitution(reframer):
    result = reframer.reframe("想出国留学，读研究生")
    assert result.reframed == "在给定个人背景、目标和约束条件下，地理迁移相比现状的长期价值与成本结构是什么？"


def test_no_theme_yields_generic_question(reframer):
    result = reframer.reframe("xyzxyzxyz unmatched filler text")
    assert reframer.classify_themes(result.original) == [GENERIC_THEME]
    assert result.reframed == REFRAME_TEMPLATES[GENERIC_THEME]
    assert result.emotional_elements == []


@pytest.mark.parametrize("text", ["", "a", "x" * 10000])
def test_tolerates_any_input(reframer, text):
    result = reframer.reframe(text)
    assert result.reframed
    assert result.emotional_elements == []


def test_reframing_ignores_emotional_content(reframer):
    calm = reframer.reframe("考虑换一份工作")
    loaded = reframer.reframe("我很焦虑，必须换一份工作，不然就完了")
    assert calm.reframed == loaded.reframed
    assert loaded.emotional_elements


def test_determinism(reframer):
    assert asdict(reframer.reframe(SCENARIO_TEXT)) == asdict(reframer.reframe(SCENARIO_TEXT))


def test_pattern_libraries_are_complete():
    assert len(EMOTIONAL_PATTERNS) == 12
    assert len(STANCE_PATTERNS) == 4
    labels = [p.label for p in EMOTIONAL_PATTERNS + STANCE_PATTERNS]
    assert len(labels) == len(set(labels))

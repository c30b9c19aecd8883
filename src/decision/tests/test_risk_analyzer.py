import pytest
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.variables import VariablesAndConstraints
from src.decision.domain.strategy import StrategyType
from src.decision.services.strategy_generator import TemplateStrategyGenerator
from src.decision.services import risk_analyzer as risk_module
from src.decision.services.risk_analyzer import (
    TemplateRiskAnalyzer, adjust_for_uncertainty, normalize_probabilities, uncertainty_level
)


def _variables(uncertainty_count: int) -> VariablesAndConstraints:
    return VariablesAndConstraints(
        goals=["生活质量"],
        key_variables=["年龄"],
        hard_constraints=["时间窗口"],
        uncertainties=[f"u{i}" for i in range(uncertainty_count)]
    )


@pytest.fixture
def analyzer():
    return TemplateRiskAnalyzer()


@pytest.fixture
def strategy_space():
    reframed = ReframedProblem(original="text", reframed="question", emotional_elements=[])
    return TemplateStrategyGenerator().generate(reframed, _variables(1))


def _probabilities(analysis):
    return [d.probability for d in analysis.distributions]


def test_zero_uncertainty_keeps_base_template(analyzer, strategy_space):
    result = analyzer.analyze(strategy_space, _variables(0))
    aggressive = result[0]

    assert _probabilities(aggressive) == [20, 35, 30, 15]
    assert sum(_probabilities(aggressive)) == 100


def test_one_entry_per_strategy_in_order(analyzer, strategy_space):
    result = analyzer.analyze(strategy_space, _variables(2))
    assert [r.strategy_id for r in result] == ["A", "B", "C", "D"]
    assert [r.strategy_name for r in result] == [s.name for s in strategy_space.strategies]


@pytest.mark.parametrize("count,expected", [
    (3, [[23, 32, 27, 18], [28, 27, 22, 23], [23, 32, 27, 18], [33, 32, 17, 18]]),
    (4, [[24, 32, 26, 18], [29, 26, 21, 24], [24, 32, 26, 18], [34, 32, 16, 18]]),
    (6, [[24, 32, 26, 18], [29, 26, 21, 24], [24, 32, 26, 18], [34, 32, 16, 18]]),
])
def test_uncertainty_widens_tails(analyzer, strategy_space, count, expected):
    result = analyzer.analyze(strategy_space, _variables(count))
    assert [_probabilities(r) for r in result] == expected


@pytest.mark.parametrize("count", range(0, 8))
def test_probabilities_sum_to_100(analyzer, strategy_space, count):
    for analysis in analyzer.analyze(strategy_space, _variables(count)):
        assert sum(_probabilities(analysis)) == 100
        assert all(0 <= p <= 100 for p in _probabilities(analysis))


def test_only_uncertainty_count_is_read(analyzer, strategy_space):
    a = _variables(2)
    b = VariablesAndConstraints(
        goals=["x"], key_variables=["y"], hard_constraints=["z"], uncertainties=["政策变化", "国际形势"]
    )
    assert analyzer.analyze(strategy_space, a) == analyzer.analyze(strategy_space, b)


def test_missing_template_falls_back_to_generic(monkeypatch, analyzer, strategy_space):
    monkeypatch.delitem(risk_module.DISTRIBUTION_TEMPLATES, StrategyType.HEDGE)

    result = analyzer.analyze(strategy_space, _variables(4))
    hedge = result[2]

    assert _probabilities(hedge) == [25, 50, 25]
    assert [d.description for d in hedge.distributions] == ["结果好于预期", "结果符合预期", "结果低于预期"]
    assert _probabilities(result[0]) == [24, 32, 26, 18]


def test_uncertainty_level_saturates():
    assert uncertainty_level(0) == 0.0
    assert uncertainty_level(2) == 0.5
    assert uncertainty_level(4) == 1.0
    assert uncertainty_level(10) == 1.0


def test_adjustment_is_clamped():
    assert adjust_for_uncertainty([50, 5, 5, 50], 1.0) == [50, 5, 5, 50]
    assert adjust_for_uncertainty([20, 35, 30, 15], 0.5) == [21.25, 32.5, 27.5, 16.25]


def test_normalization_corrects_rounding_residue():
    assert normalize_probabilities([1, 1, 1]) == [34, 33, 33]
    assert normalize_probabilities([20, 35, 30, 15]) == [20, 35, 30, 15]


def test_normalization_rejects_empty_total():
    with pytest.raises(ValueError):
        normalize_probabilities([0, 0])

import pytest
from dataclasses import asdict
from src.decision.domain.reframed_problem import ReframedProblem
from src.decision.domain.variables import VariablesAndConstraints
from src.decision.domain.strategy import StrategyType
from src.decision.services.strategy_generator import TemplateStrategyGenerator, STRATEGY_TEMPLATES


@pytest.fixture
def generator():
    return TemplateStrategyGenerator()


@pytest.fixture
def reframed():
    return ReframedProblem(original="要不要换工作", reframed="该决策涉及哪些关键变量？", emotional_elements=[])


def _variables(key_variables=None, uncertainties=None) -> VariablesAndConstraints:
    return VariablesAndConstraints(
        goals=["生活质量"],
        key_variables=key_variables or ["年龄"],
        hard_constraints=["时间窗口"],
        uncertainties=uncertainties or ["经济周期波动"]
    )


def test_strategy_space_is_complete_and_ordered(generator, reframed):
    space = generator.generate(reframed, _variables())

    assert len(space.strategies) == 4
    assert [s.id for s in space.strategies] == ["A", "B", "C", "D"]
    assert [s.type for s in space.strategies] == [
        StrategyType.AGGRESSIVE, StrategyType.CONSERVATIVE, StrategyType.HEDGE, StrategyType.EXIT
    ]
    assert [s.type_label for s in space.strategies] == ["激进型", "保守型", "对冲型", "止损型"]


def test_strategy_names(generator, reframed):
    space = generator.generate(reframed, _variables())
    assert [s.name for s in space.strategies] == [
        "策略 A：立即行动", "策略 B：观望等待", "策略 C：双轨并行", "策略 D：转向放弃"
    ]


def test_aggressive_capital_precondition(generator, reframed):
    without = generator.generate(reframed, _variables()).strategies[0]
    with_capital = generator.generate(reframed, _variables(key_variables=["年龄", "资金储备"])).strategies[0]

    assert len(without.preconditions) == 3
    assert len(with_capital.preconditions) == 4
    assert with_capital.preconditions[-1] == "有足够的资金支持初期投入"


def test_capital_reserve_only_affects_aggressive(generator, reframed):
    base = generator.generate(reframed, _variables()).strategies
    with_capital = generator.generate(reframed, _variables(key_variables=["资金储备"])).strategies
    for a, b in zip(base[1:], with_capital[1:]):
        assert a == b


def test_conservative_policy_trigger(generator, reframed):
    without = generator.generate(reframed, _variables()).strategies[1]
    with_policy = generator.generate(reframed, _variables(uncertainties=["政策变化"])).strategies[1]

    assert len(without.trigger_points) == 3
    assert with_policy.trigger_points[-1] == "政策环境明朗化"
    assert len(with_policy.trigger_points) == 4


def test_execution_cost_is_joined(generator, reframed):
    hedge = generator.generate(reframed, _variables()).strategies[2]
    assert hedge.execution_cost == (
        "精力：需要同时维护多条路径，可能分散注意力；资金：可能需要双重投入；效率损失：无法全力投入任一方向"
    )
    aggressive = generator.generate(reframed, _variables()).strategies[0]
    assert aggressive.execution_cost.count("；") == 3


def test_exit_has_four_triggers(generator, reframed):
    exit_strategy = generator.generate(reframed, _variables()).strategies[3]
    assert len(exit_strategy.trigger_points) == 4
    assert exit_strategy.worst_case.startswith("放弃后原方向意外变好")


def test_every_type_has_a_template():
    assert set(STRATEGY_TEMPLATES) == set(StrategyType)


def test_determinism(generator, reframed):
    variables = _variables(key_variables=["资金储备"], uncertainties=["政策变化"])
    assert asdict(generator.generate(reframed, variables)) == asdict(generator.generate(reframed, variables))

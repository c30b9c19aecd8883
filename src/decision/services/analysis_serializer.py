import json
from typing import Any, Dict

from src.decision.domain.decision_analysis import DecisionAnalysis


def analysis_to_dict(analysis: DecisionAnalysis) -> Dict[str, Any]:
    """
    Project an analysis onto the camelCase structure consumed by tool clients.
    Enum members are rendered as their values.
    """
    problem = analysis.reframed_problem
    variables = analysis.variables_and_constraints

    return {
        "reframedProblem": {
            "original": problem.original,
            "reframed": problem.reframed,
            "emotionalElements": list(problem.emotional_elements),
        },
        "variablesAndConstraints": {
            "goals": list(variables.goals),
            "keyVariables": list(variables.key_variables),
            "hardConstraints": list(variables.hard_constraints),
            "uncertainties": list(variables.uncertainties),
        },
        "strategySpace": {
            "strategies": [
                {
                    "id": s.id,
                    "name": s.name,
                    "type": s.type.value,
                    "typeLabel": s.type_label,
                    "preconditions": list(s.preconditions),
                    "executionCost": s.execution_cost,
                    "triggerPoints": list(s.trigger_points),
                    "worstCase": s.worst_case,
                }
                for s in analysis.strategy_space.strategies
            ]
        },
        "riskRewardAnalysis": [
            {
                "strategyId": r.strategy_id,
                "strategyName": r.strategy_name,
                "distributions": [
                    {"probability": d.probability, "description": d.description}
                    for d in r.distributions
                ],
            }
            for r in analysis.risk_reward_analysis
        ],
        "biasWarnings": {
            "biases": [
                {
                    "type": b.type.value,
                    "typeLabel": b.type_label,
                    "description": b.description,
                    "mitigation": b.mitigation,
                }
                for b in analysis.bias_warnings.biases
            ]
        },
    }


def analysis_to_json(analysis: DecisionAnalysis) -> str:
    return json.dumps(analysis_to_dict(analysis), ensure_ascii=False, indent=2)

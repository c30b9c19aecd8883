from dataclasses import dataclass
from enum import Enum
from typing import List


class BiasType(Enum):
    SURVIVORSHIP = "survivorship"
    NARRATIVE = "narrative"
    GROUP_PRESSURE = "groupPressure"
    SHORT_TERM_FOCUS = "shortTermFocus"
    CONFIRMATION_BIAS = "confirmationBias"
    ANCHORING_BIAS = "anchoringBias"
    SUNK_COST_FALLACY = "sunkCostFallacy"
    OTHER = "other"


@dataclass(frozen=True)
class CognitiveBias:
    type: BiasType
    type_label: str
    description: str
    mitigation: str


@dataclass(frozen=True)
class BiasWarnings:
    """
    Flagged phrasing patterns, unique by type and never empty.
    """
    biases: List[CognitiveBias]

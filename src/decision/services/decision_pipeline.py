from typing import Optional

from src.decision.interfaces.problem_reframer import ProblemReframer
from src.decision.interfaces.variable_extractor import VariableExtractor
from src.decision.interfaces.strategy_generator import StrategyGenerator
from src.decision.interfaces.risk_analyzer import RiskAnalyzer
from src.decision.interfaces.bias_detector import BiasDetector
from src.decision.domain.decision_analysis import DecisionAnalysis
from src.decision.services.problem_reframer import RuleBasedProblemReframer
from src.decision.services.variable_extractor import KeywordVariableExtractor
from src.decision.services.strategy_generator import TemplateStrategyGenerator
from src.decision.services.risk_analyzer import TemplateRiskAnalyzer
from src.decision.services.bias_detector import PatternBiasDetector
from src.infrastructure.observability.structured_runtime_logger import StructuredRuntimeLogger


class DecisionPipeline:
    """
    Runs the five analysis stages strictly forward:
    reframe -> extract -> generate -> risk, and reframe -> bias.

    Stages share no mutable state; each call builds its own values, so one
    instance can serve concurrent requests.
    """

    def __init__(
            self,
            reframer: Optional[ProblemReframer] = None,
            extractor: Optional[VariableExtractor] = None,
            generator: Optional[StrategyGenerator] = None,
            risk_analyzer: Optional[RiskAnalyzer] = None,
            bias_detector: Optional[BiasDetector] = None,
            logger: Optional[StructuredRuntimeLogger] = None
    ):
        self.reframer = reframer or RuleBasedProblemReframer()
        self.extractor = extractor or KeywordVariableExtractor()
        self.generator = generator or TemplateStrategyGenerator()
        self.risk_analyzer = risk_analyzer or TemplateRiskAnalyzer()
        self.bias_detector = bias_detector or PatternBiasDetector()
        self.logger = logger or StructuredRuntimeLogger()

    def analyze(self, problem_text: str) -> DecisionAnalysis:
        # 1. Reframe
        reframed = self.reframer.reframe(problem_text)

        # 2. Variables and constraints
        variables = self.extractor.extract(reframed)

        # 3. Strategy space
        strategy_space = self.generator.generate(reframed, variables)

        # 4. Outcome distributions
        risk = self.risk_analyzer.analyze(strategy_space, variables)

        # 5. Bias warnings (original wording only)
        biases = self.bias_detector.detect(reframed)

        self.logger.emit(
            event_type="DECISION_ANALYZED",
            text_length=len(reframed.original),
            emotional_elements=len(reframed.emotional_elements),
            uncertainties=len(variables.uncertainties),
            strategies=len(strategy_space.strategies),
            biases=len(biases.biases),
        )

        return DecisionAnalysis(
            reframed_problem=reframed,
            variables_and_constraints=variables,
            strategy_space=strategy_space,
            risk_reward_analysis=risk,
            bias_warnings=biases
        )


_default_pipeline: Optional[DecisionPipeline] = None


def analyze(problem_text: str) -> DecisionAnalysis:
    """
    Analyze one problem statement with the default rule-based pipeline.
    """
    global _default_pipeline
    if _default_pipeline is None:
        _default_pipeline = DecisionPipeline()
    return _default_pipeline.analyze(problem_text)

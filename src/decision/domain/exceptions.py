class DecisionAnalysisError(Exception):
    """Base class for errors raised around the decision pipeline."""
    pass


class ProblemTextRejected(DecisionAnalysisError):
    """
    Raised by the boundary when the problem text fails a precondition
    (e.g. too short or too long). The pipeline never runs for rejected input.
    """
    pass

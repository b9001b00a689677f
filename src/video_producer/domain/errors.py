"""Producer exception hierarchy."""


class ProducerError(Exception):
    """Base exception for all producer errors."""


class PlanNotApprovedError(ProducerError):
    """Raised when a production is started while a visual plan awaits approval."""


class PlanTransitionError(ProducerError):
    """Raised for a visual plan operation that is invalid in the current state."""


class ProductionInProgressError(ProducerError):
    """Raised when a second run is started on a busy producer."""


class ProductionCancelledError(ProducerError):
    """Raised at a suspension point once the run has been cancelled."""


class AnalysisError(ProducerError):
    """Raised when the analyze phase cannot produce scenes."""


class UnknownPhaseError(ProducerError, KeyError):
    """Raised when a phase id is not part of the production."""

"""
Error taxonomy for the moist-air engine.

Every error derives from ValueError so callers that only distinguish
"bad calculation input" from everything else keep working.  The ``kind``
attribute is the stable identifier surfaced to API clients.
"""


class PsychrometricError(ValueError):
    """Base class for all engine errors."""

    kind = "psychrometric_error"


class InvalidInput(PsychrometricError):
    """Negative humidity ratio, non-positive pressure, RH outside [0, 1], ..."""

    kind = "invalid_input"


class OutOfRange(InvalidInput):
    """A temperature lies outside the validity range of the correlations."""

    kind = "out_of_range"


class SupersaturatedState(PsychrometricError):
    """Humidity ratio exceeds the saturation humidity ratio (fog region)."""

    kind = "supersaturated_state"


class SupersaturatedResult(SupersaturatedState):
    """A process transform would end in the fog region."""

    kind = "supersaturated_result"


class ImpossibleDewPoint(PsychrometricError):
    """Dew point above dry bulb, or vapor pressure at or above total pressure."""

    kind = "impossible_dew_point"


class ConvergenceFailure(PsychrometricError):
    """A bounded iterative solve hit its iteration cap."""

    kind = "convergence_failure"

    def __init__(self, message: str, iterations: int = 0):
        super().__init__(message)
        self.iterations = iterations

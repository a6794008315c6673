"""
Abstract base class for psychrometric process solvers.
"""

import math
from abc import ABC, abstractmethod

from moistair.engine.errors import InvalidInput
from moistair.engine.moist_air import MoistAir
from moistair.models.process import InputMode, ProcessDescriptor


class ProcessSolver(ABC):
    """
    Base class for all process solvers.

    A solver never modifies the state it is given; it returns a new one.
    """

    # Input modes this solver understands
    modes: frozenset[InputMode] = frozenset()

    def apply(
        self,
        state: MoistAir,
        descriptor: ProcessDescriptor,
        dry_air_mass_flow: float,
    ) -> MoistAir:
        """Validate the request, then transform the state."""
        self._validate(descriptor, dry_air_mass_flow)
        return self.transform(state, descriptor, dry_air_mass_flow)

    @abstractmethod
    def transform(
        self,
        state: MoistAir,
        descriptor: ProcessDescriptor,
        dry_air_mass_flow: float,
    ) -> MoistAir:
        """Compute the leaving state."""
        ...

    def _validate(self, descriptor: ProcessDescriptor, dry_air_mass_flow: float) -> None:
        if descriptor.mode not in self.modes:
            supported = ", ".join(sorted(m.value for m in self.modes))
            raise InvalidInput(
                f"Input mode '{descriptor.mode.value}' is not valid for "
                f"'{descriptor.kind.value}'. Use one of: {supported}"
            )
        if not (dry_air_mass_flow > 0 and math.isfinite(dry_air_mass_flow)):
            raise InvalidInput(
                f"Dry-air mass flow must be positive, got {dry_air_mass_flow}"
            )
        if not math.isfinite(descriptor.magnitude):
            raise InvalidInput(f"Magnitude must be finite, got {descriptor.magnitude}")
        if descriptor.mode != InputMode.TARGET_T and descriptor.magnitude < 0:
            raise InvalidInput(
                f"Magnitude must be non-negative, got {descriptor.magnitude}; "
                f"the process kind sets the direction"
            )

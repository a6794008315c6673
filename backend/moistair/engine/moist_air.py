"""
Moist-air state engine.

A MoistAir value is fully described by dry-bulb temperature, humidity ratio
and total pressure (plus the unit system those numbers are expressed in).
Every other property is derived on demand from those three, so the state can
never disagree with itself.

States are built through one of five named constructors, one per supported
input pair:

    MoistAir.from_humidity_ratio(Tdb, W, P, unit)
    MoistAir.from_relative_humidity(Tdb, RH, P, unit)
    MoistAir.from_specific_enthalpy(Tdb, h, P, unit)
    MoistAir.from_t_dew_point(Tdb, Tdp, P, unit)
    MoistAir.from_t_wet_bulb(Tdb, Twb, P, unit)

All five are closed form.  Only the wet-bulb and dew-point queries need a
(bounded) iterative solve.
"""

from dataclasses import dataclass

from moistair.config import (
    SATURATION_TOLERANCE,
    SOLVER_MAX_ITER,
    SOLVER_RTOL,
    UnitSystem,
)
from moistair.engine.correlations import (
    check_pressure,
    check_temperature,
    dew_point_estimate,
    humidity_ratio_from_enthalpy,
    humidity_ratio_from_vapor_pressure,
    humidity_ratio_from_wet_bulb,
    saturation_humidity_ratio,
    saturation_pressure,
    saturation_pressure_derivative,
    specific_enthalpy,
    specific_volume,
    vapor_pressure_from_humidity_ratio,
)
from moistair.engine.errors import (
    ImpossibleDewPoint,
    InvalidInput,
    OutOfRange,
    SupersaturatedState,
)
from moistair.engine.solver import find_root_bracketed, find_root_newton
from moistair.engine.units import (
    constants_for,
    convert_pressure,
    convert_temperature,
)


@dataclass(frozen=True)
class MoistAir:
    """Immutable moist-air state.  Units follow `unit_system`."""

    t_dry_bulb: float      # °C (SI) or °F (IP)
    humidity_ratio: float  # kg_w/kg_da (SI) or lb_w/lb_da (IP)
    pressure: float        # Pa (SI) or psia (IP)
    unit_system: UnitSystem = UnitSystem.SI

    def __post_init__(self):
        object.__setattr__(self, "unit_system", UnitSystem(self.unit_system))
        check_pressure(self.pressure)
        check_temperature(self.t_dry_bulb, self.unit_system)
        if not self.humidity_ratio >= 0:
            raise InvalidInput(
                f"Humidity ratio must be non-negative, got {self.humidity_ratio}"
            )
        w_sat = saturation_humidity_ratio(self.t_dry_bulb, self.pressure, self.unit_system)
        if self.humidity_ratio > w_sat * (1.0 + SATURATION_TOLERANCE):
            raise SupersaturatedState(
                f"Humidity ratio {self.humidity_ratio:.7f} exceeds saturation "
                f"({w_sat:.7f}) at Tdb={self.t_dry_bulb}"
            )

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_humidity_ratio(
        cls,
        t_dry_bulb: float,
        humidity_ratio: float,
        pressure: float,
        unit_system: UnitSystem = UnitSystem.SI,
    ) -> "MoistAir":
        """Direct assignment; only validates 0 <= W <= Ws."""
        return cls(t_dry_bulb, humidity_ratio, pressure, unit_system)

    @classmethod
    def from_relative_humidity(
        cls,
        t_dry_bulb: float,
        relative_humidity: float,
        pressure: float,
        unit_system: UnitSystem = UnitSystem.SI,
    ) -> "MoistAir":
        """Relative humidity as a fraction in [0, 1]."""
        if not (0.0 <= relative_humidity <= 1.0):
            raise InvalidInput(
                f"Relative humidity must be between 0 and 1, got {relative_humidity}"
            )
        check_pressure(pressure)
        pw = relative_humidity * saturation_pressure(t_dry_bulb, unit_system)
        W = humidity_ratio_from_vapor_pressure(pw, pressure)
        return cls(t_dry_bulb, W, pressure, unit_system)

    @classmethod
    def from_specific_enthalpy(
        cls,
        t_dry_bulb: float,
        h: float,
        pressure: float,
        unit_system: UnitSystem = UnitSystem.SI,
    ) -> "MoistAir":
        """Enthalpy in kJ/kg_da (SI) or Btu/lb_da (IP)."""
        check_temperature(t_dry_bulb, unit_system)
        W = humidity_ratio_from_enthalpy(t_dry_bulb, h, unit_system)
        if W < 0:
            raise InvalidInput(
                f"Enthalpy {h} is below that of dry air at Tdb={t_dry_bulb}"
            )
        return cls(t_dry_bulb, W, pressure, unit_system)

    @classmethod
    def from_t_dew_point(
        cls,
        t_dry_bulb: float,
        t_dew_point: float,
        pressure: float,
        unit_system: UnitSystem = UnitSystem.SI,
    ) -> "MoistAir":
        check_temperature(t_dry_bulb, unit_system)
        if t_dew_point > t_dry_bulb:
            raise ImpossibleDewPoint(
                f"Dew point {t_dew_point} exceeds dry-bulb temperature {t_dry_bulb}"
            )
        pw = saturation_pressure(t_dew_point, unit_system)
        W = humidity_ratio_from_vapor_pressure(pw, pressure)
        return cls(t_dry_bulb, W, pressure, unit_system)

    @classmethod
    def from_t_wet_bulb(
        cls,
        t_dry_bulb: float,
        t_wet_bulb: float,
        pressure: float,
        unit_system: UnitSystem = UnitSystem.SI,
    ) -> "MoistAir":
        check_temperature(t_dry_bulb, unit_system)
        if t_wet_bulb > t_dry_bulb:
            raise InvalidInput(
                f"Wet-bulb temperature {t_wet_bulb} exceeds dry-bulb "
                f"temperature {t_dry_bulb}"
            )
        if t_wet_bulb == t_dry_bulb:
            # No depression: the air is saturated.
            pw = saturation_pressure(t_dry_bulb, unit_system)
            W = humidity_ratio_from_vapor_pressure(pw, pressure)
        else:
            W = humidity_ratio_from_wet_bulb(t_dry_bulb, t_wet_bulb, pressure, unit_system)
        if W < 0:
            raise InvalidInput(
                f"Wet-bulb depression {t_dry_bulb - t_wet_bulb:.4g} is too large "
                f"for Tdb={t_dry_bulb}: humidity ratio would be negative"
            )
        return cls(t_dry_bulb, W, pressure, unit_system)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def saturation_pressure(self) -> float:
        return saturation_pressure(self.t_dry_bulb, self.unit_system)

    def saturation_humidity_ratio(self) -> float:
        return saturation_humidity_ratio(self.t_dry_bulb, self.pressure, self.unit_system)

    def vapor_pressure(self) -> float:
        return vapor_pressure_from_humidity_ratio(self.humidity_ratio, self.pressure)

    def relative_humidity(self) -> float:
        """Pw / Pws(Tdb), as a fraction."""
        # capped: a saturated state can round a hair above 1
        return min(self.vapor_pressure() / self.saturation_pressure(), 1.0)

    def specific_enthalpy(self) -> float:
        return specific_enthalpy(self.t_dry_bulb, self.humidity_ratio, self.unit_system)

    def specific_volume(self) -> float:
        return specific_volume(
            self.t_dry_bulb, self.humidity_ratio, self.pressure, self.unit_system
        )

    def density(self) -> float:
        """Moist air density (mass of dry air plus vapor per unit volume)."""
        return (1.0 + self.humidity_ratio) / self.specific_volume()

    def degree_of_saturation(self) -> float:
        """W / Ws(Tdb).  Zero above the boiling point, where Ws is unbounded."""
        return min(self.humidity_ratio / self.saturation_humidity_ratio(), 1.0)

    def dew_point_temperature(
        self, rtol: float = SOLVER_RTOL, max_iter: int = SOLVER_MAX_ITER
    ) -> float:
        """
        Temperature at which Pws equals the current vapor pressure.

        Newton-Raphson on the saturation pressure correlation, seeded with
        the ASHRAE approximation and bracketed on [T_min, Tdb].
        """
        unit = self.unit_system
        c = constants_for(unit)
        pw = self.vapor_pressure()
        if pw <= 0.0:
            raise OutOfRange("Dew point is undefined for perfectly dry air (W = 0)")
        if pw >= self.saturation_pressure():
            return self.t_dry_bulb
        if saturation_pressure(c.t_min, unit) > pw:
            raise OutOfRange(
                f"Dew point lies below the correlation range (< {c.t_min})"
            )

        return find_root_newton(
            lambda t: saturation_pressure(t, unit) - pw,
            lambda t: saturation_pressure_derivative(t, unit),
            dew_point_estimate(pw, unit),
            c.t_min,
            self.t_dry_bulb,
            rtol=rtol,
            max_iter=max_iter,
            what="dew point temperature",
        )

    def wet_bulb_temperature(
        self, rtol: float = SOLVER_RTOL, max_iter: int = SOLVER_MAX_ITER
    ) -> float:
        """
        Thermodynamic wet-bulb temperature.

        The wet-bulb relation W(Tdb, Twb) rises monotonically with Twb, so the
        root of W(Tdb, Twb) - W is bracketed by [T_min, Tdb].
        """
        unit = self.unit_system
        c = constants_for(unit)
        if self.saturation_pressure() >= self.pressure:
            raise InvalidInput(
                f"Wet-bulb temperature is undefined above the boiling point "
                f"(Tdb={self.t_dry_bulb})"
            )
        if self.humidity_ratio >= self.saturation_humidity_ratio():
            return self.t_dry_bulb

        def residual(t_wet_bulb: float) -> float:
            return (
                humidity_ratio_from_wet_bulb(self.t_dry_bulb, t_wet_bulb, self.pressure, unit)
                - self.humidity_ratio
            )

        if residual(self.t_dry_bulb) <= 0.0:
            # Within rounding of saturation
            return self.t_dry_bulb

        return find_root_bracketed(
            residual,
            c.t_min,
            self.t_dry_bulb,
            rtol=rtol,
            max_iter=max_iter,
            what="wet-bulb temperature",
        )

    def to_unit_system(self, unit_system: UnitSystem) -> "MoistAir":
        """Return the same state expressed in another unit system."""
        unit_system = UnitSystem(unit_system)
        if unit_system == self.unit_system:
            return self
        t = convert_temperature(self.t_dry_bulb, self.unit_system, unit_system)
        p = convert_pressure(self.pressure, self.unit_system, unit_system)
        # The SI and IP fits differ in the last digits; a saturated state
        # stays on the saturation line of the target system.
        W = min(self.humidity_ratio, saturation_humidity_ratio(t, p, unit_system))
        if self.humidity_ratio - W > 1e-4 * W:
            W = self.humidity_ratio
        return MoistAir.from_humidity_ratio(t, W, p, unit_system)


def t_dry_bulb_from_enthalpy_relative_humidity(
    h: float,
    relative_humidity: float,
    pressure: float,
    unit_system: UnitSystem = UnitSystem.SI,
    rtol: float = SOLVER_RTOL,
    max_iter: int = SOLVER_MAX_ITER,
) -> float:
    """
    Dry-bulb temperature at which air of the given relative humidity has
    enthalpy h.  With relative_humidity=1 this is where a constant-enthalpy
    line meets the saturation curve.

    Solved in vapor-pressure form: along the enthalpy line W falls with Tdb
    while RH·Pws rises, so the residual is finite and monotonic everywhere.
    """
    if not (0.0 <= relative_humidity <= 1.0):
        raise InvalidInput(
            f"Relative humidity must be between 0 and 1, got {relative_humidity}"
        )
    check_pressure(pressure)
    c = constants_for(unit_system)

    t_dry = h / c.cp_dry_air  # where the enthalpy line reaches W = 0
    if relative_humidity == 0.0:
        check_temperature(t_dry, unit_system)
        return t_dry

    def residual(t: float) -> float:
        W = max(humidity_ratio_from_enthalpy(t, h, unit_system), 0.0)
        return (
            relative_humidity * saturation_pressure(t, unit_system)
            - vapor_pressure_from_humidity_ratio(W, pressure)
        )

    lo, hi = c.t_min, min(t_dry, c.t_max)
    if hi < lo or residual(lo) > 0.0 or residual(hi) < 0.0:
        raise OutOfRange(
            f"Enthalpy {h} at RH={relative_humidity} has no solution within "
            f"[{c.t_min}, {c.t_max}]"
        )
    return find_root_bracketed(
        residual,
        lo,
        hi,
        rtol=rtol,
        max_iter=max_iter,
        what="dry-bulb temperature from enthalpy and relative humidity",
    )

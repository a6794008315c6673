"""
Bounded scalar root finding.

Two routines, both bracketed and both capped:

- find_root_bracketed: Brent's method via scipy.optimize.brentq.  Used for
  monotonic residuals whose derivative is awkward (wet bulb, enthalpy/RH).
- find_root_newton: Newton-Raphson with a bisection safeguard.  Used where an
  analytic derivative and a good starting guess exist (dew point).

Tolerance and iteration cap are injectable.  Running out of iterations raises
ConvergenceFailure; a truncated estimate is never returned.
"""

import logging
from typing import Callable

from scipy.optimize import brentq

from moistair.config import SOLVER_MAX_ITER, SOLVER_RTOL, SOLVER_XTOL
from moistair.engine.errors import ConvergenceFailure

logger = logging.getLogger(__name__)


def _check_bracket(f_lo: float, f_hi: float, lo: float, hi: float, what: str) -> None:
    if (f_lo < 0) == (f_hi < 0):
        raise ConvergenceFailure(
            f"Cannot solve for {what}: no sign change on [{lo:.6g}, {hi:.6g}] "
            f"(f = {f_lo:.3e}, {f_hi:.3e})"
        )


def find_root_bracketed(
    f: Callable[[float], float],
    lo: float,
    hi: float,
    *,
    rtol: float = SOLVER_RTOL,
    xtol: float = SOLVER_XTOL,
    max_iter: int = SOLVER_MAX_ITER,
    what: str = "root",
) -> float:
    """Find x in [lo, hi] with f(x) == 0 using Brent's method."""
    f_lo = f(lo)
    if f_lo == 0.0:
        return lo
    f_hi = f(hi)
    if f_hi == 0.0:
        return hi
    _check_bracket(f_lo, f_hi, lo, hi, what)

    root, result = brentq(
        f, lo, hi, xtol=xtol, rtol=rtol, maxiter=max_iter, full_output=True, disp=False
    )
    if not result.converged:
        logger.warning(
            "Brent solve for %s did not converge after %d iterations (last x=%g)",
            what, result.iterations, root,
        )
        raise ConvergenceFailure(
            f"Solving for {what} did not converge within {max_iter} iterations",
            iterations=result.iterations,
        )
    return root


def find_root_newton(
    f: Callable[[float], float],
    fprime: Callable[[float], float],
    x0: float,
    lo: float,
    hi: float,
    *,
    rtol: float = SOLVER_RTOL,
    xtol: float = SOLVER_XTOL,
    max_iter: int = SOLVER_MAX_ITER,
    what: str = "root",
) -> float:
    """
    Safeguarded Newton-Raphson on [lo, hi].

    Each iterate shrinks the bracket; a Newton step that would leave the
    bracket (or a zero derivative) is replaced by a bisection step, so the
    iteration cannot diverge.  Convergence is declared when the step is below
    rtol·|x| + xtol.
    """
    f_lo = f(lo)
    if f_lo == 0.0:
        return lo
    f_hi = f(hi)
    if f_hi == 0.0:
        return hi
    _check_bracket(f_lo, f_hi, lo, hi, what)

    x = min(max(x0, lo), hi)
    for _ in range(max_iter):
        fx = f(x)
        if fx == 0.0:
            return x

        if (fx < 0) == (f_lo < 0):
            lo, f_lo = x, fx
        else:
            hi = x

        slope = fprime(x)
        x_new = x - fx / slope if slope != 0.0 else lo
        if not (lo < x_new < hi):
            x_new = 0.5 * (lo + hi)

        if abs(x_new - x) <= rtol * abs(x_new) + xtol:
            return x_new
        x = x_new

    logger.warning(
        "Newton solve for %s did not converge after %d iterations (last x=%g)",
        what, max_iter, x,
    )
    raise ConvergenceFailure(
        f"Solving for {what} did not converge within {max_iter} iterations",
        iterations=max_iter,
    )

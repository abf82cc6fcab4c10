"""Closed-form solver for the cubic equations of state.

``Z**3 + a2*Z**2 + a1*Z + a0 = 0`` is shifted to the depressed cubic
``t**3 + p*t + q = 0`` with ``Z = t - a2/3``. The sign of the discriminant
``q**2/4 + p**3/27`` selects the branch:

- negative: three distinct real roots, trigonometric method;
- zero: a double root and a simple one, or a triple root;
- positive: one real root, Cardano's formula.
"""

from __future__ import annotations

import numpy as np

from rkz.errors import NoRootFoundError

# Relative size below which the discriminant is taken as zero.
_DISCRIMINANT_RTOL = 1e-12


def cubic_roots(a2: float, a1: float, a0: float) -> tuple[float, ...]:
    """Return the distinct real roots of the monic cubic, in ascending order.

    The result is empty only when a coefficient is not finite.
    """
    if not np.all(np.isfinite([a2, a1, a0])):
        return ()

    shift = a2 / 3.0
    p = (3.0 * a1 - a2 * a2) / 3.0
    q = (2.0 * a2**3 - 9.0 * a2 * a1 + 27.0 * a0) / 27.0
    q_term = q * q / 4.0
    p_term = p**3 / 27.0
    discriminant = q_term + p_term

    if abs(discriminant) <= _DISCRIMINANT_RTOL * max(abs(q_term), abs(p_term)):
        if p == 0.0:
            roots = [0.0]
        else:
            roots = [3.0 * q / p, -1.5 * q / p]
    elif discriminant < 0.0:
        m = 2.0 * np.sqrt(-p / 3.0)
        theta = np.arccos(np.clip(3.0 * q / (p * m), -1.0, 1.0)) / 3.0
        roots = [m * np.cos(theta - 2.0 * np.pi * k / 3.0) for k in range(3)]
    else:
        # Take the cube root of the larger term and recover the other one from
        # u*v = -p/3, which avoids cancellation when |q| dominates.
        u = np.cbrt(-q / 2.0 - np.copysign(np.sqrt(discriminant), q))
        v = -p / (3.0 * u) if u != 0.0 else 0.0
        roots = [u + v]

    return tuple(sorted({float(t - shift) for t in roots if np.isfinite(t)}))


def max_cubic_root(a2: float, a1: float, a0: float) -> float:
    """Return the largest real root, i.e. the gas-phase compressibility factor.

    Raises:
        NoRootFoundError: If the cubic has no real root.
    """
    roots = cubic_roots(a2, a1, a0)
    if not roots:
        raise NoRootFoundError("no Z-factor root found")
    return roots[-1]

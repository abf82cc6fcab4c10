"""Cubic equations of state and the compressibility factor.

Four classical cubic equations are supported. Each one is reduced to

    Z**3 + a2*Z**2 + a1*Z + a0 = 0

whose largest real root is the gas-phase compressibility factor. The
per-substance parameters are

    a = Omega_a * alpha(T) * R**2 * Tc**2 / Pc
    b = Omega_b * R * Tc / Pc

with the classical Redlich-Kwong form carrying Tc**2.5 in ``a`` and T**2.5
in the reduced ``A`` instead of an alpha function. Mixtures combine these with
the van der Waals one-fluid rule (see :mod:`rkz.composition`).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Sequence

import numpy as np

from rkz.constants import R_GAS
from rkz.errors import EosError
from rkz.models import Substance
from rkz.solver import max_cubic_root

if TYPE_CHECKING:
    from rkz.composition import Gas


class Eos(Enum):
    VAN_DER_WAALS = "vdw"
    REDLICH_KWONG = "rk"
    SOAVE_REDLICH_KWONG = "srk"
    PENG_ROBINSON = "pr"

    @classmethod
    def from_name(cls, name: str) -> Eos:
        """Look up an equation by short name (``pr``) or member name (``PENG_ROBINSON``)."""
        key = name.strip()
        for eos in cls:
            if key.lower() == eos.value or key.upper() == eos.name:
                return eos
        choices = ", ".join(eos.value for eos in cls)
        raise EosError(f"unknown equation of state '{name}' (choose from {choices})")


_OMEGA_A = {
    Eos.VAN_DER_WAALS: 27.0 / 64.0,
    Eos.REDLICH_KWONG: 0.42748023,
    Eos.SOAVE_REDLICH_KWONG: 0.42748023,
    Eos.PENG_ROBINSON: 0.45724,
}

_OMEGA_B = {
    Eos.VAN_DER_WAALS: 1.0 / 8.0,
    Eos.REDLICH_KWONG: 0.08664035,
    Eos.SOAVE_REDLICH_KWONG: 0.08664035,
    Eos.PENG_ROBINSON: 0.0778,
}


def soave_m(acentric_factor: float) -> float:
    w = acentric_factor
    return 0.48 + 1.574 * w - 0.176 * w * w


def peng_robinson_m(acentric_factor: float) -> float:
    """Peng-Robinson alpha slope; the 1978 cubic form above w = 0.491."""
    w = acentric_factor
    if w <= 0.491:
        return 0.37464 + 1.56226 * w - 0.26992 * w * w
    return 0.379642 + 1.487503 * w - 0.164423 * w * w - 0.016666 * w * w * w


def alpha(eos: Eos, substance: Substance, temperature: float) -> float:
    """Temperature correction of the attraction term (1 for VdW and RK)."""
    if eos is Eos.SOAVE_REDLICH_KWONG:
        m = soave_m(substance.acentric_factor)
    elif eos is Eos.PENG_ROBINSON:
        m = peng_robinson_m(substance.acentric_factor)
    else:
        return 1.0
    # NaN below absolute zero; the solver then reports that no root exists.
    with np.errstate(invalid="ignore"):
        root = 1.0 + m * (1.0 - np.sqrt(temperature / substance.critical_temperature))
    return float(root * root)


def attraction(eos: Eos, substance: Substance, temperature: float) -> float:
    """Attraction parameter ``a`` of a pure substance."""
    tc = substance.critical_temperature
    pc = substance.critical_pressure
    if eos is Eos.REDLICH_KWONG:
        return _OMEGA_A[eos] * R_GAS * R_GAS * tc**2.5 / pc
    return alpha(eos, substance, temperature) * _OMEGA_A[eos] * R_GAS * R_GAS * tc * tc / pc


def covolume(eos: Eos, substance: Substance) -> float:
    """Co-volume parameter ``b`` of a pure substance."""
    return _OMEGA_B[eos] * R_GAS * substance.critical_temperature / substance.critical_pressure


def reduced_parameters(
    eos: Eos, a: float, b: float, pressure: float, temperature: float
) -> tuple[float, float]:
    """Dimensionless ``(A, B)`` at the given state."""
    if eos is Eos.REDLICH_KWONG:
        with np.errstate(invalid="ignore"):
            t_power = float(np.power(temperature, 2.5))
        reduced_a = a * pressure / (R_GAS * R_GAS * t_power)
    else:
        reduced_a = a * pressure / (R_GAS * R_GAS * temperature * temperature)
    reduced_b = b * pressure / (R_GAS * temperature)
    return reduced_a, reduced_b


def cubic_coefficients(eos: Eos, reduced_a: float, reduced_b: float) -> tuple[float, float, float]:
    """Return ``(a2, a1, a0)`` of the monic cubic in Z."""
    A, B = reduced_a, reduced_b
    if eos is Eos.VAN_DER_WAALS:
        return -B - 1.0, A, -A * B
    if eos is Eos.PENG_ROBINSON:
        return B - 1.0, -3.0 * B * B - 2.0 * B + A, B * B * B + B * B - A * B
    # Redlich-Kwong and Soave-Redlich-Kwong share the same cubic.
    return -1.0, A - B * B - B, -A * B


def z_factor(eos: Eos, gas: Gas, pressure: float, temperature: float) -> float:
    """Compressibility factor of a pure gas or a mixture.

    Args:
        eos: Equation of state.
        gas: Pure gas or mixture, see :mod:`rkz.composition`.
        pressure: Absolute pressure (Pa).
        temperature: Temperature (K).

    Returns:
        The largest real root of the cubic, i.e. the gas-phase Z.

    Raises:
        NoRootFoundError: If the cubic has no real root. This only happens
            for non-physical inputs, such as a negative temperature with an
            equation that takes its square root.
    """
    a = gas.attraction(eos, temperature)
    b = gas.covolume(eos)
    reduced_a, reduced_b = reduced_parameters(eos, a, b, pressure, temperature)
    return max_cubic_root(*cubic_coefficients(eos, reduced_a, reduced_b))


def z_table(
    eos: Eos,
    gas: Gas,
    pressures: Sequence[float] | np.ndarray,
    temperatures: Sequence[float] | np.ndarray,
) -> np.ndarray:
    """Evaluate Z over a pressure x temperature grid.

    Returns:
        Array of shape ``(len(pressures), len(temperatures))``; one row per
        pressure (Pa), one column per temperature (K).
    """
    pressures = np.atleast_1d(np.asarray(pressures, dtype=float))
    temperatures = np.atleast_1d(np.asarray(temperatures, dtype=float))

    table = np.empty((pressures.size, temperatures.size))
    for i, pressure in enumerate(pressures):
        for j, temperature in enumerate(temperatures):
            table[i, j] = z_factor(eos, gas, float(pressure), float(temperature))
    return table

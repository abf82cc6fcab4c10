"""Pure gases, gas mixtures and the mixture specification parser.

A mixture is written as ``frac1%id1+frac2%id2+...+idN`` where fractions are
molar percentages. Terms without a fraction share whatever is left to reach
100%, e.g. ``80%N2+O2`` is 80% nitrogen and 20% oxygen, ``N2+O2`` is 50/50.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable

import numpy as np

from rkz.constants import FRACTION_TOLERANCE
from rkz.errors import CompositionError, RangeError, SubstanceNotFoundError
from rkz.eos import Eos, attraction, covolume, z_factor
from rkz.models import Component, Substance
from rkz.ranges import parse_number
from rkz.substances import find_substance

SubstanceLookup = Callable[[str], "Substance | None"]


class Gas(ABC):
    """A pure gas or a mixture, as seen by the equations of state."""

    @abstractmethod
    def attraction(self, eos: Eos, temperature: float) -> float:
        """Attraction parameter ``a`` at the given temperature (K)."""

    @abstractmethod
    def covolume(self, eos: Eos) -> float:
        """Co-volume parameter ``b``."""

    @abstractmethod
    def molar_fractions(self) -> list[tuple[str, float]]:
        """``(substance id, molar fraction)`` pairs in component order."""

    def z(self, eos: Eos, pressure: float, temperature: float) -> float:
        """Compressibility factor at ``pressure`` (Pa) and ``temperature`` (K)."""
        return z_factor(eos, self, pressure, temperature)


@dataclass(frozen=True)
class PureGas(Gas):
    substance: Substance

    def attraction(self, eos: Eos, temperature: float) -> float:
        return attraction(eos, self.substance, temperature)

    def covolume(self, eos: Eos) -> float:
        return covolume(eos, self.substance)

    def molar_fractions(self) -> list[tuple[str, float]]:
        return [(self.substance.id, 1.0)]

    def __str__(self) -> str:
        return self.substance.id


@dataclass(frozen=True)
class GasMixture(Gas):
    """Mixture combined with the van der Waals one-fluid mixing rules.

    ``a_mix = sum_i sum_j x_i x_j sqrt(a_i a_j)`` and ``b_mix = sum_i x_i b_i``,
    without binary interaction parameters. Components are expected to be
    valid (see :func:`parse_composition`); no check is made here.
    """

    components: tuple[Component, ...]

    def _fractions(self) -> np.ndarray:
        return np.array([c.molar_fraction for c in self.components])

    def attraction(self, eos: Eos, temperature: float) -> float:
        x = self._fractions()
        a = np.array([attraction(eos, c.substance, temperature) for c in self.components])
        return float(np.sum(np.outer(x, x) * np.sqrt(np.outer(a, a))))

    def covolume(self, eos: Eos) -> float:
        x = self._fractions()
        b = np.array([covolume(eos, c.substance) for c in self.components])
        return float(np.sum(x * b))

    def molar_fractions(self) -> list[tuple[str, float]]:
        return [(c.substance.id, c.molar_fraction) for c in self.components]

    def __str__(self) -> str:
        return "+".join(
            f"{c.molar_fraction * 100.0:g}%{c.substance.id}" for c in self.components
        )


def parse_composition(text: str, registry: SubstanceLookup = find_substance) -> Gas:
    """Build a gas from a specification such as ``H2`` or ``80%N2+O2``.

    Args:
        text: Substance id, or ``+``-separated terms ``[percent%]id``.
        registry: Lookup returning the substance for an id, or ``None``.

    Returns:
        :class:`PureGas` for a single term, otherwise :class:`GasMixture`
        with the terms in input order.

    Raises:
        SubstanceNotFoundError: If an id is not referenced.
        CompositionError: If a term is malformed, an explicit fraction is not
            positive, or the fractions cannot add up to 100%.
    """
    terms = [term.strip() for term in text.split("+")]

    if len(terms) == 1:
        return PureGas(_lookup(terms[0], registry))

    parsed: list[tuple[float | None, Substance]] = []
    for term in terms:
        parts = term.split("%")
        if len(parts) > 2:
            raise CompositionError("invalid gas spec")
        if len(parts) == 1:
            parsed.append((None, _lookup(parts[0].strip(), registry)))
            continue

        substance = _lookup(parts[1].strip(), registry)
        try:
            fraction = parse_number(parts[0]) / 100.0
        except RangeError as exc:
            raise CompositionError(str(exc)) from exc
        if not np.isfinite(fraction):
            raise CompositionError(f"Can't parse {parts[0].strip()} as a number")
        if fraction <= 0.0:
            raise CompositionError("molar fraction cannot be negative")
        parsed.append((fraction, substance))

    explicit = sum(fraction for fraction, _ in parsed if fraction is not None)
    inferred = sum(1 for fraction, _ in parsed if fraction is None)

    # A total of 100% with terms left to infer is refused too: the remaining
    # terms would get a zero fraction. The tolerance only relaxes the check of
    # a fully explicit total.
    if explicit > 1.0 + FRACTION_TOLERANCE or (explicit >= 1.0 and inferred > 0):
        raise CompositionError("total molar fraction is too high")
    if explicit < 1.0 - FRACTION_TOLERANCE and inferred == 0:
        raise CompositionError("total molar fraction is too low")

    remainder = (1.0 - explicit) / inferred if inferred else 0.0
    return GasMixture(
        tuple(
            Component(remainder if fraction is None else fraction, substance)
            for fraction, substance in parsed
        )
    )


def _lookup(substance_id: str, registry: SubstanceLookup) -> Substance:
    substance = registry(substance_id)
    if substance is None:
        raise SubstanceNotFoundError(substance_id)
    return substance

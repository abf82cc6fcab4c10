"""Data structures for substances and mixture components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Substance:
    id: str
    name: str
    critical_temperature: float  # K
    critical_pressure: float  # Pa
    acentric_factor: float = 0.0


@dataclass(frozen=True)
class Component:
    molar_fraction: float
    substance: Substance

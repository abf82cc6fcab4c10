"""rkz core package."""

from rkz.composition import Gas, GasMixture, PureGas, parse_composition
from rkz.eos import Eos, z_factor, z_table
from rkz.errors import (
    CompositionError,
    EosError,
    NoRootFoundError,
    RangeError,
    RKZError,
    SubstanceNotFoundError,
)
from rkz.models import Component, Substance
from rkz.solver import cubic_roots, max_cubic_root
from rkz.substances import SUBSTANCES, find_substance, get_substance

__all__ = [
    "Gas",
    "GasMixture",
    "PureGas",
    "parse_composition",
    "Eos",
    "z_factor",
    "z_table",
    "CompositionError",
    "EosError",
    "NoRootFoundError",
    "RangeError",
    "RKZError",
    "SubstanceNotFoundError",
    "Component",
    "Substance",
    "cubic_roots",
    "max_cubic_root",
    "SUBSTANCES",
    "find_substance",
    "get_substance",
]

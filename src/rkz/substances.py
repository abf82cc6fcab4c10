"""Reference table of gases and their critical properties.

Critical pressures are tabulated in bar and stored in Pa on the
:class:`~rkz.models.Substance` records. The table is built once at import time
and never mutated.
"""

from __future__ import annotations

from rkz.constants import BAR
from rkz.errors import SubstanceNotFoundError
from rkz.models import Substance


def _gas(id: str, name: str, tc: float, pc_bar: float, w: float) -> Substance:
    return Substance(
        id=id,
        name=name,
        critical_temperature=tc,
        critical_pressure=pc_bar * BAR,
        acentric_factor=w,
    )


SUBSTANCES: tuple[Substance, ...] = (
    #    id      name               Tc [K]   Pc [bar]  w
    _gas("H2", "Hydrogen", 33.0, 12.9, -0.216),
    _gas("He", "Helium", 5.19, 2.27, -0.390),
    _gas("Ne", "Neon", 44.40, 27.60, -0.016),
    _gas("Ar", "Argon", 150.86, 48.98, -0.002),
    _gas("Kr", "Krypton", 209.35, 55.02, 0.005),
    _gas("Xe", "Xenon", 289.74, 58.40, 0.008),
    _gas("N2", "Nitrogen", 126.20, 33.98, 0.037),
    _gas("O2", "Oxygen", 154.58, 50.43, 0.022),
    _gas("CO", "Carbon monoxide", 132.85, 34.94, 0.045),
    _gas("CO2", "Carbon dioxide", 304.12, 73.74, 0.225),
    _gas("H2O", "Water", 647.14, 220.64, 0.344),
    _gas("NH3", "Ammonia", 405.40, 113.53, 0.257),
    _gas("H2S", "Hydrogen sulfide", 373.40, 89.63, 0.090),
    _gas("CH4", "Methane", 190.56, 45.99, 0.011),
    _gas("C2H6", "Ethane", 305.32, 48.72, 0.099),
    _gas("C3H8", "Propane", 369.83, 42.48, 0.152),
)

_BY_ID = {substance.id: substance for substance in SUBSTANCES}


def find_substance(substance_id: str) -> Substance | None:
    """Return the referenced substance with this id, or ``None``."""
    return _BY_ID.get(substance_id)


def get_substance(substance_id: str) -> Substance:
    """Return the referenced substance with this id.

    Raises:
        SubstanceNotFoundError: If the id is not in the table.
    """
    substance = find_substance(substance_id)
    if substance is None:
        raise SubstanceNotFoundError(substance_id)
    return substance

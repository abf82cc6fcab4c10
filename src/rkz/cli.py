"""Command-line entrypoints for rkz."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from rkz.composition import Gas, parse_composition
from rkz.constants import BAR, ZERO_CELSIUS
from rkz.eos import Eos, z_factor, z_table
from rkz.errors import RKZError
from rkz.ranges import ValueRange
from rkz.substances import SUBSTANCES

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help=(
        "Computes the compression (Z) factor of gases and gas mixtures in conditions of "
        "pressure and temperature. If a range is provided for pressure or temperature, the "
        "result is written as a tab-separated table (1 row per pressure, 1 column per "
        "temperature)."
    ),
)

_ID_WIDTH = 8


def _fail(exc: RKZError) -> NoReturn:
    logger.debug("aborting", exc_info=exc)
    typer.echo(str(exc), err=True)
    raise typer.Exit(code=1)


def _format(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _resolve(gas_spec: str, eos_name: str) -> tuple[Gas, Eos]:
    gas = parse_composition(gas_spec)
    eos = Eos.from_name(eos_name)
    logger.debug("gas %s (%s), eos %s", gas, gas.molar_fractions(), eos.name)
    return gas, eos


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def list_gas() -> None:
    """Print the list of referenced gases."""
    typer.echo("Gases referenced by RKZ:")
    typer.echo("    ID      Name")
    for substance in SUBSTANCES:
        typer.echo(f"    {substance.id.ljust(_ID_WIDTH)}{substance.name}")


@app.command()
def z(
    gas: Annotated[
        str,
        typer.Option(
            "--gas",
            "-g",
            help="Gas id or mixture such as 80%N2+O2 (see list-gas for ids).",
        ),
    ],
    temperature: Annotated[
        str,
        typer.Option(
            "--temperature",
            "-T",
            help="Temperature in °C. A range can be specified as start:stop[:step].",
        ),
    ],
    pressure: Annotated[
        str,
        typer.Option(
            "--pressure",
            "-P",
            help="Absolute pressure in bar. A range can be specified as start:stop[:step].",
        ),
    ],
    eos: Annotated[
        str,
        typer.Option("--eos", "-e", help="Equation of state: vdw, rk, srk or pr."),
    ] = "rk",
) -> None:
    """Compute the Z factor of a gas for a pressure and a temperature."""
    try:
        resolved_gas, resolved_eos = _resolve(gas, eos)
        temperatures = ValueRange.parse(temperature)
        pressures = ValueRange.parse(pressure)

        if temperatures.is_scalar and pressures.is_scalar:
            value = z_factor(
                resolved_eos,
                resolved_gas,
                pressures.start * BAR,
                temperatures.start + ZERO_CELSIUS,
            )
            typer.echo(str(value))
            return

        t_values = temperatures.values()
        p_values = pressures.values()
        logger.debug("table of %d pressures x %d temperatures", len(p_values), len(t_values))
        table = z_table(
            resolved_eos,
            resolved_gas,
            [p * BAR for p in p_values],
            [t + ZERO_CELSIUS for t in t_values],
        )
    except RKZError as exc:
        _fail(exc)

    typer.echo("\t".join(["P \\ T"] + [_format(t) for t in t_values]))
    for p, row in zip(p_values, table, strict=True):
        typer.echo("\t".join([_format(p)] + [str(float(value)) for value in row]))


@app.command()
def run(
    config_file: Annotated[
        Path, typer.Argument(help="Path to JSON configuration file.")
    ],
    output: Annotated[
        Path | None, typer.Option(help="Path to save output JSON.")
    ] = None,
) -> None:
    """Compute a Z table from a config file.

    The config holds ``gas``, ``pressure`` (bar), ``temperature`` (°C) and
    optionally ``eos``; pressure and temperature accept numbers or range
    strings.
    """
    with open(config_file, "r") as f:
        config = json.load(f)

    try:
        gas, eos = _resolve(config["gas"], config.get("eos", "rk"))
        pressures = ValueRange.parse(str(config["pressure"])).values()
        temperatures = ValueRange.parse(str(config["temperature"])).values()
        table = z_table(
            eos,
            gas,
            [p * BAR for p in pressures],
            [t + ZERO_CELSIUS for t in temperatures],
        )
    except RKZError as exc:
        _fail(exc)

    data = {
        "eos": eos.value,
        "gas": str(gas),
        "pressure_bar": pressures,
        "temperature_c": temperatures,
        "z": table.tolist(),
    }
    json_output = json.dumps(data, indent=2)
    typer.echo(json_output)

    if output:
        with open(output, "w") as f:
            f.write(json_output)

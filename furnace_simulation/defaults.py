"""
Baseline furnace configuration.

Six electrodes in two rows: four along V = 70 and two along V = 116.
"""

from __future__ import annotations

from .model import ElectricParameters, Electrode, FurnaceConfiguration, FurnaceDimensions


DEFAULT_DIMENSIONS = FurnaceDimensions(
    length=71.0,
    height=121.0,
    resistivity=0.300,
)

DEFAULT_ELECTRODES = (
    Electrode(position_u=-24.0, position_v=70.0, radius=0.25, length=5.0),
    Electrode(position_u=-8.0, position_v=70.0, radius=0.25, length=5.0),
    Electrode(position_u=8.0, position_v=70.0, radius=0.25, length=5.0),
    Electrode(position_u=24.0, position_v=70.0, radius=0.25, length=5.0),
    Electrode(position_u=-20.0, position_v=116.0, radius=0.25, length=5.0),
    Electrode(position_u=20.0, position_v=116.0, radius=0.25, length=5.0),
)

DEFAULT_ELECTRIC_PARAMS = ElectricParameters(
    groups=7,
    initial_voltage=100.0,
    initial_power=200_000.0,
)

# Template for electrodes added without explicit geometry.
NEW_ELECTRODE = Electrode(position_u=0.0, position_v=0.0, radius=0.1, length=1.0)


def default_configuration() -> FurnaceConfiguration:
    return FurnaceConfiguration(
        dimensions=DEFAULT_DIMENSIONS,
        electrodes=DEFAULT_ELECTRODES,
        electric_params=DEFAULT_ELECTRIC_PARAMS,
    )

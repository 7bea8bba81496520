from __future__ import annotations

from dataclasses import asdict, replace
from typing import Iterable

import numpy as np
import pandas as pd

from .errors import InvalidParameter
from .model import FurnaceConfiguration, FurnaceModel


# parameter name -> configuration section holding it
SWEEPABLE_PARAMETERS = {
    "length": "dimensions",
    "height": "dimensions",
    "resistivity": "dimensions",
    "initial_voltage": "electric_params",
    "initial_power": "electric_params",
}


def linear_values(center: float, span_fraction: float, points: int) -> np.ndarray:
    """`points` evenly spaced values from center*(1 - span) to center*(1 + span)."""
    if points < 2:
        raise InvalidParameter("points", "a sweep needs at least 2 points")
    low = center * (1.0 - span_fraction)
    high = center * (1.0 + span_fraction)
    return np.linspace(low, high, points)


def sweep(
    configuration: FurnaceConfiguration,
    parameter: str,
    values: Iterable[float],
    model: FurnaceModel | None = None,
) -> pd.DataFrame:
    """
    Run the model once per value of a single input parameter.

    Returns a DataFrame with the parameter column followed by the result
    columns, one row per value, in the order given.
    """
    section = SWEEPABLE_PARAMETERS.get(parameter)
    if section is None:
        raise InvalidParameter(
            "parameter",
            f"unknown sweep parameter {parameter!r}; expected one of {sorted(SWEEPABLE_PARAMETERS)}",
        )
    model = model or FurnaceModel()

    records = []
    for value in values:
        value = float(value)
        changed = replace(getattr(configuration, section), **{parameter: value})
        result = model.compute_configuration(replace(configuration, **{section: changed}))
        records.append({parameter: value, **asdict(result)})

    columns = [parameter, "electrode_volume", "average_distance", "resulting_voltage", "total_power"]
    return pd.DataFrame.from_records(records, columns=columns)

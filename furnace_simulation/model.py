from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

from .errors import DivisionByZeroParameter, InvalidParameter


logger = logging.getLogger(__name__)

# Used when there is no electrode pair to average over.
FALLBACK_AVERAGE_DISTANCE = 1.0


@dataclass(frozen=True)
class FurnaceDimensions:
    """
    Furnace shell dimensions and material coefficient.

    length, height: furnace size (any self-consistent unit).
    resistivity: material resistance coefficient.
    """

    length: float
    height: float
    resistivity: float


@dataclass(frozen=True)
class Electrode:
    """Cylindrical rod located at (position_u, position_v) in the furnace plane."""

    position_u: float
    position_v: float
    radius: float
    length: float

    def volume(self) -> float:
        return math.pi * self.radius**2 * self.length


@dataclass(frozen=True)
class ElectricParameters:
    """
    Target electrical parameters.

    groups is informational only; none of the formulas use it.
    """

    groups: int
    initial_voltage: float
    initial_power: float


@dataclass(frozen=True)
class FurnaceConfiguration:
    """Snapshot of everything the model needs for one computation."""

    dimensions: FurnaceDimensions
    electrodes: Tuple[Electrode, ...]
    electric_params: ElectricParameters

    def __post_init__(self) -> None:
        # Accept any sequence, store a tuple so the snapshot stays immutable.
        object.__setattr__(self, "electrodes", tuple(self.electrodes))


@dataclass(frozen=True)
class DerivedResult:
    """Full-precision outputs of one model run. Rounding is done in `report`."""

    electrode_volume: float
    average_distance: float
    resulting_voltage: float
    total_power: float


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameter(name, f"must be a finite number, got {value!r}")


def validate_inputs(
    dimensions: FurnaceDimensions,
    electrodes: Sequence[Electrode],
    electric_params: ElectricParameters,
) -> None:
    """
    Reject inputs the formulas cannot handle.

    Raises InvalidParameter for non-finite numbers, negative electrode
    geometry or a bad group count, and DivisionByZeroParameter for a zero
    initial voltage or (with at least one electrode) a zero resistivity.
    """
    _require_finite("dimensions.length", dimensions.length)
    _require_finite("dimensions.height", dimensions.height)
    _require_finite("dimensions.resistivity", dimensions.resistivity)

    for i, electrode in enumerate(electrodes):
        prefix = f"electrodes[{i}]"
        _require_finite(f"{prefix}.position_u", electrode.position_u)
        _require_finite(f"{prefix}.position_v", electrode.position_v)
        _require_finite(f"{prefix}.radius", electrode.radius)
        _require_finite(f"{prefix}.length", electrode.length)
        if electrode.radius < 0.0:
            raise InvalidParameter(f"{prefix}.radius", "must not be negative")
        if electrode.length < 0.0:
            raise InvalidParameter(f"{prefix}.length", "must not be negative")

    if isinstance(electric_params.groups, bool) or not isinstance(electric_params.groups, numbers.Integral):
        raise InvalidParameter("electric_params.groups", "must be an integer")
    if electric_params.groups < 1:
        raise InvalidParameter("electric_params.groups", "must be positive")
    _require_finite("electric_params.initial_voltage", electric_params.initial_voltage)
    _require_finite("electric_params.initial_power", electric_params.initial_power)

    if electric_params.initial_voltage == 0.0:
        raise DivisionByZeroParameter("electric_params.initial_voltage")
    if electrodes and dimensions.resistivity == 0.0:
        raise DivisionByZeroParameter("dimensions.resistivity")


def pairwise_distances(electrodes: Sequence[Electrode]) -> np.ndarray:
    """Euclidean distances for every unordered pair i < j, in row-major pair order."""
    n = len(electrodes)
    if n < 2:
        return np.empty(0, dtype=float)
    coords = np.array([(e.position_u, e.position_v) for e in electrodes], dtype=float)
    i_idx, j_idx = np.triu_indices(n, k=1)
    delta = coords[i_idx] - coords[j_idx]
    return np.sqrt(np.sum(delta**2, axis=1))


class FurnaceModel:
    """
    Lumped electrical model of a multi-electrode furnace.

    Resistance is taken as resistivity x electrode volume x average electrode
    spacing, and the resulting voltage is split equally across electrodes.
    The model is stateless: every call computes from its arguments only.
    """

    def compute(
        self,
        dimensions: FurnaceDimensions,
        electrodes: Sequence[Electrode],
        electric_params: ElectricParameters,
    ) -> DerivedResult:
        validate_inputs(dimensions, electrodes, electric_params)

        electrode_volume = self._electrode_volume(electrodes)
        average_distance = self._average_distance(electrodes)

        total_resistance = dimensions.resistivity * electrode_volume * average_distance
        current = electric_params.initial_power / electric_params.initial_voltage
        resulting_voltage = current * total_resistance

        total_power = self._total_power(resulting_voltage, len(electrodes), dimensions.resistivity)

        logger.debug(
            "Computed furnace: n=%d R=%g I=%g U0=%g P=%g",
            len(electrodes),
            total_resistance,
            current,
            resulting_voltage,
            total_power,
        )

        return DerivedResult(
            electrode_volume=electrode_volume,
            average_distance=average_distance,
            resulting_voltage=resulting_voltage,
            total_power=total_power,
        )

    def compute_configuration(self, configuration: FurnaceConfiguration) -> DerivedResult:
        return self.compute(
            configuration.dimensions,
            configuration.electrodes,
            configuration.electric_params,
        )

    @staticmethod
    def _electrode_volume(electrodes: Sequence[Electrode]) -> float:
        if not electrodes:
            return 0.0
        radii = np.array([e.radius for e in electrodes], dtype=float)
        lengths = np.array([e.length for e in electrodes], dtype=float)
        return float(np.sum(np.pi * radii**2 * lengths))

    @staticmethod
    def _average_distance(electrodes: Sequence[Electrode]) -> float:
        distances = pairwise_distances(electrodes)
        if distances.size == 0:
            return FALLBACK_AVERAGE_DISTANCE
        return float(np.mean(distances))

    @staticmethod
    def _total_power(resulting_voltage: float, n: int, resistivity: float) -> float:
        # Equal voltage split across electrodes; empty furnace sums to zero.
        total_power = 0.0
        for _ in range(n):
            voltage_drop = resulting_voltage / n
            electrode_current = voltage_drop / resistivity
            total_power += voltage_drop * electrode_current
        return total_power


def compute(
    dimensions: FurnaceDimensions,
    electrodes: Sequence[Electrode],
    electric_params: ElectricParameters,
) -> DerivedResult:
    """Run the furnace model once. See `FurnaceModel.compute`."""
    return FurnaceModel().compute(dimensions, electrodes, electric_params)

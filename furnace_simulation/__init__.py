"""
Electrode furnace simulation package.

Provides a simple lumped electrical model for a multi-electrode furnace:
electrode volume, average electrode spacing, resulting voltage and total
power, plus an editable configuration store that keeps the result current.
"""

from .errors import DivisionByZeroParameter, FurnaceModelError, InvalidParameter
from .model import (
    DerivedResult,
    ElectricParameters,
    Electrode,
    FurnaceConfiguration,
    FurnaceDimensions,
    FurnaceModel,
    compute,
    pairwise_distances,
    validate_inputs,
)
from .defaults import default_configuration
from .store import ConfigStore
from .report import format_result, round_result
from .sweep import sweep

__all__ = [
    "FurnaceModelError",
    "InvalidParameter",
    "DivisionByZeroParameter",
    "FurnaceDimensions",
    "Electrode",
    "ElectricParameters",
    "FurnaceConfiguration",
    "DerivedResult",
    "FurnaceModel",
    "compute",
    "pairwise_distances",
    "validate_inputs",
    "default_configuration",
    "ConfigStore",
    "format_result",
    "round_result",
    "sweep",
]

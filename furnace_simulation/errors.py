from __future__ import annotations


class FurnaceModelError(Exception):
    """Base class for errors raised by the furnace model."""


class InvalidParameter(FurnaceModelError, ValueError):
    """
    An input value the model cannot work with.

    `parameter` names the offending field (e.g. "electrodes[2].radius").
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter


class DivisionByZeroParameter(InvalidParameter):
    """A zero input that the formulas divide by (voltage or resistivity)."""

    def __init__(self, parameter: str) -> None:
        super().__init__(parameter, "must be nonzero")

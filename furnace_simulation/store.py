from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List

from .defaults import NEW_ELECTRODE, default_configuration
from .model import DerivedResult, Electrode, FurnaceConfiguration, FurnaceModel


logger = logging.getLogger(__name__)

Listener = Callable[[FurnaceConfiguration, DerivedResult], None]


class ConfigStore:
    """
    Editable furnace configuration with an always-current model result.

    The configuration is an immutable snapshot; each edit builds a new one,
    runs the model on it and only then commits both. The result is held in
    its own slot and never written into the configuration, so committing it
    cannot trigger another computation.

    An edit the model rejects is not committed: the previous configuration
    and result stay in place and the error reaches the caller.
    """

    def __init__(
        self,
        configuration: FurnaceConfiguration | None = None,
        model: FurnaceModel | None = None,
    ) -> None:
        self.model = model or FurnaceModel()
        self._configuration = configuration or default_configuration()
        self._result = self.model.compute_configuration(self._configuration)
        self._listeners: List[Listener] = []

    @property
    def configuration(self) -> FurnaceConfiguration:
        return self._configuration

    @property
    def result(self) -> DerivedResult:
        return self._result

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback for committed edits. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # Electrode list

    def add_electrode(self, electrode: Electrode | None = None) -> int:
        if electrode is None:
            electrode = NEW_ELECTRODE
        electrodes = self._configuration.electrodes + (electrode,)
        self._commit(replace(self._configuration, electrodes=electrodes), "add electrode")
        return len(electrodes) - 1

    def remove_electrode(self, index: int) -> None:
        electrodes = list(self._configuration.electrodes)
        del electrodes[index]
        self._commit(replace(self._configuration, electrodes=electrodes), f"remove electrode {index}")

    def update_electrode(self, index: int, **changes: float) -> None:
        electrodes = list(self._configuration.electrodes)
        electrodes[index] = replace(electrodes[index], **changes)
        self._commit(replace(self._configuration, electrodes=electrodes), f"update electrode {index}")

    # Dimensions and electrical parameters

    def update_dimensions(self, **changes: float) -> None:
        dimensions = replace(self._configuration.dimensions, **changes)
        self._commit(replace(self._configuration, dimensions=dimensions), "update dimensions")

    def update_electric_params(self, **changes: float) -> None:
        electric_params = replace(self._configuration.electric_params, **changes)
        self._commit(replace(self._configuration, electric_params=electric_params), "update electric params")

    def replace_configuration(self, configuration: FurnaceConfiguration) -> None:
        self._commit(configuration, "replace configuration")

    def _commit(self, configuration: FurnaceConfiguration, action: str) -> None:
        try:
            result = self.model.compute_configuration(configuration)
        except Exception:
            logger.warning("Rejected edit (%s); keeping previous configuration", action)
            raise

        self._configuration = configuration
        self._result = result
        logger.debug("%s -> U0=%g, P=%g", action, result.resulting_voltage, result.total_power)

        for listener in list(self._listeners):
            listener(configuration, result)

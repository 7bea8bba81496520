from __future__ import annotations

import logging

from tabulate import tabulate

from furnace_simulation import ConfigStore, Electrode, sweep
from furnace_simulation.logging_config import setup_logging
from furnace_simulation.report import electrode_table, format_result, result_table
from furnace_simulation.sweep import linear_values


def main() -> None:
    setup_logging(logging.INFO)

    # Baseline furnace: six electrodes, 100 V / 200 kW target
    store = ConfigStore()

    print("=== Electrode Furnace – Baseline ===")
    print("\nElectrodes")
    print(electrode_table(store.configuration.electrodes))
    print("\nResults")
    print(result_table(store.result))

    # Watch how the result moves as the layout is edited
    def on_change(configuration, result) -> None:
        shown = format_result(result)
        print(
            f"  n={len(configuration.electrodes)}: "
            f"U0 = {shown['resulting_voltage']}, P = {shown['total_power']}"
        )

    unsubscribe = store.subscribe(on_change)

    print("\n=== Layout edits ===")
    store.add_electrode(Electrode(position_u=0.0, position_v=93.0, radius=0.25, length=5.0))
    store.update_electrode(0, radius=0.3)
    store.remove_electrode(len(store.configuration.electrodes) - 1)
    unsubscribe()

    print("\n=== Power sweep (±40 % around the baseline) ===")
    base_power = store.configuration.electric_params.initial_power
    df = sweep(store.configuration, "initial_power", linear_values(base_power, 0.4, 5))
    print(tabulate(df, headers="keys", tablefmt="github", showindex=False, floatfmt=".2f"))


if __name__ == "__main__":
    main()

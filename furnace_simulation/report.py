"""
Display formatting for model results.

The model works in full precision; these helpers apply the fixed
decimal places used when results are shown.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Dict, Sequence

from tabulate import tabulate

from .model import DerivedResult, Electrode


DISPLAY_PRECISION: Dict[str, int] = {
    "electrode_volume": 6,
    "average_distance": 2,
    "resulting_voltage": 2,
    "total_power": 1,
}

RESULT_LABELS: Dict[str, str] = {
    "electrode_volume": "Electrode volume",
    "average_distance": "Average distance",
    "resulting_voltage": "Resulting voltage U0",
    "total_power": "Total power",
}


def round_result(result: DerivedResult) -> Dict[str, float]:
    return {
        name: round(value, DISPLAY_PRECISION[name])
        for name, value in asdict(result).items()
    }


def format_result(result: DerivedResult) -> Dict[str, str]:
    """Fixed-decimal strings for each result field, e.g. '5.890486'."""
    return {
        name: f"{value:.{DISPLAY_PRECISION[name]}f}"
        for name, value in asdict(result).items()
    }


def result_table(result: DerivedResult) -> str:
    rows = [[RESULT_LABELS[name], text] for name, text in format_result(result).items()]
    return tabulate(rows, headers=["Quantity", "Value"], tablefmt="github", disable_numparse=True)


def electrode_table(electrodes: Sequence[Electrode]) -> str:
    rows = []
    for i, e in enumerate(electrodes):
        rows.append(
            [
                i,
                f"{e.position_u:.2f}",
                f"{e.position_v:.2f}",
                f"{e.radius:.3f}",
                f"{e.length:.3f}",
                f"{e.volume():.6f}",
            ]
        )
    return tabulate(
        rows,
        headers=["#", "U", "V", "Radius", "Length", "Volume"],
        tablefmt="github",
        disable_numparse=True,
    )

"""Signal-vs-distance curve export.

Turns a list of SignalReading (usually from compute_curve) into:
- a string table for printing or CSV export,
- numpy arrays keyed by column for plotting.
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Iterable, List

import numpy as np

from .signal_model import SignalReading

logger = logging.getLogger(__name__)

CURVE_COLUMNS = ["distance_m", "strength_percent", "power_dbm", "path_loss_db", "throughput_mbps"]


def readings_to_table(readings: Iterable[SignalReading]) -> List[List[str]]:
	"""Convert readings to a simple table (strings) for printing or CSV export."""
	table = [list(CURVE_COLUMNS)]
	for r in readings:
		table.append([
			f"{r.distance_m:g}",
			f"{r.strength_percent:.1f}",
			f"{r.power_dbm:.2f}",
			f"{r.path_loss_db:.2f}",
			str(r.throughput_mbps),
		])
	return table


def print_table(table: List[List[str]]) -> None:
	"""Pretty-print a simple table to the console."""
	widths = [max(len(row[i]) for row in table) for i in range(len(table[0]))]
	for row in table:
		line = "  ".join(cell.ljust(widths[j]) for j, cell in enumerate(row))
		print(line)


def save_curve_csv(readings: Iterable[SignalReading], path: str | Path) -> Path:
	"""Save readings to a CSV file with the CURVE_COLUMNS header."""
	table = readings_to_table(readings)
	p = Path(path)
	p.parent.mkdir(parents=True, exist_ok=True)
	with p.open("w", newline="", encoding="utf-8") as f:
		writer = csv.writer(f)
		writer.writerows(table)
	logger.debug("Wrote %d curve rows to %s", len(table) - 1, p)
	return p


def curve_arrays(readings: Iterable[SignalReading]) -> Dict[str, np.ndarray]:
	"""Column arrays (distance_m, strength_percent, power_dbm) for plotting."""
	rows = list(readings)
	return {
		"distance_m": np.array([r.distance_m for r in rows], dtype=float),
		"strength_percent": np.array([r.strength_percent for r in rows], dtype=float),
		"power_dbm": np.array([r.power_dbm for r in rows], dtype=float),
	}

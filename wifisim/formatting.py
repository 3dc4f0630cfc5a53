"""Human-readable rendering of signal readings.

- format_scientific: 1.556e-8 -> "1.556 × 10⁻⁸"
- calculation_steps: the four worked steps behind a reading (inverse-square
  law, FSPL, corrected power, dBm) with the numbers substituted in.
- summary_rows: label/value pairs for a compact summary panel.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .model_params import DEFAULT_PARAMS, SignalModelParams
from .signal_model import SignalReading

_SUPERSCRIPTS = str.maketrans("-0123456789", "⁻⁰¹²³⁴⁵⁶⁷⁸⁹")


def format_scientific(value: float, precision: int = 3) -> str:
    """Format a magnitude as mantissa × 10^exponent with a superscript exponent.

    Trailing zeros of the mantissa are dropped ("2 × 10⁻³", not "2.000 × 10⁻³").
    Zero and non-finite values render as "0".
    """
    if value == 0 or not math.isfinite(value):
        return "0"
    mantissa, exponent = f"{value:.{precision}e}".split("e")
    mantissa_text = format(float(mantissa), f".{precision + 1}g")
    exp_text = str(int(exponent)).translate(_SUPERSCRIPTS)
    return f"{mantissa_text} × 10{exp_text}"


def format_power_dbm(power_dbm: float) -> str:
    if power_dbm == -math.inf:
        return "No signal"
    return f"{power_dbm:.2f} dBm"


def _format_distance(distance_m: float) -> str:
    return format(distance_m, "g")


@dataclass(frozen=True)
class CalculationStep:
    title: str
    formula: str
    substituted: str
    result: str

    def as_text(self) -> str:
        return f"{self.title}:\n  {self.formula}\n  {self.substituted} = {self.result}"


def calculation_steps(reading: SignalReading, params: Optional[SignalModelParams] = None) -> List[CalculationStep]:
    """Worked calculation for a reading, one entry per step."""
    if params is None:
        params = DEFAULT_PARAMS
    d = _format_distance(reading.distance_m)
    ptx = format(params.tx_power_mw, "g")
    f_mhz = format(params.frequency_mhz, "g")
    return [
        CalculationStep(
            title="1. Inverse-Square Law",
            formula="I = P / (4πR²)",
            substituted=f"{ptx} / (4π({d})²)",
            result=f"{format_scientific(reading.received_power_mw)} mW",
        ),
        CalculationStep(
            title="2. FSPL",
            formula=f"FSPL = 20log₁₀(d_km) + 20log₁₀(f_MHz) + {params.fspl_constant_db:g}",
            substituted=f"20log₁₀({reading.distance_km:.4f}) + 20log₁₀({f_mhz}) + {params.fspl_constant_db:g}",
            result=f"{reading.path_loss_db:.2f} dB",
        ),
        CalculationStep(
            title="3. Corrected Power",
            formula="I_corrected = I × 10^(-FSPL/10)",
            substituted=f"{format_scientific(reading.received_power_mw)} × 10^(-{reading.path_loss_db:.2f}/10)",
            result=f"{format_scientific(reading.corrected_power_mw)} mW",
        ),
        CalculationStep(
            title="4. Convert to dBm",
            formula="P_dBm = 10log₁₀(P_mW)",
            substituted=f"10log₁₀({format_scientific(reading.corrected_power_mw)})",
            result=format_power_dbm(reading.power_dbm),
        ),
    ]


def summary_rows(reading: SignalReading) -> List[Tuple[str, str]]:
    return [
        ("Signal Strength", f"{reading.strength_percent:g}%"),
        ("Power", format_power_dbm(reading.power_dbm)),
        ("Distance", f"{_format_distance(reading.distance_m)} m"),
        ("Mbps", f"{reading.throughput_mbps} Mbps"),
    ]

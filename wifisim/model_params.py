"""Signal model parameters and a tolerant text parser.

This module provides:
- SignalModelParams: the fixed constants of the model (transmit power,
  frequency, sampled range, logistic curve shape, throughput ceiling).
- A regex-based parser that reads overrides from free-form text lines such as
  "Transmit power: 200 mW" or "Frequency: 5 GHz"; anything missing keeps its
  default.

Defaults reproduce the classroom setup: 100 mW at 2.4 GHz sampled over 20 m,
with the quality curve centred on -65 dBm.
"""
import logging
import math
import re
from dataclasses import dataclass, replace
from typing import Optional

from .fspl import dbm_to_mw

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignalModelParams:
    tx_power_mw: float = 100.0
    frequency_mhz: float = 2400.0
    max_distance_m: int = 20
    midpoint_dbm: float = -65.0
    steepness_db: float = 5.0
    max_throughput_mbps: float = 100.0
    fspl_constant_db: float = 32.44

    def __post_init__(self):
        if not self.tx_power_mw > 0:
            raise ValueError("tx_power_mw must be positive")
        if not self.frequency_mhz > 0:
            raise ValueError("frequency_mhz must be positive")
        if not self.steepness_db > 0:
            raise ValueError("steepness_db must be positive")
        if self.max_distance_m < 1:
            raise ValueError("max_distance_m must be at least 1")
        if not self.max_throughput_mbps >= 0:
            raise ValueError("max_throughput_mbps must be non-negative")


DEFAULT_PARAMS = SignalModelParams()

_NUMBER = r"([-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))"


def _parse_frequency_mhz(value: str) -> Optional[float]:
    m = re.search(_NUMBER + r"\s*(Hz|kHz|MHz|GHz)", value, re.IGNORECASE)
    if not m:
        return None
    num = float(m.group(1))
    unit = m.group(2).lower()
    scale = {"hz": 1e-6, "khz": 1e-3, "mhz": 1.0, "ghz": 1e3}[unit]
    return num * scale


def _parse_power_mw(value: str) -> Optional[float]:
    m = re.search(_NUMBER + r"\s*(dBm|mW|W)\b", value, re.IGNORECASE)
    if not m:
        return None
    num = float(m.group(1))
    unit = m.group(2).lower()
    if unit == "dbm":
        return dbm_to_mw(num)
    if unit == "w":
        return num * 1e3
    return num


def parse_params_text(text: str, defaults: Optional[SignalModelParams] = None) -> SignalModelParams:
    """Parse free-form text for model constants; fall back to defaults.

    Recognised lines (case-insensitive, ':' or '='):
        Transmit power: 100 mW      (also "Ptx", "Tx power"; mW, W or dBm)
        Frequency: 2.4 GHz          (Hz, kHz, MHz or GHz)
        Max distance: 20 m
        Midpoint: -65 dBm
        Steepness: 5 dB
        Max throughput: 100 Mbps
        FSPL constant: 32.44 dB

    Raises:
        ValueError: if a parsed value is outside the valid range.
    """
    if defaults is None:
        defaults = DEFAULT_PARAMS

    overrides = {}

    m = re.search(r"(transmit\s+power|tx\s*power|ptx)\s*[:=]\s*([^\n]+)", text, re.IGNORECASE)
    if m:
        parsed = _parse_power_mw(m.group(2))
        if parsed is not None:
            overrides["tx_power_mw"] = parsed

    m = re.search(r"(frequency|f_?mhz)\s*[:=]\s*([^\n]+)", text, re.IGNORECASE)
    if m:
        parsed = _parse_frequency_mhz(m.group(2))
        if parsed is not None:
            overrides["frequency_mhz"] = parsed

    m = re.search(r"max(imum)?\s*distance\s*[:=]\s*([0-9]+)\s*m\b", text, re.IGNORECASE)
    if m:
        overrides["max_distance_m"] = int(m.group(2))

    m = re.search(r"midpoint\s*[:=]\s*" + _NUMBER + r"\s*dBm", text, re.IGNORECASE)
    if m:
        overrides["midpoint_dbm"] = float(m.group(1))

    m = re.search(r"steepness\s*[:=]\s*" + _NUMBER + r"\s*(dB)?", text, re.IGNORECASE)
    if m:
        overrides["steepness_db"] = float(m.group(1))

    m = re.search(r"max(imum)?\s*throughput\s*[:=]\s*" + _NUMBER + r"\s*Mbps", text, re.IGNORECASE)
    if m:
        overrides["max_throughput_mbps"] = float(m.group(2))

    m = re.search(r"fspl\s*constant\s*[:=]\s*" + _NUMBER + r"\s*(dB)?", text, re.IGNORECASE)
    if m:
        overrides["fspl_constant_db"] = float(m.group(1))

    for key, value in overrides.items():
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"{key} must be finite")
    if overrides:
        logger.debug("Parameter overrides: %s", overrides)
    return replace(defaults, **overrides)


def load_params_from_text_file(path: str, defaults: Optional[SignalModelParams] = None) -> SignalModelParams:
    logger.debug("Loading model parameters from %s", path)
    with open(path, "r", encoding="utf-8", errors="ignore") as f:
        txt = f.read()
    return parse_params_text(txt, defaults)

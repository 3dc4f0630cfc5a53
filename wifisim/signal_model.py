"""Signal strength versus distance under free-space assumptions.

compute_reading turns one transmitter-receiver separation into a SignalReading:

1) Inverse-square law: I = Ptx / (4π d²)
2) FSPL: 20 log10(d_km) + 20 log10(f_MHz) + 32.44
3) Corrected power: I · 10^(-FSPL/10)
4) dBm: 10 log10(corrected)
5) Strength: logistic squashing of dBm around -65 dBm into 0..100 %
6) Throughput: strength share of the 100 Mbps ceiling

The model is deliberately stylised: the FSPL term is negative below 1 km and
the absolute dBm values are not calibrated to real antennas. compute_curve
samples the reading at every whole meter for plotting.
"""

import math
from dataclasses import dataclass
from typing import List, Optional

from .fspl import db_to_linear, fspl_db, inverse_square_power_mw, mw_to_dbm
from .model_params import DEFAULT_PARAMS, SignalModelParams

NO_SIGNAL_DBM = -math.inf


@dataclass(frozen=True)
class SignalReading:
    """Physical quantities for one distance. All fields derive from distance_m."""
    distance_m: float
    distance_km: float
    received_power_mw: float
    path_loss_db: float
    corrected_power_mw: float
    power_dbm: float
    strength_percent: float
    throughput_mbps: int

    @property
    def has_signal(self) -> bool:
        return self.power_dbm != NO_SIGNAL_DBM


def _logistic_percent(power_dbm: float, midpoint_dbm: float, steepness_db: float) -> float:
    # 100 / (1 + e^(-z)), arranged so exp() never overflows
    z = (power_dbm - midpoint_dbm) / steepness_db
    if z >= 0:
        return 100.0 / (1.0 + math.exp(-z))
    ez = math.exp(z)
    return 100.0 * ez / (1.0 + ez)


def _round_half_up(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def no_signal_reading(distance_m: float) -> SignalReading:
    """Sentinel for a non-positive distance: no power, 0 % strength."""
    return SignalReading(
        distance_m=distance_m,
        distance_km=distance_m / 1000.0,
        received_power_mw=0.0,
        path_loss_db=0.0,
        corrected_power_mw=0.0,
        power_dbm=NO_SIGNAL_DBM,
        strength_percent=0.0,
        throughput_mbps=0,
    )


def compute_reading(distance_m: float, params: Optional[SignalModelParams] = None) -> SignalReading:
    """Compute the signal reading at distance_m meters from the router.

    Args:
        distance_m: finite separation in meters; <= 0 yields the no-signal sentinel
        params: model constants (defaults to 100 mW at 2400 MHz)
    """
    if params is None:
        params = DEFAULT_PARAMS
    if distance_m <= 0:
        return no_signal_reading(distance_m)

    distance_km = distance_m / 1000.0
    received_mw = inverse_square_power_mw(params.tx_power_mw, distance_m)
    path_loss = fspl_db(distance_km, params.frequency_mhz, params.fspl_constant_db)
    corrected_mw = received_mw * db_to_linear(-path_loss)
    power_dbm = mw_to_dbm(corrected_mw)

    raw = _logistic_percent(power_dbm, params.midpoint_dbm, params.steepness_db)
    strength = round(raw, 1)
    throughput = _round_half_up(raw / 100.0 * params.max_throughput_mbps)

    return SignalReading(
        distance_m=distance_m,
        distance_km=distance_km,
        received_power_mw=received_mw,
        path_loss_db=path_loss,
        corrected_power_mw=corrected_mw,
        power_dbm=power_dbm,
        strength_percent=strength,
        throughput_mbps=throughput,
    )


def compute_curve(max_distance_m: Optional[int] = None, params: Optional[SignalModelParams] = None) -> List[SignalReading]:
    """Readings at 1, 2, ..., max_distance_m meters (ascending).

    max_distance_m defaults to params.max_distance_m (20 m).
    """
    if params is None:
        params = DEFAULT_PARAMS
    if max_distance_m is None:
        max_distance_m = params.max_distance_m
    return [compute_reading(d, params) for d in range(1, int(max_distance_m) + 1)]

"""FSPL and power-unit utilities.

This file implements the path-loss math behind the signal model:
- fspl_db: free-space path loss with distance in km and frequency in MHz
  (20 log10(d_km) + 20 log10(f_MHz) + 32.44).
- inverse_square_power_mw: power density of an isotropic source at a distance.
- mw_to_dbm / dbm_to_mw: conversions between milliwatts and dBm.

The 32.44 dB constant is 20 log10(4π/c) with km/MHz scaling folded in.
"""

import math

_FOUR_PI = 4.0 * math.pi
FSPL_KM_MHZ_CONSTANT_DB = 32.44


def fspl_db(distance_km: float, frequency_mhz: float, constant_db: float = FSPL_KM_MHZ_CONSTANT_DB) -> float:
    """Free-space path loss in dB: 20 log10(d_km) + 20 log10(f_MHz) + 32.44.

    Sub-kilometre distances give a negative first term, so the result can be
    small or even negative at short range.

    Args:
        distance_km: distance in kilometres (> 0)
        frequency_mhz: frequency in MHz (> 0)
    """
    if distance_km <= 0 or frequency_mhz <= 0:
        raise ValueError("distance and frequency must be positive")
    return 20.0 * math.log10(distance_km) + 20.0 * math.log10(frequency_mhz) + constant_db


def inverse_square_power_mw(tx_power_mw: float, distance_m: float) -> float:
    """Power density I = P / (4π R²) at distance R (meters).

    Returns inf when R² underflows to zero.
    """
    if distance_m <= 0:
        raise ValueError("distance must be positive")
    sphere = _FOUR_PI * distance_m * distance_m
    if sphere == 0.0:
        return math.inf
    return tx_power_mw / sphere


def db_to_linear(value_db: float) -> float:
    """10^(dB/10), saturating to inf instead of raising on overflow."""
    try:
        return 10.0 ** (value_db / 10.0)
    except OverflowError:
        return math.inf


def mw_to_dbm(power_mw: float) -> float:
    """Convert mW to dBm: 10 log10(P_mW). Zero power maps to -inf."""
    if power_mw == 0.0:
        return -math.inf
    if power_mw < 0:
        raise ValueError("power must be non-negative")
    return 10.0 * math.log10(power_mw)


def dbm_to_mw(power_dbm: float) -> float:
    """Convert dBm to mW: 10^(P_dBm/10)."""
    return db_to_linear(power_dbm)

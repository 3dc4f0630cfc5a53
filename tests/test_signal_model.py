import math

from wifisim.model_params import SignalModelParams
from wifisim.signal_model import NO_SIGNAL_DBM, compute_curve, compute_reading


def test_reading_at_six_meters():
    r = compute_reading(6)
    assert abs(r.distance_km - 0.006) < 1e-12
    # 100 / (4π·36)
    assert abs(r.received_power_mw - 0.2210) < 1e-3
    # 20log10(0.006) + 20log10(2400) + 32.44 = -44.437 + 67.604 + 32.44
    assert abs(r.path_loss_db - 55.607) < 1e-2
    assert abs(r.corrected_power_mw - 6.078e-7) / 6.078e-7 < 1e-3
    assert abs(r.power_dbm - (-62.162)) < 1e-2
    assert abs(r.strength_percent - 63.8) < 1e-9
    assert r.throughput_mbps == 64
    assert r.has_signal


def test_steps_are_consistent():
    r = compute_reading(7.5)
    assert abs(r.received_power_mw - 100.0 / (4 * math.pi * 7.5 ** 2)) < 1e-12
    expected_pl = 20 * math.log10(0.0075) + 20 * math.log10(2400) + 32.44
    assert abs(r.path_loss_db - expected_pl) < 1e-9
    assert abs(r.power_dbm - 10 * math.log10(r.corrected_power_mw)) < 1e-9
    raw = 100 / (1 + math.exp(-(r.power_dbm + 65) / 5))
    assert r.strength_percent == round(raw, 1)


def test_sub_km_path_loss_is_small():
    # The km/MHz formula keeps its negative log term at short range
    r = compute_reading(0.001)
    assert r.path_loss_db < 0


def test_zero_and_negative_distance_give_sentinel():
    for d in (0, 0.0, -3.0):
        r = compute_reading(d)
        assert r.strength_percent == 0
        assert r.power_dbm == NO_SIGNAL_DBM
        assert r.throughput_mbps == 0
        assert r.received_power_mw == 0.0
        assert r.corrected_power_mw == 0.0
        assert not r.has_signal


def test_strength_bounded():
    for d in (0.001, 0.5, 1, 3.3, 20, 150, 1e4, 1e9):
        s = compute_reading(d).strength_percent
        assert 0.0 <= s <= 100.0
        t = compute_reading(d).throughput_mbps
        assert 0 <= t <= 100


def test_extreme_distances_do_not_raise():
    near = compute_reading(1e-200)
    assert near.strength_percent == 100.0
    far = compute_reading(1e200)
    assert far.strength_percent == 0.0
    assert far.throughput_mbps == 0


def test_nan_propagates():
    r = compute_reading(float("nan"))
    assert math.isnan(r.power_dbm)
    assert math.isnan(r.strength_percent)
    assert r.throughput_mbps == 0


def test_deterministic():
    assert compute_reading(13.7) == compute_reading(13.7)
    assert compute_curve(20) == compute_curve(20)


def test_curve_has_twenty_ascending_entries():
    curve = compute_curve(20)
    assert len(curve) == 20
    assert [r.distance_m for r in curve] == list(range(1, 21))


def test_curve_default_uses_max_distance():
    assert len(compute_curve()) == 20
    assert len(compute_curve(params=SignalModelParams(max_distance_m=5))) == 5
    assert compute_curve(0) == []


def test_strength_non_increasing_with_distance():
    curve = compute_curve(20)
    for a, b in zip(curve, curve[1:]):
        assert b.strength_percent <= a.strength_percent
        assert b.power_dbm < a.power_dbm
    assert curve[0].strength_percent > 99.0
    assert curve[-1].strength_percent < 5.0


def test_curve_matches_single_readings():
    curve = compute_curve(20)
    assert curve[5] == compute_reading(6)


def test_params_change_result():
    base = compute_reading(6)
    louder = compute_reading(6, SignalModelParams(tx_power_mw=1000.0))
    higher_f = compute_reading(6, SignalModelParams(frequency_mhz=5000.0))
    assert abs((louder.power_dbm - base.power_dbm) - 10.0) < 1e-9
    assert higher_f.strength_percent < base.strength_percent


def test_throughput_uses_unrounded_strength():
    # raw strength at 14 m is ~8.4999: shown as 8.5 %, but 8 Mbps
    r = compute_reading(14)
    assert r.strength_percent == 8.5
    assert r.throughput_mbps == 8


def test_curve_throughput_matches_raw_strength():
    for r in compute_curve(20):
        raw = 100 / (1 + math.exp(-(r.power_dbm + 65) / 5))
        assert r.throughput_mbps == math.floor(raw + 0.5)

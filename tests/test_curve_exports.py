import csv
from pathlib import Path

import numpy as np
import pytest

from wifisim.cli import main
from wifisim.curve import CURVE_COLUMNS, curve_arrays, readings_to_table, save_curve_csv
from wifisim.plots import plot_signal_curve
from wifisim.signal_model import compute_curve


def test_readings_to_table():
    table = readings_to_table(compute_curve(20))
    assert table[0] == CURVE_COLUMNS
    assert len(table) == 21
    assert table[6] == ["6", "63.8", "-62.16", "55.61", "64"]


def test_save_curve_csv(tmp_path: Path):
    out = save_curve_csv(compute_curve(20), tmp_path / "nested" / "curve.csv")
    with out.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))
    assert rows[0] == CURVE_COLUMNS
    assert [r[0] for r in rows[1:]] == [str(d) for d in range(1, 21)]


def test_curve_arrays():
    arrays = curve_arrays(compute_curve(20))
    assert arrays["distance_m"].shape == (20,)
    assert np.all(np.diff(arrays["strength_percent"]) <= 0)
    assert np.all(np.diff(arrays["power_dbm"]) < 0)


def test_plot_signal_curve(tmp_path: Path):
    out = plot_signal_curve(compute_curve(20), tmp_path / "curve.png", highlight_distance_m=6)
    assert out.exists() and out.stat().st_size > 0


def test_plot_requires_readings(tmp_path: Path):
    with pytest.raises(ValueError):
        plot_signal_curve([], tmp_path / "empty.png")


def test_cli_reading_and_steps(capsys):
    assert main(["--distance", "6", "--steps"]) == 0
    out = capsys.readouterr().out
    assert "Signal Strength: 63.8%" in out
    assert "Power: -62.16 dBm" in out
    assert "Quality: Moderate" in out
    assert "2. FSPL" in out


def test_cli_exports(tmp_path: Path, capsys):
    csv_path = tmp_path / "curve.csv"
    png_path = tmp_path / "curve.png"
    assert main(["--distance", "3", "--curve", "--max-distance", "10", "--csv", str(csv_path), "--plot", str(png_path)]) == 0
    out = capsys.readouterr().out
    assert "Saved 10 rows" in out
    assert csv_path.exists()
    assert png_path.exists()


def test_cli_params_file(tmp_path: Path, capsys):
    params = tmp_path / "params.txt"
    params.write_text("Transmit power: 1000 mW\n", encoding="utf-8")
    main(["--distance", "6", "--params", str(params)])
    out = capsys.readouterr().out
    assert "Power: -52.16 dBm" in out


def test_cli_rejects_non_finite_distance():
    with pytest.raises(SystemExit):
        main(["--distance", "nan"])


def test_cli_rejects_out_of_range_params(tmp_path: Path):
    params = tmp_path / "params.txt"
    params.write_text("Ptx = 4000 dBm\n", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["--params", str(params)])

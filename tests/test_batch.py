import numpy as np
import pytest

import linfit_batch


@pytest.fixture
def csv_file(tmp_path):
    x = np.arange(1, 9, dtype=float)
    y = 3.0 + 0.5 * x + np.array([0.1, -0.2, 0.05, 0.0, -0.1, 0.15, -0.05, 0.02])
    lines = ["x,y"] + [f"{a},{b}" for a, b in zip(x, y)]
    path = tmp_path / "line.csv"
    path.write_text("\n".join(lines) + "\n")
    return path


def test_batch_writes_results(csv_file, tmp_path):
    code = linfit_batch.main([str(tmp_path / "*.csv"), "--grid=-5:10,0:2",
                              "--resolution", "11", "--top", "5",
                              "--log-dir", str(tmp_path / "logs")])
    assert code == 0

    report = (tmp_path / "line_results.txt").read_text()
    assert "[[ GRID SEARCH ]]" in report
    assert "Candidates: 5" in report

    rows = (tmp_path / "line_data.txt").read_text().splitlines()
    assert rows[0] == "X\tY_Exp\tY_Fit\tResidual"
    assert len(rows) == 9


def test_batch_scipy_with_initial_guess(csv_file, tmp_path):
    code = linfit_batch.main([str(csv_file), "--minimizer", "scipy",
                              "--initial", "1,1", "--log-dir", str(tmp_path / "logs")])
    assert code == 0
    assert "scipy:Nelder-Mead" in (tmp_path / "line_results.txt").read_text()


def test_batch_no_match(tmp_path):
    assert linfit_batch.main([str(tmp_path / "*.dat"),
                              "--log-dir", str(tmp_path / "logs")]) == 1


def test_batch_reports_failing_file(tmp_path):
    bad = tmp_path / "flat.csv"
    bad.write_text("x,y\n2,1\n2,3\n")
    code = linfit_batch.main([str(bad), "--log-dir", str(tmp_path / "logs")])
    assert code == 1
    assert not (tmp_path / "flat_results.txt").exists()


def test_parse_ranges():
    assert linfit_batch.parse_ranges("-5:20,1:3") == [(-5.0, 20.0), (1.0, 3.0)]
    with pytest.raises(ValueError):
        linfit_batch.parse_ranges("0:1")

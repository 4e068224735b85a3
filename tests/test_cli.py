import io

from brakecalc.braking import compute_brake_distance, estimate_stop
from brakecalc.cli import main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main()
    return code, capsys.readouterr().out


def test_brake_decision(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "20\n1.0\n5\n45\n")
    assert code == 0
    assert "Decision (margin=10%):        BRAKE\n" in out


def test_ok_decision(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "20 1.0 5 100\n")
    assert code == 0
    assert "Decision (margin=10%):        OK\n" in out


def test_distances_printed_with_three_decimals(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "20\n1\n5\n45\n")
    estimate = estimate_stop(20.0, 1.0, 5.0, 0.10)
    assert code == 0
    assert f"Brake distance:               {compute_brake_distance(20.0, 5.0):.3f} m" in out
    assert f"Total distance (no margin):   {estimate.total:.3f} m" in out
    assert f"Total distance (+10% margin): {estimate.total_with_margin:.3f} m" in out


def test_prompts_are_written(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "20\n1\n5\n45\n")
    assert out.startswith("Enter speed (m/s): Enter reaction time (s): ")
    assert "Enter distance to obstacle (m): " in out


def test_non_numeric_input_fails(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "fast\n")
    assert code == 1
    assert "Decision" not in out


def test_missing_input_fails(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "20\n1\n")
    assert code == 1
    assert "Decision" not in out


def test_zero_deceleration_fails(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "20\n1\n0\n45\n")
    assert code == 1
    assert "Decision" not in out
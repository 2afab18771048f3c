"""Tests for the polykit.demo walk-through."""

from polykit import demo
from polykit.polynomial import MismatchError


def test_demo_output(capsys):
    """Tests the full printed output of the demo."""
    demo.main()
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (5, 6), (6, 7), (7, 8), (8, 9)",
        "(0, 2), (1, 6), (2, 12), (3, 20), (4, 30), (5, 42), (6, 56), (7, 72)",
        "0",
        "-2",
        "2",
        "0",
    ]


def test_demo_stops_silently_on_mismatch(capsys, monkeypatch):
    """Tests that a construction failure ends the demo without output."""

    def _fail(*_args, **_kwargs):
        raise MismatchError()

    monkeypatch.setattr(demo, "Polynomial", _fail)
    demo.main()
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""

"""Basic tests of the rendering of the charts"""
from __future__ import annotations

# Standard Imports
import os

# Third-Party Imports
import matplotlib.pyplot as plt
import pytest

# Asymptote Imports
from asymptote.utils.structs import MeasurementPoint
from asymptote.view import chart

POINTS = [MeasurementPoint(10, 0.5, 0.01), MeasurementPoint(100, 5.0, 0.1)]
PNG_SIGNATURE = b"\x89PNG"


@pytest.mark.usefixtures("cleandir")
def test_export_chart():
    """Test storing the chart into the not yet existing directory

    Expecting that the directory is created and the image is stored in it.
    """
    path = chart.export_chart("Summing", POINTS, os.path.join("analytics", "nested"))
    assert path == os.path.join("analytics", "nested", chart.DEFAULT_FILE_NAME)
    with open(path, "rb") as chart_handle:
        assert chart_handle.read(4) == PNG_SIGNATURE

    # The directory is created idempotently and the chart is overwritten
    path = chart.export_chart("Summing", POINTS[:1], os.path.join("analytics", "nested"))
    assert os.path.exists(path)
    assert not plt.get_fignums()


@pytest.mark.usefixtures("cleandir")
def test_export_chart_formats():
    """Test that the format of the chart is given by the extension and the size is respected"""
    path = chart.export_chart("Summing", POINTS, "out", "chart.svg", width=400, height=300)
    with open(path, "r") as chart_handle:
        assert "<svg" in chart_handle.read()

    path = chart.export_chart("Empty", [], "out", "empty.png")
    assert os.path.exists(path)


@pytest.mark.usefixtures("cleandir")
def test_export_chart_failure(monkeypatch):
    """Test that the failures of storing the chart are propagated and the figure is closed"""

    def failing_savefig(*_, **__):
        raise OSError("disk is full")

    monkeypatch.setattr("matplotlib.figure.Figure.savefig", failing_savefig)
    with pytest.raises(OSError, match="disk is full"):
        chart.export_chart("Summing", POINTS, "analytics")
    assert not plt.get_fignums()


@pytest.mark.usefixtures("cleandir")
def test_export_chart_into_file():
    """Test that the output directory which is a regular file cannot be used"""
    with open("analytics", "w") as blocking_file:
        blocking_file.write("not a directory")

    with pytest.raises(OSError):
        chart.export_chart("Summing", POINTS, "analytics")

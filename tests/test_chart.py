"""
Tests for the matplotlib chart renderer.
"""

from emissions.calculator import calculate
from emissions.chart import build_figure, render_png, BREAK_EVEN_COLOR
from emissions.records import InputRecord

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class TestChart:

    def test_png_bytes(self, reference_inputs):
        png = render_png(calculate(reference_inputs), dpi=50)
        assert png.startswith(PNG_SIGNATURE)

    def test_two_curves_and_marker(self, reference_inputs):
        fig = build_figure(calculate(reference_inputs))
        ax = fig.axes[0]
        labels = [line.get_label() for line in ax.get_lines()]
        assert "ICE" in labels and "BEV" in labels
        # ICE, BEV and the dashed break-even line
        assert len(ax.get_lines()) == 3
        assert any("Break-even" in t.get_text() for t in ax.texts)

    def test_no_marker_without_finite_break_even(self):
        inputs = InputRecord(distances=[0, 1000], ice_weight=1500,
                             bev_weight=1800, alpha_grid=50.0)
        fig = build_figure(calculate(inputs))
        ax = fig.axes[0]
        assert len(ax.get_lines()) == 2
        assert not ax.texts

    def test_single_distance(self):
        inputs = InputRecord(distances=[0], ice_weight=1500, bev_weight=1800)
        png = render_png(calculate(inputs), dpi=50)
        assert png.startswith(PNG_SIGNATURE)

    def test_axis_labels(self, reference_inputs):
        ax = build_figure(calculate(reference_inputs)).axes[0]
        assert ax.get_xlabel() == "Distance (km)"
        assert "kgCO2e" in ax.get_ylabel()
        assert BREAK_EVEN_COLOR.startswith("#")

    def test_break_even_beyond_distances(self):
        """Break-even near 19871 km, distances stop at 100 km."""
        inputs = InputRecord(distances=[0, 50, 100], ice_weight=1750,
                             bev_weight=1900, alpha_fuel=2.7)
        result = calculate(inputs)
        assert result.break_even_distance > 100
        fig = build_figure(result)
        ax = fig.axes[0]
        assert len(ax.get_lines()) == 2
        assert not ax.texts
        assert render_png(result, dpi=50).startswith(PNG_SIGNATURE)

    def test_single_zero_distance_with_finite_break_even(self):
        inputs = InputRecord(distances=[0], ice_weight=1750,
                             bev_weight=1900, alpha_fuel=2.7)
        result = calculate(inputs)
        assert result.break_even_distance is not None
        assert render_png(result, dpi=50).startswith(PNG_SIGNATURE)

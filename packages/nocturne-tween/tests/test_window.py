"""Tests for windowed interpolation, Window validation and remap."""

import pytest

from nocturne_tween import (
    EASINGS,
    InvalidWindowError,
    Window,
    ease_sinusoidal,
    interpolate,
    remap,
)

WINDOWS = [(0.0, 1.0), (0.2, 0.25), (0.45, 0.6), (0.28, 0.31)]


class TestInterpolateClamping:
    """Outside the window the result is exactly 0 or 1."""

    @pytest.mark.parametrize("start,end", WINDOWS)
    def test_before_start_is_zero(self, start, end):
        for name, fn in EASINGS.items():
            for p in (start - 0.5, start - 1e-9, start):
                assert interpolate(p, start, end, fn) == 0.0, name

    @pytest.mark.parametrize("start,end", WINDOWS)
    def test_after_end_is_one(self, start, end):
        for name, fn in EASINGS.items():
            for p in (end, end + 1e-9, end + 0.5):
                assert interpolate(p, start, end, fn) == 1.0, name


class TestInterpolateInside:
    """Inside the window the result is the eased normalized position."""

    def test_linear_midpoint(self):
        assert interpolate(0.5, 0.0, 1.0) == 0.5

    def test_default_easing_is_linear(self):
        assert interpolate(0.3, 0.2, 0.4) == pytest.approx(0.5)

    def test_sinusoidal_midpoint(self):
        assert interpolate(0.225, 0.20, 0.25, ease_sinusoidal) == pytest.approx(0.5)

    @pytest.mark.parametrize("name", ["linear", "ease_out", "ease_sinusoidal", "ease_in_out"])
    def test_monotonic_inside_window(self, name):
        fn = EASINGS[name]
        points = [0.2 + 0.05 * i / 50 for i in range(51)]
        values = [interpolate(p, 0.2, 0.25, fn) for p in points]
        assert values == sorted(values)

    @pytest.mark.parametrize("name", list(EASINGS))
    def test_continuous_at_boundaries(self, name):
        fn = EASINGS[name]
        eps = 1e-9
        assert interpolate(0.45 + eps, 0.45, 0.6, fn) == pytest.approx(0.0, abs=1e-6)
        assert interpolate(0.6 - eps, 0.45, 0.6, fn) == pytest.approx(1.0, abs=1e-6)

    def test_pure_and_repeatable(self):
        a = interpolate(0.5123, 0.45, 0.6, ease_sinusoidal)
        b = interpolate(0.5123, 0.45, 0.6, ease_sinusoidal)
        assert a == b

    def test_degenerate_bounds_never_divide(self):
        """Equal bounds fall into one of the clamping branches."""
        assert interpolate(0.3, 0.3, 0.3) == 0.0
        assert interpolate(0.31, 0.3, 0.3) == 1.0


class TestWindow:
    """Window construction and helpers."""

    def test_valid_window(self):
        w = Window(0.2, 0.25)
        assert w.width == pytest.approx(0.05)

    @pytest.mark.parametrize(
        "start,end", [(0.3, 0.3), (0.5, 0.4), (-0.1, 0.2), (0.8, 1.2)]
    )
    def test_invalid_window_rejected(self, start, end):
        with pytest.raises(InvalidWindowError):
            Window(start, end)

    def test_invalid_window_error_is_value_error(self):
        assert issubclass(InvalidWindowError, ValueError)

    def test_apply_by_name_matches_interpolate(self):
        w = Window(0.45, 0.6)
        assert w.apply(0.5, "ease_sinusoidal") == interpolate(0.5, 0.45, 0.6, ease_sinusoidal)

    def test_contains_is_strict(self):
        w = Window(0.2, 0.25)
        assert not w.contains(0.2)
        assert w.contains(0.22)
        assert not w.contains(0.25)

    def test_touching_windows_do_not_overlap(self):
        assert not Window(0.2, 0.25).overlaps(Window(0.25, 0.3))

    def test_overlapping_windows(self):
        assert Window(0.28, 0.48).overlaps(Window(0.45, 0.6))
        assert Window(0.45, 0.6).overlaps(Window(0.28, 0.48))

    def test_window_is_immutable(self):
        w = Window(0.2, 0.25)
        with pytest.raises(AttributeError):
            w.start = 0.1  # type: ignore[misc]


class TestRemap:
    """Piecewise mapping through stops."""

    def test_arrow_exit_curve(self):
        stops, outputs = (0.0, 0.13, 1.0), (0.0, 800.0, 800.0)
        assert remap(0.0, stops, outputs) == 0.0
        assert remap(0.065, stops, outputs) == pytest.approx(400.0)
        assert remap(0.13, stops, outputs) == pytest.approx(800.0)
        assert remap(0.6, stops, outputs) == 800.0

    def test_clamped_outside_stops(self):
        assert remap(-1.0, (0.0, 1.0), (10.0, 20.0)) == 10.0
        assert remap(2.0, (0.0, 1.0), (10.0, 20.0)) == 20.0

    def test_decreasing_outputs(self):
        assert remap(0.5, (0.0, 1.0), (600.0, 0.0)) == pytest.approx(300.0)

    def test_length_mismatch_raises(self):
        with pytest.raises(ValueError):
            remap(0.5, (0.0, 1.0), (0.0,))

    def test_non_increasing_stops_raise(self):
        with pytest.raises(ValueError):
            remap(0.5, (0.0, 0.5, 0.5), (0.0, 1.0, 2.0))

    def test_single_stop_raises(self):
        with pytest.raises(ValueError):
            remap(0.5, (0.0,), (1.0,))

"""Tests for the default cast and window checks."""
import pytest

from nocturne_scene import (
    ArrowConfig,
    CloudConfig,
    MoonConfig,
    SceneConfig,
    StarConfig,
    default_ensemble,
    entrance_windows,
    overlapping_pairs,
    star_configs,
    validate_ensemble,
    window_coverage,
)
from nocturne_tween import InvalidWindowError, Window


class TestDefaultEnsemble:
    """The hand-placed night sky."""

    def test_cast(self):
        ensemble = default_ensemble()
        assert isinstance(ensemble[0], ArrowConfig)
        assert sum(isinstance(c, StarConfig) for c in ensemble) == 11
        assert isinstance(ensemble[-2], MoonConfig)
        assert isinstance(ensemble[-1], CloudConfig)

    def test_star_entrances_are_staggered(self):
        windows = [s.window for s in star_configs()]
        assert overlapping_pairs(windows) == []
        assert window_coverage(windows) == [(0.20, 0.75)]

    def test_stars_use_every_layer(self):
        assert {s.layer for s in star_configs()} == {"background", "midground", "foreground"}

    def test_moon_overlaps_late_stars(self):
        windows = entrance_windows(default_ensemble())
        moon_index = len(windows) - 2
        assert any(moon_index in pair for pair in overlapping_pairs(windows))

    def test_default_ensemble_is_valid(self):
        assert validate_ensemble(default_ensemble()) == default_ensemble()


class TestEntrances:
    """Which window counts as each element's entrance."""

    def test_cloud_enters_with_its_fade(self):
        cloud = CloudConfig()
        assert cloud.entrance == cloud.fade
        assert entrance_windows([ArrowConfig(), cloud]) == [cloud.fade]

    def test_arrow_has_no_entrance(self):
        assert ArrowConfig().entrance is None

    def test_star_and_moon_enter_with_their_window(self):
        star = star_configs()[0]
        assert star.entrance == star.window
        assert MoonConfig().entrance == Window(0.45, 0.60)

    def test_sizes(self):
        assert ArrowConfig().size == 0.0
        assert CloudConfig().size == 170.0
        assert MoonConfig().size == 140.0


class TestValidation:
    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            validate_ensemble([])

    def test_foreign_entry_rejected(self):
        with pytest.raises(TypeError, match="entry 1"):
            validate_ensemble([ArrowConfig(), "star"])

    def test_second_arrow_rejected(self):
        with pytest.raises(ValueError, match="arrow"):
            validate_ensemble([ArrowConfig(), ArrowConfig()])

    def test_inverted_window_rejected_at_construction(self):
        with pytest.raises(InvalidWindowError):
            StarConfig(x=10, y=10, size=10, window=Window(0.5, 0.4))

    @pytest.mark.parametrize(
        "kwargs",
        [{"x": 120}, {"size": 0}, {"points": 1}, {"layer": "haze"}],
    )
    def test_bad_star_rejected(self, kwargs):
        base = {"x": 10, "y": 10, "size": 10, "window": Window(0.2, 0.3)}
        with pytest.raises(ValueError):
            StarConfig(**{**base, **kwargs})


class TestWindowCoverage:
    def test_touching_windows_merge(self):
        assert window_coverage([Window(0.3, 0.4), Window(0.1, 0.3)]) == [(0.1, 0.4)]

    def test_gaps_are_kept(self):
        assert window_coverage([Window(0.1, 0.2), Window(0.5, 0.6)]) == [
            (0.1, 0.2), (0.5, 0.6),
        ]


class TestSceneConfig:
    def test_defaults(self):
        config = SceneConfig()
        assert config.fps == 60
        assert config.completion_threshold == 0.99

    @pytest.mark.parametrize(
        "kwargs",
        [{"fps": 0}, {"viewport_height": -1}, {"spacer_vh": 100}, {"completion_threshold": 0}],
    )
    def test_bad_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            SceneConfig(**kwargs)

"""Tests for Stage, staged sampling and make_sequence_system."""

from dataclasses import dataclass, field

import pytest

from nocturne import Engine
from nocturne_schedule import Sequence, Stage, make_sequence_system, sample_sequence, sample_stage

DRAW_STAGES = (
    Stage(channel="shaft", delay=1.0, duration=1.8, easing="ease_in_out"),
    Stage(channel="head_left", delay=3.0, duration=0.6, easing="ease_out"),
    Stage(channel="head_right", delay=3.3, duration=0.6, easing="ease_out"),
)


@dataclass
class Strokes:
    """Test component receiving sampled values."""

    values: dict[str, float] = field(default_factory=dict)


def _writer(world, ctx, eid, values):
    if world.has(eid, Strokes):
        world.get(eid, Strokes).values.update(values)


class TestStageValidation:
    """Stage rejects impossible timings up front."""

    def test_negative_delay_rejected(self):
        with pytest.raises(ValueError):
            Stage(channel="shaft", delay=-0.1, duration=1.0)

    @pytest.mark.parametrize("duration", [0.0, -1.0])
    def test_non_positive_duration_rejected(self, duration):
        with pytest.raises(ValueError):
            Stage(channel="shaft", delay=0.0, duration=duration)

    def test_unknown_easing_rejected(self):
        with pytest.raises(ValueError, match="bounce"):
            Stage(channel="shaft", delay=0.0, duration=1.0, easing="bounce")

    def test_empty_channel_rejected(self):
        with pytest.raises(ValueError):
            Stage(channel="", delay=0.0, duration=1.0)

    def test_end_is_delay_plus_duration(self):
        assert Stage(channel="a", delay=3.3, duration=0.6).end == pytest.approx(3.9)


class TestSampling:
    """Pure sampling of the three-stroke draw-in."""

    def test_everything_zero_at_start(self):
        assert sample_sequence(DRAW_STAGES, 0.0) == {
            "shaft": 0.0,
            "head_left": 0.0,
            "head_right": 0.0,
        }

    def test_shaft_waits_for_its_delay(self):
        assert sample_stage(DRAW_STAGES[0], 1.0) == 0.0

    def test_shaft_half_drawn_mid_stage(self):
        assert sample_stage(DRAW_STAGES[0], 1.9) == pytest.approx(0.5)

    def test_shaft_complete_after_delay_and_duration(self):
        assert sample_stage(DRAW_STAGES[0], 2.8) == pytest.approx(1.0)
        assert sample_stage(DRAW_STAGES[0], 2.81) == 1.0

    def test_heads_complete_by_three_point_nine(self):
        values = sample_sequence(DRAW_STAGES, 3.9)
        assert values["head_left"] == 1.0
        assert values["head_right"] == pytest.approx(1.0)

    def test_right_head_lags_left(self):
        values = sample_sequence(DRAW_STAGES, 3.4)
        assert values["head_left"] > values["head_right"] > 0.0

    def test_target_scales_value(self):
        stage = Stage(channel="x", delay=0.0, duration=1.0, target=40.0)
        assert sample_stage(stage, 0.5) == pytest.approx(20.0)

    def test_sampling_is_repeatable(self):
        assert sample_sequence(DRAW_STAGES, 3.1234) == sample_sequence(DRAW_STAGES, 3.1234)


class TestSequenceSystem:
    """Sequence advanced by the frame engine."""

    def _setup(self, fps=10, **callbacks):
        engine = Engine(fps=fps)
        world = engine.world
        eid = world.spawn()
        world.attach(eid, Strokes())
        world.attach(eid, Sequence(stages=DRAW_STAGES))
        engine.add_system(make_sequence_system(_writer, **callbacks))
        return engine, world, eid

    def test_values_follow_elapsed_time(self):
        engine, world, eid = self._setup()
        for _ in range(10):
            engine.step()
        assert world.get(eid, Strokes).values["shaft"] == 0.0

        for _ in range(18):
            engine.step()
        assert world.get(eid, Strokes).values["shaft"] == pytest.approx(1.0)
        assert world.get(eid, Strokes).values["head_left"] == 0.0

    def test_stage_complete_fires_once_per_stage_in_order(self):
        done = []
        engine, world, eid = self._setup(
            on_stage_complete=lambda w, c, e, stage: done.append(stage.channel)
        )
        for _ in range(60):
            engine.step()
        assert done == ["shaft", "head_left", "head_right"]

    def test_sequence_auto_detaches_when_finished(self):
        finished = []
        engine, world, eid = self._setup(
            on_complete=lambda w, c, e, seq: finished.append(c.frame_number)
        )
        for _ in range(39):
            engine.step()
        assert not world.has(eid, Sequence)
        assert finished == [39]
        assert world.get(eid, Strokes).values == {
            "shaft": 1.0,
            "head_left": 1.0,
            "head_right": 1.0,
        }

    def test_detached_sequence_stops_writing(self):
        engine, world, eid = self._setup()
        for _ in range(15):
            engine.step()
        world.detach(eid, Sequence)
        frozen = dict(world.get(eid, Strokes).values)
        for _ in range(30):
            engine.step()
        assert world.get(eid, Strokes).values == frozen

    def test_despawned_element_receives_no_callbacks(self):
        calls = []
        engine, world, eid = self._setup(
            on_stage_complete=lambda w, c, e, s: calls.append(e),
        )
        engine.step()
        world.despawn(eid)
        for _ in range(60):
            engine.step()
        assert calls == []

    def test_despawn_inside_callback_skips_later_callbacks(self):
        """A stage callback that tears the element down silences the rest."""
        engine = Engine(fps=10)
        world = engine.world
        eid = world.spawn()
        simultaneous = (
            Stage(channel="a", delay=0.0, duration=0.1),
            Stage(channel="b", delay=0.0, duration=0.1),
        )
        world.attach(eid, Sequence(stages=simultaneous))
        seen = []

        def on_stage(w, c, e, stage):
            seen.append(stage.channel)
            w.despawn(e)

        finished = []
        engine.add_system(
            make_sequence_system(
                _writer,
                on_stage_complete=on_stage,
                on_complete=lambda w, c, e, s: finished.append(e),
            )
        )
        engine.step()
        engine.step()
        assert seen == ["a"]
        assert finished == []
        assert not world.alive(eid)


RISE_THEN_DIM = (
    Stage(channel="glow", delay=0.0, duration=0.5),
    Stage(channel="glow", delay=1.0, duration=0.5, target=0.5),
)


class TestChainedStages:
    """Stages sharing a channel run one after another."""

    @pytest.mark.parametrize(
        "elapsed, expected",
        [(0.25, 0.5), (0.75, 1.0), (1.0, 1.0), (1.25, 0.75), (2.0, 0.5)],
    )
    def test_later_stage_starts_from_earlier_target(self, elapsed, expected):
        assert sample_sequence(RISE_THEN_DIM, elapsed)["glow"] == pytest.approx(expected)

    def test_origin_shifts_single_stage(self):
        assert sample_stage(RISE_THEN_DIM[1], 1.25, origin=1.0) == pytest.approx(0.75)

    def test_sequence_completes_and_detaches(self):
        engine = Engine(fps=10)
        world = engine.world
        eid = world.spawn()
        world.attach(eid, Strokes())
        world.attach(eid, Sequence(stages=RISE_THEN_DIM))
        stages_done = []
        finished = []
        engine.add_system(
            make_sequence_system(
                _writer,
                on_stage_complete=lambda w, c, e, s: stages_done.append(s.target),
                on_complete=lambda w, c, e, s: finished.append(e),
            )
        )
        for _ in range(50):
            engine.step()
        assert stages_done == [1.0, 0.5]
        assert finished == [eid]
        assert not world.has(eid, Sequence)
        assert world.get(eid, Strokes).values["glow"] == pytest.approx(0.5)

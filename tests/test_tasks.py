"""Tests for the primitive tasks."""

import math

import pytest
from tick_anim import Entity, delay, move_to, rotate_to, scale_to
from tick_anim.easing import lerp, lerp_vec


def drive(task, *ticks):
    return [task.resume(t) for t in ticks]


class TestDelay:
    def test_not_done_until_duration_reached(self):
        task = delay(500)
        assert drive(task, 100, 200, 199) == [False, False, False]
        assert task.resume(1) is True

    def test_overshoot_completes(self):
        assert drive(delay(500), 300, 300) == [False, True]

    def test_zero_duration_completes_on_first_resumption(self):
        task = delay(0)
        task.start()
        assert not task.done
        assert task.resume(0) is True

    def test_negative_duration_completes_on_first_resumption(self):
        assert delay(-10).resume(0) is True

    def test_resume_after_done_stays_done(self):
        task = delay(100)
        task.resume(100)
        assert task.resume(0) is True
        assert task.resume(50) is True


class TestMoveTo:
    def test_quarter_ticks_land_on_destination(self):
        """Ticks of 250 over 1000 move a quarter of the way each time."""
        entity = Entity(position=(0.0, 0.0))
        task = move_to(entity, (100, 0), 1000)
        task.start()

        positions = []
        results = []
        for _ in range(4):
            results.append(task.resume(250))
            positions.append(entity.position)

        assert positions == [(25.0, 0.0), (50.0, 0.0), (75.0, 0.0), (100.0, 0.0)]
        assert results == [False, False, False, True]

    def test_linear_interpolation_law(self):
        origin = (10.0, -20.0)
        destination = (30.0, 40.0)
        entity = Entity(position=origin)
        task = move_to(entity, destination, 400)

        task.resume(60)
        task.resume(40)
        assert entity.position == lerp_vec(origin, destination, 100 / 400)

        task.resume(200)
        assert entity.position == lerp_vec(origin, destination, 300 / 400)

    def test_exact_endpoint_after_overshoot(self):
        entity = Entity(position=(0.3, 0.3))
        task = move_to(entity, (0.1, 0.7), 300)
        assert drive(task, 100, 100, 250) == [False, False, True]
        assert entity.position == (0.1, 0.7)

    def test_no_mutation_after_completion(self):
        entity = Entity()
        task = move_to(entity, (10, 10), 100)
        task.resume(100)

        entity.position = (-5.0, -5.0)
        assert task.resume(100) is True
        assert entity.position == (-5.0, -5.0)

    def test_start_value_fixed_once_started(self):
        entity = Entity(position=(0.0, 0.0))
        task = move_to(entity, (100, 0), 100)
        task.start()

        entity.position = (80.0, 80.0)
        task.resume(50)
        assert entity.position == (50.0, 0.0)

    def test_start_is_idempotent(self):
        entity = Entity(position=(0.0, 0.0))
        task = move_to(entity, (100, 0), 100)
        task.start()
        entity.position = (40.0, 0.0)
        task.start()
        task.resume(50)
        assert entity.position == (50.0, 0.0)

    def test_unstarted_task_starts_on_first_resume(self):
        entity = Entity(position=(20.0, 0.0))
        task = move_to(entity, (40, 0), 100)
        assert not task.started
        task.resume(50)
        assert task.started
        assert entity.position == (30.0, 0.0)

    def test_zero_duration_jumps_to_destination(self):
        entity = Entity()
        task = move_to(entity, (3, 4), 0)
        assert task.resume(0) is True
        assert entity.position == (3.0, 4.0)

    def test_color_is_untouched(self):
        entity = Entity(color="yellow")
        move_to(entity, (1, 1), 10).resume(10)
        assert entity.color == "yellow"

    def test_easing_applied_to_progress(self):
        entity = Entity()
        task = move_to(entity, (100, 0), 100, easing="ease_in")
        task.resume(50)
        assert entity.position == (25.0, 0.0)
        task.resume(50)
        assert entity.position == (100.0, 0.0)

    def test_unknown_easing_raises(self):
        with pytest.raises(ValueError, match="Unknown easing"):
            move_to(Entity(), (1, 1), 10, easing="bounce")

    def test_mutation_error_propagates(self):
        class Frozen:
            position = (0.0, 0.0)

            def __setattr__(self, name, value):
                raise RuntimeError("frozen")

        task = move_to(Frozen(), (1, 1), 10)
        with pytest.raises(RuntimeError, match="frozen"):
            task.resume(5)


class TestRotateTo:
    def test_interpolates_rotation(self):
        entity = Entity(rotation=0.0)
        task = rotate_to(entity, math.pi, 1000)
        task.resume(250)
        assert entity.rotation == lerp(0.0, math.pi, 0.25)
        task.resume(750)
        assert entity.rotation == math.pi

    def test_multi_turn_target_is_not_wrapped(self):
        entity = Entity()
        task = rotate_to(entity, 4 * math.pi, 1000)
        task.resume(500)
        assert entity.rotation == 2 * math.pi
        task.resume(500)
        assert entity.rotation == 4 * math.pi


class TestScaleTo:
    def test_interpolates_scale(self):
        entity = Entity(scale=1.0)
        task = scale_to(entity, 2, 1000)
        task.resume(500)
        assert entity.scale == 1.5
        assert task.resume(500) is True
        assert entity.scale == 2

    def test_shrinking(self):
        entity = Entity(scale=2.0)
        task = scale_to(entity, 0.1, 100)
        task.resume(100)
        assert entity.scale == 0.1
        assert entity.position == (0.0, 0.0)

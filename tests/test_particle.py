import numpy as np
import pytest
from particle import Particle
from vector import length, vector
import constants


def test_new_particle_defaults():
    p = Particle(False, vector(1.0, 2.0), vector(0.0, 1.0))
    assert p.alive
    assert not p.exploded
    assert not p.is_sub
    assert np.array_equal(p.acceleration, [0.0, 0.0])


def test_particle_copies_its_inputs():
    position = vector(1.0, 2.0)
    p = Particle(False, position, vector(0.0, 1.0))
    p.position[0] = 99.0
    assert position[0] == 1.0


def test_apply_force_accumulates():
    p = Particle(False, vector(0.0, 0.0), vector(0.0, 1.0))
    p.apply_force(vector(0.0, -0.004))
    p.apply_force(vector(0.5, 0.0))
    assert p.acceleration == pytest.approx([0.5, -0.004])


def test_integrate_moves_rocket_and_clears_acceleration():
    p = Particle(False, vector(0.0, -50.0), vector(0.1, 1.2))
    p.apply_force(vector(0.0, -0.004))
    p.integrate()

    assert p.alive
    assert p.velocity == pytest.approx([0.1, 1.196])
    assert p.position == pytest.approx([0.1, -48.804])
    assert np.array_equal(p.acceleration, [0.0, 0.0])


def test_rocket_retires_at_threshold_without_moving():
    p = Particle(False, vector(3.0, 4.0), vector(0.0, constants.RETIRE_VELOCITY_Y))
    p.apply_force(vector(0.0, -0.004))
    p.integrate()

    assert not p.alive
    assert np.array_equal(p.position, [3.0, 4.0])
    assert np.array_equal(p.velocity, [0.0, constants.RETIRE_VELOCITY_Y])


def test_rocket_just_above_threshold_keeps_flying():
    p = Particle(False, vector(0.0, 0.0), vector(0.0, -0.0499))
    p.integrate()
    assert p.alive
    assert p.position == pytest.approx([0.0, -0.0499])


def test_retirement_is_monotone():
    p = Particle(False, vector(0.0, 0.0), vector(0.0, -1.0))
    p.integrate()
    assert not p.alive

    # Even an upward velocity does not revive a retired rocket.
    p.velocity[:] = [0.0, 5.0]
    for _ in range(5):
        p.integrate()
        assert not p.alive
    assert np.array_equal(p.position, [0.0, 0.0])


def test_fragment_never_retires_and_is_damped():
    p = Particle(True, vector(0.0, 0.0), vector(0.0, -5.0))
    p.integrate()

    assert p.alive
    assert p.position == pytest.approx([0.0, -5.0])
    assert p.velocity == pytest.approx([0.0, -5.0 * constants.SUB_PARTICLE_DAMPING])


def test_fragment_damping_applies_after_position_update():
    p = Particle(True, vector(0.0, 0.0), vector(1.0, 0.0))
    p.apply_force(vector(1.0, 0.0))
    p.integrate()
    assert p.position == pytest.approx([2.0, 0.0])
    assert p.velocity == pytest.approx([2.0 * constants.SUB_PARTICLE_DAMPING, 0.0])


def test_fragment_speed_decreases_without_forces():
    p = Particle(True, vector(0.0, 0.0), vector(0.3, -0.2))
    previous = length(p.velocity)
    for _ in range(100):
        p.integrate()
        current = length(p.velocity)
        assert current < previous
        assert current > 0.0
        previous = current

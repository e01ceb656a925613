import numpy as np
import pytest
from particle_group import ParticleGroup
from vector import vector
import constants


def test_new_group_is_empty_and_offscreen():
    group = ParticleGroup('red', capacity=8)

    assert len(group) == 8
    assert group.color == 'red'
    assert group.write_cursor == 0
    assert group.active_count() == 0
    assert np.all(group.coordinates == constants.OFFSCREEN)


def test_default_capacity():
    assert ParticleGroup('blue').capacity == constants.MAX_PARTICLES_PER_COLOR


def test_non_positive_capacity_is_rejected():
    with pytest.raises(ValueError):
        ParticleGroup('blue', capacity=0)


def test_spawn_writes_slot_and_mirrors_coordinate():
    group = ParticleGroup('green', capacity=4)
    slot = group.spawn(True, vector(1.5, -2.0), vector(0.1, 0.2))

    assert slot == 0
    assert group.write_cursor == 1
    assert group.spawn_total == 1
    assert group.alive[0]
    assert group.is_sub[0]
    assert not group.exploded[0]
    assert np.array_equal(group.positions[0], [1.5, -2.0])
    assert np.array_equal(group.velocities[0], [0.1, 0.2])
    assert np.array_equal(group.accelerations[0], [0.0, 0.0])
    assert np.array_equal(group.coordinates[0], [1.5, -2.0])
    # Untouched slots keep the sentinel
    assert np.all(group.coordinates[1:] == constants.OFFSCREEN)


def test_ring_buffer_wraps_onto_oldest_slot():
    capacity = 5
    group = ParticleGroup('white', capacity=capacity)
    for n in range(capacity + 1):
        group.spawn(False, vector(float(n), 0.0), vector(0.0, 1.0))

    # Slot 0 now holds the (N+1)-th particle
    assert group.positions[0][0] == float(capacity)
    assert group.positions[1][0] == 1.0
    assert group.write_cursor == 1
    assert group.spawn_total == capacity + 1


def test_overwrite_resets_slot_state():
    group = ParticleGroup('white', capacity=1)
    group.spawn(False, vector(0.0, 0.0), vector(0.0, 1.0))
    group.alive[0] = False
    group.exploded[0] = True
    group.accelerations[0] = [1.0, 1.0]

    group.spawn(True, vector(2.0, 2.0), vector(0.0, 0.0))

    assert group.alive[0]
    assert not group.exploded[0]
    assert group.is_sub[0]
    assert np.array_equal(group.accelerations[0], [0.0, 0.0])
    assert group.write_cursor == 0


def test_no_active_particle_lost_within_capacity():
    capacity = 16
    group = ParticleGroup('yellow', capacity=capacity)
    for n in range(capacity):
        group.spawn(n % 2 == 0, vector(float(n), float(n)), vector(0.0, 0.0))

    assert group.active_count() == capacity
    assert sorted(group.positions[:, 0].tolist()) == [float(n) for n in range(capacity)]


def test_particle_snapshot_is_detached():
    group = ParticleGroup('magenta', capacity=2)
    group.spawn(False, vector(1.0, 1.0), vector(0.0, 0.5))

    p = group.particle(0)
    assert p.alive and not p.is_sub and not p.exploded
    assert np.array_equal(p.position, [1.0, 1.0])

    p.position[:] = [9.0, 9.0]
    p.alive = False
    assert np.array_equal(group.positions[0], [1.0, 1.0])
    assert group.alive[0]

# engine.py

import logging
import numba
import numpy as np
from particle import _integrate_jit
from particle_group import ParticleGroup
from vector import random_unit_vector, scale
import constants

logger = logging.getLogger("fireworks")

# --- JIT-Compiled Tick Kernel ---
# The per-slot loop is compiled by Numba. It cannot draw from the engine's
# np.random.Generator, so it returns to Python at every explosion; the caller
# spawns the burst and resumes the loop at the next slot. This keeps the
# single in-order pass: fragments written into later slots are advanced in
# the same tick, fragments written into earlier slots are not.

@numba.jit(nopython=True)
def _advance_slots_jit(start, positions, velocities, accelerations, alive, exploded, is_sub, coordinates, gravity, offscreen):
    """
    Applies gravity to, integrates, and refreshes the render coordinate of
    every slot from `start` onwards. Returns the index of the first slot
    whose rocket retired during this call and still has to explode, or the
    slot count when the pass is complete.
    """
    num_slots = positions.shape[0]
    for i in range(start, num_slots):
        was_alive = alive[i]
        accelerations[i, 0] += gravity[0]
        accelerations[i, 1] += gravity[1]
        alive[i] = _integrate_jit(positions[i], velocities[i], accelerations[i], was_alive, is_sub[i])

        if alive[i]:
            coordinates[i, 0] = positions[i, 0]
            coordinates[i, 1] = positions[i, 1]
        else:
            coordinates[i, 0] = offscreen[0]
            coordinates[i, 1] = offscreen[1]
            if was_alive and not is_sub[i] and not exploded[i]:
                return i
    return num_slots


class Engine:
    """
    Owns the fireworks simulation: one ParticleGroup per display color, a
    constant gravity vector, and the random source for explosion bursts.

    Data Contract:
    - Inputs:
        - rng (np.random.Generator): The master seeded random number generator.
        - capacity (int): Slots per color group.
        - gravity (tuple): Constant acceleration applied to every slot each tick.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: None outside its own groups. Performs no I/O besides logging.
    - Invariants: The number of groups and their capacities never change.
      Given the same seed and the same sequence of calls, the simulation is
      reproduced exactly.
    """
    def __init__(self, rng: np.random.Generator, capacity: int = constants.MAX_PARTICLES_PER_COLOR,
                 gravity: tuple = constants.GRAVITY):
        self.rng = rng
        self.gravity = np.array(gravity, dtype=np.float64)
        self.groups = tuple(ParticleGroup(color, capacity) for color in constants.GROUP_COLORS)
        self._offscreen = np.array(constants.OFFSCREEN, dtype=np.float64)

        self.tick_count = 0
        self.explosion_count = 0

        logger.info(
            f"Engine created with {len(self.groups)} color groups of {capacity} slots, "
            f"gravity={tuple(self.gravity)}."
        )

    def spawn_rocket(self, group_index: int, position: np.ndarray, velocity: np.ndarray) -> int:
        """
        Launches a new rocket into the given color group. Returns the slot
        it was written to.
        """
        if not 0 <= group_index < len(self.groups):
            raise IndexError(
                f"group_index {group_index} out of range for {len(self.groups)} color groups."
            )
        group = self.groups[group_index]
        slot = group.spawn(False, position, velocity)
        logger.debug(
            f"Rocket launched in group '{group.color}' slot {slot}: "
            f"pos=({position[0]:.2f}, {position[1]:.2f}), vel=({velocity[0]:.3f}, {velocity[1]:.3f})"
        )
        return slot

    def tick(self):
        """
        Advances every group by one time step, exploding each rocket on the
        tick it retires.
        """
        for group in self.groups:
            i = 0
            while i < group.capacity:
                i = _advance_slots_jit(
                    i,
                    group.positions,
                    group.velocities,
                    group.accelerations,
                    group.alive,
                    group.exploded,
                    group.is_sub,
                    group.coordinates,
                    self.gravity,
                    self._offscreen,
                )
                if i < group.capacity:
                    self._explode(group, i)
                    i += 1
        self.tick_count += 1

    def _explode(self, group: ParticleGroup, slot: int):
        """
        Spawns a burst of fragments at a retired rocket's last position and
        latches the slot so it never explodes again.
        """
        # The burst may wrap around onto this very slot, so copy the origin first.
        origin = group.positions[slot].copy()
        for _ in range(constants.BURST_SIZE):
            direction = random_unit_vector(self.rng)
            speed = self.rng.uniform(constants.BURST_SPEED_MIN, constants.BURST_SPEED_MAX)
            group.spawn(True, origin, scale(direction, speed))
        group.exploded[slot] = True
        self.explosion_count += 1

        logger.debug(
            f"Rocket in group '{group.color}' slot {slot} exploded at "
            f"({origin[0]:.2f}, {origin[1]:.2f}) into {constants.BURST_SIZE} fragments."
        )

    def active_count(self) -> int:
        """Total number of alive particles across all groups."""
        return sum(group.active_count() for group in self.groups)

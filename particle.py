# particle.py

import numba
import numpy as np
from constants import RETIRE_VELOCITY_Y, SUB_PARTICLE_DAMPING


@numba.jit(nopython=True)
def _integrate_jit(position, velocity, acceleration, alive, is_sub):
    """
    Numba-accelerated single integration step for one particle.

    Operates in place on three length-2 arrays (which may be rows of the
    pooled arrays in a ParticleGroup) and returns the particle's new alive
    flag. A rocket that is already retired, or whose vertical velocity has
    fallen to RETIRE_VELOCITY_Y, is retired and left untouched. Fragments are
    exempt from retirement and are damped after every step instead.
    """
    if not is_sub and (not alive or velocity[1] <= RETIRE_VELOCITY_Y):
        return False

    # v_new = v_old + a ; p_new = p_old + v_new
    velocity[0] += acceleration[0]
    velocity[1] += acceleration[1]
    position[0] += velocity[0]
    position[1] += velocity[1]
    acceleration[0] = 0.0
    acceleration[1] = 0.0

    if is_sub:
        velocity[0] *= SUB_PARTICLE_DAMPING
        velocity[1] *= SUB_PARTICLE_DAMPING
    return alive


class Particle:
    """
    Represents a single point mass: either a launched rocket or a fragment of
    an explosion.

    Data Contract:
    - Inputs:
        - is_sub (bool): True for an explosion fragment, False for a rocket.
        - position (np.ndarray): Initial (x, y) in canvas units.
        - velocity (np.ndarray): Initial (vx, vy) in units per tick.
    - Outputs: None. This class modifies its internal state.
    - Invariants:
        - Once a rocket is retired (alive=False) it stays retired.
        - Fragments never retire.
        - exploded is only ever set by the Engine, at most once.
    """
    def __init__(self, is_sub: bool, position: np.ndarray, velocity: np.ndarray):
        self.is_sub = bool(is_sub)
        self.position = np.array(position, dtype=np.float64)
        self.velocity = np.array(velocity, dtype=np.float64)
        self.acceleration = np.zeros(2, dtype=np.float64)
        self.alive = True
        self.exploded = False

    def apply_force(self, force: np.ndarray):
        """Accumulates a force into this tick's acceleration (unit mass)."""
        self.acceleration += force

    def integrate(self):
        """
        Advances the particle by one tick, applying the retirement rule first.
        """
        self.alive = bool(_integrate_jit(
            self.position, self.velocity, self.acceleration, self.alive, self.is_sub
        ))

    def __repr__(self):
        kind = "fragment" if self.is_sub else "rocket"
        return (
            f"Particle({kind}, pos={self.position}, vel={self.velocity}, "
            f"alive={self.alive}, exploded={self.exploded})"
        )

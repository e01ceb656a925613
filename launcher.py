# launcher.py

"""
Rocket launch helpers used by the front ends' key handlers.

Rockets start on the bottom edge of the canvas (y = -height / 2) and are
given a vertical speed that scales with the square root of the canvas
height, so they burst at a similar relative height on any terminal size.
All randomness is drawn from the engine's generator.
"""

import logging
import numpy as np
from engine import Engine
from vector import vector
import constants

logger = logging.getLogger("fireworks")


def max_launch_speed(height: float) -> float:
    return constants.LAUNCH_SPEED_FACTOR * np.sqrt(height)


def _launch_at(engine: Engine, x: float, height: float) -> int:
    rng = engine.rng
    max_speed = max_launch_speed(height)
    speed_y = rng.uniform(max_speed * constants.LAUNCH_SPEED_MIN_RATIO, max_speed)
    speed_x = rng.uniform(-constants.LAUNCH_DRIFT, constants.LAUNCH_DRIFT)
    group_index = int(rng.integers(0, len(engine.groups)))
    return engine.spawn_rocket(group_index, vector(x, -height / 2.0), vector(speed_x, speed_y))


def launch_rocket(engine: Engine, width: float, height: float) -> int:
    """Fires one rocket from a random point on the bottom edge."""
    x = engine.rng.uniform(-width / 2.0, width / 2.0)
    return _launch_at(engine, x, height)


def launch_salvo(engine: Engine, width: float, height: float) -> int:
    """
    Fires SALVO_SIZE rockets spread evenly along the bottom edge, each with
    its own random speed and color. Returns the number of rockets fired.
    """
    half = constants.SALVO_SIZE // 2
    for i in range(-half, constants.SALVO_SIZE - half):
        _launch_at(engine, i * width / constants.SALVO_SIZE, height)
    logger.info(f"Salvo of {constants.SALVO_SIZE} rockets launched.")
    return constants.SALVO_SIZE

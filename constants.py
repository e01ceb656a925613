# constants.py

"""
Application Constants

This module defines static configuration values for the fireworks engine and
its front ends. These are not expected to change between runs; only run-level
settings (seed, logging, front end) live in config.json.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable. A "unit" is one terminal
  cell in the canvas coordinate system, with the origin at the canvas centre
  and y pointing up.
"""

# Particle pools
MAX_PARTICLES_PER_COLOR = 1000  # Slots per color group (ring buffer capacity)

# Physics (per tick, dt=1)
GRAVITY = (0.0, -0.004)  # Units / tick^2
RETIRE_VELOCITY_Y = -0.05  # A rocket retires once its vertical velocity drops to this
SUB_PARTICLE_DAMPING = 0.98  # Velocity multiplier applied to fragments every tick

# Explosions
BURST_SIZE = 19  # Fragments spawned per exploding rocket
BURST_SPEED_MIN = 0.2  # Units / tick
BURST_SPEED_MAX = 0.4  # Units / tick (exclusive)

# Render sentinel for retired or never-used slots. Lies outside any canvas.
OFFSCREEN = (9999.9, 9999.9)

# Timing
TICK_MS = 10  # Milliseconds between simulation ticks

# Launching
LAUNCH_SPEED_FACTOR = 0.08  # Max vertical launch speed = factor * sqrt(canvas height)
LAUNCH_SPEED_MIN_RATIO = 0.8  # Lower bound of vertical launch speed, as a ratio of max
LAUNCH_DRIFT = 0.08  # Horizontal launch speed is drawn from [-drift, drift)
SALVO_SIZE = 20  # Rockets fired side by side by a salvo

# Colors (RGB)
BLACK = (0, 0, 0)
BLUE = (0, 0, 255)
GREEN = (0, 255, 0)
MAGENTA = (255, 0, 255)
RED = (255, 0, 0)
YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)

# One particle group per entry, drawn in this order (later groups on top).
GROUP_COLORS = ('blue', 'green', 'magenta', 'red', 'yellow', 'white')

COLOR_RGB = {
    'blue': BLUE,
    'green': GREEN,
    'magenta': MAGENTA,
    'red': RED,
    'yellow': YELLOW,
    'white': WHITE,
}

# Window Title
TITLE = "Fireworks"

# Window front end
WIDTH = 1600  # Pixels
HEIGHT = 900  # Pixels
PIXELS_PER_UNIT = 10  # Screen pixels per canvas unit
PARTICLE_RADIUS = 2  # Pixels

# Visual Effects
TRAIL_EFFECT_COLOR = (0, 0, 0, 40) # RGBA. Alpha controls trail length (lower = longer).

# Bloom effect settings
BLOOM_RADIUS = 20 # The radius of the glow effect in pixels. Larger is more diffuse.
BLOOM_INTENSITY = 30 # The brightness of the glow (0-255).

# Logging
STATS_LOG_INTERVAL = 100  # Ticks between throttled particle-count log lines

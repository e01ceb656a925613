# window.py

"""
Pygame front end.

Draws the same simulation into a window with a fading trail and a cheap
bloom pass. The canvas is WIDTH / PIXELS_PER_UNIT units wide and
HEIGHT / PIXELS_PER_UNIT units tall, origin at the centre, y pointing up,
so rockets behave as they would on a terminal of that many cells.

Controls: f launches a rocket, m a salvo, q (or closing the window) quits.
"""

import logging
import numpy as np
import pygame
from engine import Engine
from launcher import launch_rocket, launch_salvo
import constants

logger = logging.getLogger("fireworks")


def to_screen(coordinates: np.ndarray) -> np.ndarray:
    """
    Maps canvas coordinates to integer pixel positions. Rows that fall
    outside the window (including the off-screen sentinel) are dropped.
    """
    scale = constants.PIXELS_PER_UNIT
    px = constants.WIDTH / 2.0 + coordinates[:, 0] * scale
    py = constants.HEIGHT / 2.0 - coordinates[:, 1] * scale
    visible = (px >= 0) & (px < constants.WIDTH) & (py >= 0) & (py < constants.HEIGHT)
    return np.column_stack((px[visible], py[visible])).astype(int)


def draw(engine: Engine, screen: pygame.Surface, is_glow_pass: bool):
    """Draws every group's visible particles as small circles."""
    for group in engine.groups:
        rgb_color = constants.COLOR_RGB[group.color]
        # The glow surface needs a 4-component RGBA color.
        final_color = (*rgb_color, 255) if is_glow_pass else rgb_color
        for x, y in to_screen(group.coordinates).tolist():
            pygame.draw.circle(screen, final_color, (x, y), constants.PARTICLE_RADIUS)


def _render(engine: Engine, screen: pygame.Surface, trail_surface: pygame.Surface):
    # --- Trail ---
    trail_surface.fill(constants.TRAIL_EFFECT_COLOR)
    screen.blit(trail_surface, (0, 0))

    # --- Bloom: downscale then upscale the glow pass to blur it ---
    glow_surface = pygame.Surface((constants.WIDTH, constants.HEIGHT), pygame.SRCALPHA)
    draw(engine, glow_surface, is_glow_pass=True)

    scale = constants.BLOOM_RADIUS
    scaled_size = (constants.WIDTH // scale, constants.HEIGHT // scale)
    scaled_surface = pygame.transform.smoothscale(glow_surface, scaled_size)
    blurred_surface = pygame.transform.smoothscale(scaled_surface, (constants.WIDTH, constants.HEIGHT))

    intensity = constants.BLOOM_INTENSITY
    blurred_surface.fill((intensity, intensity, intensity), special_flags=pygame.BLEND_RGB_MULT)
    screen.blit(blurred_surface, (0, 0), special_flags=pygame.BLEND_RGB_ADD)

    draw(engine, screen, is_glow_pass=False)
    pygame.display.flip()


def run_window(engine: Engine):
    """Runs the windowed front end until the window is closed or q is pressed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
        pygame.display.set_caption(constants.TITLE)
        clock = pygame.time.Clock()
        trail_surface = pygame.Surface((constants.WIDTH, constants.HEIGHT), pygame.SRCALPHA)

        width = constants.WIDTH / constants.PIXELS_PER_UNIT
        height = constants.HEIGHT / constants.PIXELS_PER_UNIT
        logger.info(f"Window initialized: {constants.WIDTH}x{constants.HEIGHT} px, canvas {width}x{height} units.")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_q:
                        running = False
                    elif event.key == pygame.K_f:
                        launch_rocket(engine, width, height)
                    elif event.key == pygame.K_m:
                        launch_salvo(engine, width, height)

            engine.tick()

            # Hot loop: throttle logs
            if engine.tick_count % constants.STATS_LOG_INTERVAL == 0:
                logger.debug(
                    f"Tick={engine.tick_count}, Active={engine.active_count()}, "
                    f"Explosions={engine.explosion_count}"
                )

            _render(engine, screen, trail_surface)
            # One tick per frame keeps the TICK_MS cadence.
            clock.tick(1000 // constants.TICK_MS)
    finally:
        pygame.quit()

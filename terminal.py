# terminal.py

"""
Curses front end.

Runs the fireworks on the terminal's alternate screen, drawing every color
group onto a braille canvas that spans the whole window. One canvas unit is
one terminal cell, with the origin at the centre of the screen.

Controls:
    f    launch one rocket
    m    launch a salvo across the screen
    q    quit
"""

import curses
import logging
import time
from canvas import BrailleCanvas
from engine import Engine
from launcher import launch_rocket, launch_salvo
import constants

logger = logging.getLogger("fireworks")

CURSES_COLORS = {
    'blue': curses.COLOR_BLUE,
    'green': curses.COLOR_GREEN,
    'magenta': curses.COLOR_MAGENTA,
    'red': curses.COLOR_RED,
    'yellow': curses.COLOR_YELLOW,
    'white': curses.COLOR_WHITE,
}


def _setup_colors(engine: Engine):
    """Registers one color pair per group; pair i + 1 belongs to group i."""
    curses.start_color()
    curses.use_default_colors()
    for i, group in enumerate(engine.groups):
        curses.init_pair(i + 1, CURSES_COLORS[group.color], -1)


def _make_canvas(stdscr) -> BrailleCanvas:
    rows, cols = stdscr.getmaxyx()
    return BrailleCanvas(
        cols, rows,
        x_bounds=(-cols / 2.0, cols / 2.0),
        y_bounds=(-rows / 2.0, rows / 2.0),
    )


def render(stdscr, canvas: BrailleCanvas, engine: Engine):
    """Paints all groups in order onto the canvas and copies it to the screen."""
    canvas.clear()
    for i, group in enumerate(engine.groups):
        canvas.paint(group.coordinates, i)

    stdscr.erase()
    _addstr = stdscr.addstr
    _color_pair = curses.color_pair
    for row, col, char, layer in canvas.cells():
        try:
            _addstr(row, col, char, _color_pair(layer + 1) | curses.A_BOLD)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off screen.
            pass
    stdscr.refresh()


def _run(stdscr, engine: Engine):
    curses.curs_set(0)
    stdscr.nodelay(True)
    _setup_colors(engine)

    canvas = _make_canvas(stdscr)
    logger.info(f"Terminal canvas initialized: {canvas.cols}x{canvas.rows} cells.")

    tick_rate = constants.TICK_MS / 1000.0
    last_tick = time.monotonic()
    while True:
        render(stdscr, canvas, engine)

        # Wait for input only until the next tick is due.
        remaining = tick_rate - (time.monotonic() - last_tick)
        stdscr.timeout(max(0, int(remaining * 1000)))
        key = stdscr.getch()

        if key in (ord("q"), ord("Q")):
            logger.info("Quit requested.")
            return
        elif key in (ord("f"), ord("F")):
            launch_rocket(engine, canvas.cols, canvas.rows)
        elif key in (ord("m"), ord("M")):
            launch_salvo(engine, canvas.cols, canvas.rows)
        elif key == curses.KEY_RESIZE:
            canvas = _make_canvas(stdscr)
            logger.info(f"Terminal resized: {canvas.cols}x{canvas.rows} cells.")

        if time.monotonic() - last_tick >= tick_rate:
            engine.tick()
            last_tick = time.monotonic()

            # Hot loop: throttle logs
            if engine.tick_count % constants.STATS_LOG_INTERVAL == 0:
                logger.debug(
                    f"Tick={engine.tick_count}, Active={engine.active_count()}, "
                    f"Explosions={engine.explosion_count}"
                )


def run_terminal(engine: Engine):
    """
    Runs the terminal front end until the user quits. curses.wrapper restores
    the terminal on exit, including when an exception propagates.
    """
    curses.wrapper(_run, engine)

# canvas.py

"""
Braille canvas rasteriser for the terminal front end.

Every terminal cell is treated as a 2x4 grid of dots and drawn with the
matching Unicode braille character (U+2800 block), which gives eight
sub-cell points per character. World coordinates use the canvas convention
of the engine: origin at the centre, y pointing up.

Painting is vectorised with NumPy; only the final list of non-empty cells is
handed to curses.
"""

import numpy as np

BRAILLE_BASE = 0x2800

# Dot bit for (row, column) within a cell.
_DOT_BITS = np.array([
    [0x01, 0x08],
    [0x02, 0x10],
    [0x04, 0x20],
    [0x40, 0x80],
], dtype=np.uint8)


class BrailleCanvas:
    """
    A fixed-size grid of braille cells with one color layer per cell.

    Data Contract:
    - Inputs:
        - cols, rows (int): Size of the canvas in terminal cells.
        - x_bounds, y_bounds (tuple): (min, max) world coordinates mapped onto
          the canvas edges.
    - Invariants: Points outside the bounds are skipped, which also hides the
      engine's off-screen sentinel. A cell takes the layer of the last paint
      call that touched it.
    """
    def __init__(self, cols: int, rows: int, x_bounds: tuple, y_bounds: tuple):
        if cols <= 0 or rows <= 0:
            raise ValueError(f"Canvas size must be positive, got {cols}x{rows}.")
        if x_bounds[1] <= x_bounds[0] or y_bounds[1] <= y_bounds[0]:
            raise ValueError(f"Canvas bounds must be increasing, got {x_bounds}, {y_bounds}.")
        self.cols = cols
        self.rows = rows
        self.x_bounds = x_bounds
        self.y_bounds = y_bounds
        self.dots = np.zeros((rows, cols), dtype=np.uint8)
        self.layers = np.full((rows, cols), -1, dtype=np.int16)

    def clear(self):
        self.dots.fill(0)
        self.layers.fill(-1)

    def paint(self, coordinates: np.ndarray, layer: int):
        """Sets the dots for every in-bounds (x, y) point and tags their cells with `layer`."""
        left, right = self.x_bounds
        bottom, top = self.y_bounds
        x = coordinates[:, 0]
        y = coordinates[:, 1]
        inside = (x >= left) & (x <= right) & (y >= bottom) & (y <= top)
        if not inside.any():
            return

        # Dot resolution is 2 per column and 4 per row.
        dot_x = ((x[inside] - left) * (self.cols * 2 - 1) / (right - left)).astype(np.intp)
        dot_y = ((top - y[inside]) * (self.rows * 4 - 1) / (top - bottom)).astype(np.intp)

        cell_rows = dot_y // 4
        cell_cols = dot_x // 2
        np.bitwise_or.at(self.dots, (cell_rows, cell_cols), _DOT_BITS[dot_y % 4, dot_x % 2])
        self.layers[cell_rows, cell_cols] = layer

    def cells(self):
        """Yields (row, col, char, layer) for every cell with at least one dot set."""
        rows, cols = np.nonzero(self.dots)
        chars = self.dots[rows, cols].astype(np.int64) + BRAILLE_BASE
        layers = self.layers[rows, cols]
        for r, c, ch, layer in zip(rows.tolist(), cols.tolist(), chars.tolist(), layers.tolist()):
            yield r, c, chr(ch), layer

"""Geometry of the display mesh.

The mesh has one vertex per grid corner, (numW + 1) * (numH + 1) in total,
laid out row by row from the bottom left. Each vertex carries an xyz position
in normalised device coordinates and an rgb color; each cell is drawn as two
triangles. Cell (i, j) writes its value into the color of vertex (i, j).
"""

import numpy as np

VERTEX_COMPONENTS = 6  # x, y, z, r, g, b
COLOR_OFFSET = 3


def build_vertices(width, height, size):
    num_w, num_h = width // size, height // size
    xs = np.arange(num_w + 1, dtype=np.float32) * size
    ys = np.arange(num_h + 1, dtype=np.float32) * size
    px, py = np.meshgrid(xs, ys)

    vertices = np.zeros(((num_w + 1) * (num_h + 1), VERTEX_COMPONENTS), dtype=np.float32)
    vertices[:, 0] = 2.0 * px.flatten() / width - 1.0
    vertices[:, 1] = 2.0 * py.flatten() / height - 1.0
    return vertices


def build_indices(num_w, num_h):
    """Two triangles per cell, counter-clockwise."""
    j, i = np.meshgrid(np.arange(num_h), np.arange(num_w), indexing="ij")
    idx = (i + (num_w + 1) * j).flatten().astype(np.uint32)
    row = num_w + 1
    return np.column_stack(
        (idx, idx + 1, idx + row, idx + row, idx + 1, idx + row + 1)
    ).flatten()


def vertex_index(i, j, num_w):
    return i + (num_w + 1) * j


def interior_vertex_indices(num_w, num_h):
    """Vertex index of every interior cell, in row-major (j, i) order."""
    j, i = np.meshgrid(np.arange(1, num_h - 1), np.arange(1, num_w - 1), indexing="ij")
    return vertex_index(i, j, num_w).flatten()

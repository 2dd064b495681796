"""Boundary handling for the ghost ring of a field."""

from numba import njit

from .field import BoundaryPolicy

REGULAR = int(BoundaryPolicy.REGULAR)
MIRROR_X = int(BoundaryPolicy.MIRROR_X)
MIRROR_Y = int(BoundaryPolicy.MIRROR_Y)


@njit(cache=True, nogil=True)
def set_bounds(b, x):
    """Write the ghost ring of ``x`` from its interior edge.

    ``b`` is a BoundaryPolicy value. Corners are the average of their two
    neighbouring ghost cells, which are written first.
    """
    ny, nx = x.shape

    for i in range(1, nx - 1):
        if b == MIRROR_Y:
            x[0, i] = -x[1, i]
            x[ny - 1, i] = -x[ny - 2, i]
        else:
            x[0, i] = x[1, i]
            x[ny - 1, i] = x[ny - 2, i]

    for j in range(1, ny - 1):
        if b == MIRROR_X:
            x[j, 0] = -x[j, 1]
            x[j, nx - 1] = -x[j, nx - 2]
        else:
            x[j, 0] = x[j, 1]
            x[j, nx - 1] = x[j, nx - 2]

    x[0, 0] = 0.5 * (x[1, 0] + x[0, 1])
    x[0, nx - 1] = 0.5 * (x[1, nx - 1] + x[0, nx - 2])
    x[ny - 1, 0] = 0.5 * (x[ny - 2, 0] + x[ny - 1, 1])
    x[ny - 1, nx - 1] = 0.5 * (x[ny - 2, nx - 1] + x[ny - 1, nx - 2])


def apply_boundary(field, policy=BoundaryPolicy.REGULAR):
    set_bounds(int(policy), field.data)

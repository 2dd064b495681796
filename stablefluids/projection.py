from numba import njit

from .boundary import set_bounds, REGULAR, MIRROR_X, MIRROR_Y


@njit(cache=True, nogil=True)
def project(u, v, p, div, iterations):
    """Make (u, v) approximately divergence free.

    ``p`` and ``div`` are scratch buffers of the same shape; their previous
    contents are overwritten. The pressure Poisson equation is relaxed with
    a fixed number of Gauss-Seidel sweeps and its gradient is subtracted
    from the velocity.
    """
    ny, nx = u.shape
    h = 1.0 / min(nx - 2, ny - 2)

    for j in range(1, ny - 1):
        for i in range(1, nx - 1):
            div[j, i] = -0.5 * h * (u[j, i + 1] - u[j, i - 1] + v[j + 1, i] - v[j - 1, i])
            p[j, i] = 0.0

    set_bounds(REGULAR, div)
    set_bounds(REGULAR, p)

    for _ in range(iterations):
        for j in range(1, ny - 1):
            for i in range(1, nx - 1):
                p[j, i] = (div[j, i] + p[j, i - 1] + p[j, i + 1] + p[j - 1, i] + p[j + 1, i]) / 4.0
        set_bounds(REGULAR, p)

    for j in range(1, ny - 1):
        for i in range(1, nx - 1):
            u[j, i] -= 0.5 * (p[j, i + 1] - p[j, i - 1]) / h
            v[j, i] -= 0.5 * (p[j + 1, i] - p[j - 1, i]) / h

    set_bounds(MIRROR_X, u)
    set_bounds(MIRROR_Y, v)

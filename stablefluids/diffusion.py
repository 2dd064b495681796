from numba import njit

from .boundary import set_bounds


@njit(cache=True, nogil=True)
def diffuse(b, x, x0, diff, dt, iterations):
    """Implicit diffusion of ``x0`` into ``x`` by Gauss-Seidel relaxation.

    Solves x = x0 + a * laplacian(x) with a = dt * diff * interior cell count.
    The sweep is in place, so each update already sees the new values of the
    left and lower neighbours. No convergence test: exactly ``iterations``
    sweeps are run.
    """
    ny, nx = x.shape
    a = dt * diff * (nx - 2) * (ny - 2)
    c = 1.0 + 4.0 * a

    for _ in range(iterations):
        for j in range(1, ny - 1):
            for i in range(1, nx - 1):
                x[j, i] = (
                    x0[j, i] + a * (x[j, i - 1] + x[j, i + 1] + x[j - 1, i] + x[j + 1, i])
                ) / c
        set_bounds(b, x)

from numba import njit

from .boundary import set_bounds


@njit(cache=True, nogil=True)
def advect(b, d, d0, u, v, dt):
    """Semi-Lagrangian advection of ``d0`` into ``d`` along (u, v).

    Each interior cell traces back one time step and samples ``d0``
    bilinearly. The trace is clamped to [0.5, N + 0.5] on each axis, so the
    four samples always lie inside the interior plus one ghost cell.
    """
    ny, nx = d.shape
    w = nx - 2
    h = ny - 2
    dt0 = dt * min(w, h)

    for j in range(1, h + 1):
        for i in range(1, w + 1):
            x = i - dt0 * u[j, i]
            y = j - dt0 * v[j, i]

            if x < 0.5:
                x = 0.5
            if x > w + 0.5:
                x = w + 0.5
            if y < 0.5:
                y = 0.5
            if y > h + 0.5:
                y = h + 0.5

            i0 = int(x)
            i1 = i0 + 1
            j0 = int(y)
            j1 = j0 + 1

            s1 = x - i0
            s0 = 1.0 - s1
            t1 = y - j0
            t0 = 1.0 - t1

            d[j, i] = s0 * (t0 * d0[j0, i0] + t1 * d0[j1, i0]) + s1 * (
                t0 * d0[j0, i1] + t1 * d0[j1, i1]
            )

    set_bounds(b, d)

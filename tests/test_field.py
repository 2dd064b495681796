"""Tests for fields, buffer swapping and the simulation state."""

import numpy as np
import pytest

from stablefluids import Field, SimulationState


class TestField:
    def test_zero_initialised(self):
        field = Field(6, 4)
        assert field.shape == (4, 6)
        assert field.nx == 6 and field.ny == 4
        assert np.all(field.data == 0.0)

    def test_column_index_varies_fastest(self):
        field = Field(6, 4)
        field[5, 1] = 3.0
        assert field.data[1, 5] == 3.0
        assert field[5, 1] == 3.0

    @pytest.mark.parametrize("key", [(6, 0), (0, 4), (-1, 0), (0, -1)])
    def test_out_of_range_index_raises(self, key):
        field = Field(6, 4)
        with pytest.raises(IndexError):
            field[key]
        with pytest.raises(IndexError):
            field[key] = 1.0

    def test_interior_excludes_ghost_ring(self):
        field = Field(6, 4)
        field.interior[:] = 1.0
        assert field.data.sum() == 4 * 2
        assert field[0, 0] == 0.0 and field[1, 1] == 1.0

    def test_swap_exchanges_storage(self):
        a, b = Field(5, 5), Field(5, 5)
        a.fill(1.0)
        data_a, data_b = a.data, b.data

        a.swap(b)

        assert a.data is data_b
        assert b.data is data_a
        assert b[2, 2] == 1.0 and a[2, 2] == 0.0

    def test_swap_shape_mismatch(self):
        with pytest.raises(ValueError):
            Field(5, 5).swap(Field(5, 6))

    def test_copy_is_independent(self):
        a = Field(4, 4)
        a[1, 1] = 2.0
        b = a.copy()
        b[1, 1] = 5.0
        assert a[1, 1] == 2.0


class TestSimulationState:
    def test_swap_velocity_leaves_density(self):
        cur, prev = SimulationState(5, 5), SimulationState(5, 5)
        cur.vel_x.fill(1.0)
        cur.vel_y.fill(2.0)
        cur.density.fill(3.0)

        cur.swap_velocity(prev)

        assert prev.vel_x[2, 2] == 1.0
        assert prev.vel_y[2, 2] == 2.0
        assert cur.vel_x[2, 2] == 0.0
        assert cur.density[2, 2] == 3.0
        assert prev.density[2, 2] == 0.0

    def test_swap_density_leaves_velocity(self):
        cur, prev = SimulationState(5, 5), SimulationState(5, 5)
        cur.density.fill(3.0)
        cur.vel_x.fill(1.0)

        cur.swap_density(prev)

        assert prev.density[2, 2] == 3.0
        assert cur.density[2, 2] == 0.0
        assert cur.vel_x[2, 2] == 1.0

    def test_clear(self):
        state = SimulationState(5, 5)
        state.density.fill(1.0)
        state.vel_y.fill(-1.0)
        state.clear()
        assert not state.density.data.any()
        assert not state.vel_y.data.any()

import math

import numpy as np
import pytest

from boids import ConfigurationError, FlockState, init_flock, position


def test_init_scatters_resting_boids_inside_the_scale():
    flock = FlockState.init(200, 100.0, seed=1)

    assert flock.agent_count() == 200
    assert flock.positions.shape == (200, 3)
    assert (flock.positions >= 0).all()
    assert (flock.positions < 100.0).all()
    assert not flock.velocities.any()


def test_init_snaps_to_whole_numbers_by_default():
    flock = FlockState.init(50, 100.0, seed=5)
    np.testing.assert_array_equal(flock.positions, np.floor(flock.positions))


def test_init_can_use_continuous_coordinates():
    flock = FlockState.init(50, 1.5, seed=5, snap_to_grid=False)
    assert (flock.positions < 1.5).all()
    assert not np.array_equal(flock.positions, np.floor(flock.positions))


def test_scale_below_one_still_spreads_boids():
    flock = init_flock(10, 0.5, seed=1)

    assert len(np.unique(flock.positions)) > 1
    assert (flock.positions >= 0).all()
    assert (flock.positions < 0.5).all()


def test_fractional_scale_falls_back_to_continuous_coordinates():
    flock = FlockState.init(200, 2.5, seed=4)

    assert (flock.positions < 2.5).all()
    # Coordinates in the top partial cell [2, 2.5) are reachable
    assert (flock.positions >= 2.0).any()
    assert not np.array_equal(flock.positions, np.floor(flock.positions))


def test_whole_number_scale_reaches_every_cell():
    flock = FlockState.init(200, 4, seed=2)
    assert set(np.unique(flock.positions)) == {0.0, 1.0, 2.0, 3.0}


def test_same_seed_same_flock():
    a = init_flock(20, 100.0, seed=42)
    b = init_flock(20, 100.0, seed=42)
    c = init_flock(20, 100.0, seed=43)

    np.testing.assert_array_equal(a.positions, b.positions)
    assert not np.array_equal(a.positions, c.positions)


@pytest.mark.parametrize("size", [0, 1, -3])
def test_population_must_hold_at_least_two_boids(size):
    with pytest.raises(ConfigurationError):
        FlockState.init(size, 100.0)


@pytest.mark.parametrize("size", [2.5, "50", True])
def test_population_must_be_an_integer(size):
    with pytest.raises(ConfigurationError):
        FlockState.init(size, 100.0)


@pytest.mark.parametrize("scale", [0.0, -1.0, math.inf, math.nan])
def test_spatial_scale_must_be_positive(scale):
    with pytest.raises(ConfigurationError):
        FlockState.init(10, scale)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        init_flock(1, 100.0)


def test_constructor_rejects_mismatched_arrays():
    with pytest.raises(ConfigurationError):
        FlockState(np.zeros((3, 3)), np.zeros((2, 3)))
    with pytest.raises(ConfigurationError):
        FlockState(np.zeros((3, 2)), np.zeros((3, 2)))
    with pytest.raises(ConfigurationError):
        FlockState(np.zeros((1, 3)), np.zeros((1, 3)))


def test_constructor_copies_its_inputs():
    positions = np.ones((2, 3))
    flock = FlockState(positions, np.zeros((2, 3)))
    positions[0, 0] = 99.0
    assert flock.position(0) == (1.0, 1.0, 1.0)


def test_accessors_return_plain_tuples(pair_flock):
    assert pair_flock.position(1) == (30.0, 20.5, 90.0)
    assert position(pair_flock, 0) == (10.0, 20.0, 30.0)
    assert pair_flock.velocity(0) == (0.0, 0.0, 0.0)
    assert all(isinstance(v, float) for v in pair_flock.position(0))


@pytest.mark.parametrize("index", [-1, 2, 100])
def test_accessors_reject_out_of_range_indices(pair_flock, index):
    with pytest.raises(IndexError):
        pair_flock.position(index)
    with pytest.raises(IndexError):
        pair_flock.velocity(index)
    with pytest.raises(IndexError):
        pair_flock.apply_delta(index, 0.0, 0.0, 0.0)


def test_apply_delta_updates_velocity_then_position(pair_flock):
    pair_flock.apply_delta(0, 1.0, -2.0, 0.5)
    assert pair_flock.velocity(0) == (1.0, -2.0, 0.5)
    assert pair_flock.position(0) == (11.0, 18.0, 30.5)

    pair_flock.apply_delta(0, 0.0, 0.0, 0.0)
    # Velocity persists between steps
    assert pair_flock.position(0) == (12.0, 16.0, 31.0)
    # Other boids are untouched
    assert pair_flock.position(1) == (30.0, 20.5, 90.0)


@pytest.mark.parametrize("parallel", [True, False])
def test_zero_deltas_leave_a_resting_flock_in_place(parallel):
    flock = init_flock(10, 100.0, seed=9)
    start = flock.positions.copy()

    flock.apply_deltas(np.zeros((10, 3)), parallel=parallel)

    np.testing.assert_array_equal(flock.positions, start)
    assert not flock.velocities.any()


def test_apply_deltas_rejects_wrong_shape(pair_flock):
    with pytest.raises(ValueError):
        pair_flock.apply_deltas(np.zeros((3, 3)))


def test_apply_deltas_rejects_integer_buffer(pair_flock):
    with pytest.raises(ValueError):
        pair_flock.apply_deltas(np.zeros((2, 3), dtype=np.int64))

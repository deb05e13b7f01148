import math

import pytest

from nodalcfd.sod import GasState, SodExact, fzero, sod_residual

X_CHECK = [0, 0.3815784043380077, 0.3817784043380077, 0.39280783577858336, 0.40393726721915907,
           0.4150666986597348, 0.42619613010031043, 0.4373255615408861, 0.4484549929814618,
           0.4595844244220375, 0.47071385586261316, 0.4818432873031888, 0.49277271874376455,
           0.49287271874376454, 0.4930727187437645, 0.5926452620047974, 0.5928452620047974,
           0.675115573202932, 0.675315573202932, 1]
RHO_CHECK = [1, 1, 0.9992959031724784, 0.9240353444481086, 0.852758969991083, 0.7859504402212434,
             0.7233963393812908, 0.6648901587403833, 0.6102321829702019, 0.5592293765210307,
             0.5116952699978237, 0.467449846536279, 0.4270320564069276, 0.42667562327066666,
             0.4263194281781805, 0.4263194281781805, 0.26557371170513905, 0.26557371170513905,
             0.125, 0.125]


def test_sample_matches_reference():
    sod = SodExact(0.1)
    x, rho, _, _, _ = sod.sample()
    assert len(x) == len(X_CHECK)
    assert x == pytest.approx(X_CHECK, abs=0.001)
    assert rho == pytest.approx(RHO_CHECK, abs=0.001)


def test_shock_position():
    assert abs(SodExact(0.1).x4 - 0.6752) < 0.0001
    assert abs(SodExact(0.2).x4 - 0.8504) < 0.0001


def test_recalc_moves_waves():
    sod = SodExact(0.1)
    sod.calc(0.2)
    assert abs(sod.x4 - 0.8504) < 0.0001
    assert sod.t == 0.2


def test_sound_speed():
    assert GasState(1.0, 1.0, 0.0, 1.4).sound_speed() == pytest.approx(math.sqrt(1.4))


def test_fzero_root_of_residual():
    p = fzero(sod_residual, math.pi)
    assert abs(sod_residual(p)) < 1e-6


def test_fzero_simple_function():
    root = fzero(lambda v: v * v - 2.0, 3.0)
    assert root == pytest.approx(math.sqrt(2.0), abs=1e-6)


def test_far_states_are_initial_states():
    sod = SodExact(0.1)
    rho, p, u, e, rho_u = sod.at(0.0)
    assert (rho, p, u, rho_u) == (1.0, 1.0, 0.0, 0.0)
    assert e == pytest.approx(1.0 / 0.4)
    rho, p, u, e, rho_u = sod.at(1.0)
    assert (rho, p, u) == (0.125, 0.1, 0.0)
    assert e == pytest.approx(0.1 / 0.4)


def test_energy_and_momentum_consistent():
    sod = SodExact(0.15)
    for x in (0.3, 0.45, 0.55, 0.7):
        rho, p, u, e, rho_u = sod.at(x)
        assert rho_u == pytest.approx(rho * u)
        assert e == pytest.approx(p / 0.4 + 0.5 * u * u * rho)


def test_wave_ordering():
    sod = SodExact(0.1)
    assert sod.x1 < sod.x2 < sod.x0 < sod.x3 < sod.x4
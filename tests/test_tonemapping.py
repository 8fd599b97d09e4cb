import pytest

from fotonray.tonemapping import (
    GAMMA,
    clamp,
    clamp_and_equalize,
    equalize,
    gamma,
    gamma_and_clamp,
    reinhard,
)


def test_clamp_caps_values_above_one():
    assert clamp([0.5, 2.0, 1.0, 0.0]) == [0.5, 1.0, 1.0, 0.0]


def test_clamp_does_not_mutate_input():
    values = [3.0, 0.2]
    clamp(values)
    assert values == [3.0, 0.2]


def test_equalize_with_max_maps_max_to_one():
    values = [1.0, 2.0, 4.0]
    result = equalize(values, max(values))
    assert result[-1] == 1.0
    assert result == pytest.approx([v / 4.0 for v in values])


def test_clamp_and_equalize_threshold_behaviour():
    result = clamp_and_equalize([0.0, 2.0, 5.0], 2.0)
    assert result[0] == 0.0
    assert result[1] == 1.0
    assert result[2] == 1.0


def test_gamma_output_in_unit_range_and_monotone():
    values = [0.0, 0.1, 0.5, 1.0, 2.0, 3.0]
    result = gamma(values, 3.0)
    assert all(0.0 <= r <= 1.0 for r in result)
    assert result == sorted(result)
    assert result[-1] == 1.0


def test_gamma_and_clamp_inverts_with_power():
    values = [0.2, 0.8, 1.6]
    result = gamma_and_clamp(values, 2.0)
    assert [r ** GAMMA for r in result] == pytest.approx([v / 2.0 for v in values])


def test_gamma_and_clamp_above_threshold_is_one():
    assert gamma_and_clamp([10.0], 2.0) == [1.0]


def test_gamma_brightens_mid_tones():
    (r,) = gamma([0.25], 1.0)
    assert r > 0.25


def test_reinhard_zero_stays_zero_and_is_monotone():
    values = [0.0, 1.0, 2.0, 5.0, 10.0]
    result = reinhard(values, 10.0)
    assert result[0] == 0.0
    assert result == sorted(result)


def test_reinhard_saturates_above_equalize_threshold():
    result = reinhard([4.0, 8.0], 10.0)
    assert result[0] == pytest.approx(result[1])
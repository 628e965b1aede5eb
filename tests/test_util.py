import math

import pytest

from rtseries.util import INFINITY, PI, PI_OVER_2, TWO_PI, clamp


@pytest.mark.parametrize(
    "x, lower, upper, expected",
    [
        (-5.0, 0.0, 1.0, 0.0),
        (5.0, 0.0, 1.0, 1.0),
        (0.5, 0.0, 1.0, 0.5),
        (0.0, 0.0, 1.0, 0.0),
        (1.0, 0.0, 1.0, 1.0),
    ],
)
def test_clamp(x, lower, upper, expected):
    assert clamp(x, lower, upper) == expected


def test_clamp_passes_nan_through():
    assert math.isnan(clamp(math.nan, 0.0, 0.999))


def test_clamp_infinities():
    assert clamp(INFINITY, 0.0, 0.999) == 0.999
    assert clamp(-INFINITY, 0.0, 0.999) == 0.0


def test_clamp_with_pi_constants():
    assert clamp(TWO_PI, 0.0, PI) == PI
    assert clamp(PI_OVER_2, 0.0, PI) == pytest.approx(math.pi / 2)
    assert clamp(-PI, 0.0, TWO_PI) == 0.0
import numpy as np
import pytest

from linfit.analytics.dataset import load_sample_set, make_sample_set
from linfit.constants import SAMPLE_X, SAMPLE_Y


def test_sample_set_has_eleven_paired_points(samples):
    assert samples.n == 11
    assert samples.x.shape == samples.y.shape == (11,)
    assert samples.x.dtype == np.float64
    np.testing.assert_array_equal(samples.x, SAMPLE_X)
    np.testing.assert_array_equal(samples.y, SAMPLE_Y)


def test_sample_set_has_no_missing_values(samples):
    assert not np.isnan(samples.x).any()
    assert not np.isnan(samples.y).any()


def test_sample_set_is_read_only(samples):
    with pytest.raises(ValueError):
        samples.x[0] = 0.0
    with pytest.raises(ValueError):
        samples.y[0] = 0.0


def test_each_load_is_independent():
    a = load_sample_set()
    b = load_sample_set()
    assert a.x is not b.x
    np.testing.assert_array_equal(a.x, b.x)


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError, match="same length"):
        make_sample_set([1.0, 2.0, 3.0], [1.0, 2.0])


def test_to_frame_keeps_pairs(samples):
    df = samples.to_frame()
    assert list(df.columns) == ["x", "y"]
    assert len(df) == 11
    assert df.loc[2, "x"] == 13.0
    assert df.loc[2, "y"] == 7.68

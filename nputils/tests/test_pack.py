import numpy as np
import pytest

from nputils.errors import InvalidArgumentError
from nputils.utils.pack import masked_pack


def test_masked_pack_keeps_order():
    result = masked_pack([10.0, 20.0, 30.0, 40.0], [True, False, True, False])
    assert result.tolist() == [10.0, 30.0]
    assert result.dtype == np.float64


def test_masked_pack_all_false_is_empty():
    result = masked_pack(np.array([1.0, 2.0]), np.array([False, False]))
    assert result.shape == (0,)


def test_masked_pack_empty_inputs():
    assert masked_pack([], []).shape == (0,)


def test_masked_pack_returns_copy():
    arr = np.array([1.0, 2.0, 3.0])
    result = masked_pack(arr, np.ones(3, dtype=bool))
    assert not np.shares_memory(result, arr)


def test_masked_pack_rejects_length_mismatch():
    with pytest.raises(InvalidArgumentError) as excinfo:
        masked_pack([1.0, 2.0, 3.0], [True, False])
    assert excinfo.value.argument == "mask"


def test_masked_pack_rejects_integer_mask():
    with pytest.raises(InvalidArgumentError):
        masked_pack([1.0, 2.0, 3.0], [1, 0, 1])


def test_masked_pack_rejects_matrix():
    with pytest.raises(InvalidArgumentError):
        masked_pack(np.ones((2, 2)), np.ones((2, 2), dtype=bool))

import numpy as np
import pytest

from nputils.data.structs import OffsetArray
from nputils.errors import InvalidArgumentError


def test_offset_array_bounds():
    arr = OffsetArray([7.0, 8.0, 9.0], lower_bound=1)
    assert len(arr) == 3
    assert arr.upper_bound == 3
    assert arr.indices().tolist() == [1, 2, 3]
    assert arr[1] == 7.0
    assert arr[3] == 9.0


def test_offset_array_negative_base():
    arr = OffsetArray(np.array([1.0, 2.0]), lower_bound=-1)
    assert arr[-1] == 1.0
    assert arr[0] == 2.0
    assert arr.take([0, -1]).tolist() == [2.0, 1.0]


@pytest.mark.parametrize("index", [0, 4])
def test_offset_array_out_of_range(index):
    arr = OffsetArray([7.0, 8.0, 9.0], lower_bound=1)
    with pytest.raises(IndexError):
        arr[index]


def test_offset_array_coerces_to_float():
    arr = OffsetArray(np.array([1, 2], dtype=np.int32))
    assert arr.data.dtype == np.float64


def test_offset_array_rejects_matrix():
    with pytest.raises(InvalidArgumentError):
        OffsetArray(np.zeros((2, 2)))

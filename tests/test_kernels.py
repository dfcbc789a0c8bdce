import random
from array import array

import pytest

from duckworks.kernels import (
    CLAMP_MAX,
    clamp_conditional,
    clamp_min,
    saxpy,
    saxpy_chunked,
)


@pytest.mark.parametrize("clamp", [clamp_min, clamp_conditional])
def test_clamp_caps_large_values(clamp):
    values = [0, 17, 255, 256, 65535]
    clamp(values)
    assert values == [0, 17, 255, 255, 255]


@pytest.mark.parametrize("clamp", [clamp_min, clamp_conditional])
def test_clamp_works_on_uint16_array(clamp):
    rng = random.Random(1)
    values = array("H", (rng.randrange(0, 65536) for _ in range(500)))
    clamp(values)
    assert max(values) <= CLAMP_MAX


def test_clamp_variants_agree():
    rng = random.Random(2)
    original = [rng.randrange(0, 65536) for _ in range(1000)]
    first = list(original)
    second = list(original)
    clamp_min(first)
    clamp_conditional(second)
    assert first == second
    assert all(a == b for a, b in zip(first, original) if b <= CLAMP_MAX)


@pytest.mark.parametrize("length", range(0, 20))
def test_saxpy_variants_agree(length):
    rng = random.Random(length)
    x = [rng.uniform(-10, 10) for _ in range(length)]
    y = [rng.uniform(-10, 10) for _ in range(length)]
    y_plain = list(y)
    y_chunked = list(y)
    saxpy(1.75, x, y_plain)
    saxpy_chunked(1.75, x, y_chunked)
    assert y_plain == y_chunked


@pytest.mark.parametrize("func", [saxpy, saxpy_chunked])
def test_saxpy_benchmark_case(func):
    n = 5 * 1024
    x = array("f", [1.0] * n)
    y = array("f", [-1.0] * n)
    func(2.0, x, y)
    assert set(y) == {1.0}


@pytest.mark.parametrize("func", [saxpy, saxpy_chunked])
def test_saxpy_zero_scale_leaves_y(func):
    rng = random.Random(9)
    x = [rng.random() for _ in range(13)]
    y = [rng.random() for _ in range(13)]
    before = list(y)
    func(0.0, x, y)
    assert y == before


@pytest.mark.parametrize("func", [saxpy, saxpy_chunked])
def test_saxpy_length_mismatch(func):
    with pytest.raises(ValueError):
        func(1.0, [1.0, 2.0], [1.0])
"""Tests for sample-set coercion, generation and loading."""

import numpy as np
import pytest

from src.constats.errors import InvalidInputError
from src.constats.samples import as_samples, generate_samples, load_samples


def test_as_samples_is_read_only_int64():
    source = [3, 1, 2]
    arr = as_samples(source)
    assert arr.dtype == np.int64
    assert not arr.flags.writeable
    assert source == [3, 1, 2]


def test_as_samples_accepts_small_unsigned():
    arr = as_samples(np.array([1, 2, 3], dtype=np.uint64))
    assert arr.tolist() == [1, 2, 3]


def test_as_samples_rejects_large_unsigned():
    with pytest.raises(InvalidInputError):
        as_samples(np.array([2**64 - 1], dtype=np.uint64))


def test_as_samples_rejects_empty():
    with pytest.raises(InvalidInputError, match="empty"):
        as_samples(np.array([], dtype=np.int64))


def test_generate_samples_is_seeded():
    a = generate_samples(100, 0, 10, seed=4)
    b = generate_samples(100, 0, 10, seed=4)
    assert a.tolist() == b.tolist()
    assert a.min() >= 0 and a.max() <= 10


def test_generate_samples_closed_range():
    assert set(generate_samples(200, 5, 5, seed=0).tolist()) == {5}


@pytest.mark.parametrize("count, low, high", [(0, 0, 1), (10, 2, 1)])
def test_generate_samples_rejects_bad_arguments(count, low, high):
    with pytest.raises(InvalidInputError):
        generate_samples(count, low, high)


def test_load_text_samples(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("# latency in ns\n12\n\n-4  # warm-up\n 7 \n")
    assert load_samples(path).tolist() == [12, -4, 7]


def test_load_text_reports_bad_line(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_text("1\n2\nthree\n")
    with pytest.raises(InvalidInputError, match=":3:"):
        load_samples(path)


def test_load_npy_samples(tmp_path):
    path = tmp_path / "samples.npy"
    np.save(path, np.array([5, 6, 7], dtype=np.int32))
    arr = load_samples(path)
    assert arr.dtype == np.int64
    assert arr.tolist() == [5, 6, 7]


def test_load_empty_file_is_invalid(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("# nothing here\n")
    with pytest.raises(InvalidInputError):
        load_samples(path)


def test_load_non_utf8_text_is_invalid(tmp_path):
    path = tmp_path / "samples.txt"
    path.write_bytes(b"1\n2\n\xff\xfe\n")
    with pytest.raises(InvalidInputError, match="UTF-8"):
        load_samples(path)


@pytest.mark.parametrize("payload", [b"not an npy file", b""])
def test_load_corrupt_npy_is_invalid(tmp_path, payload):
    path = tmp_path / "samples.npy"
    path.write_bytes(payload)
    with pytest.raises(InvalidInputError, match=r"\.npy"):
        load_samples(path)


@pytest.mark.parametrize("low, high", [(-(2**70), 0), (0, 2**63), (-(2**64), 2**64)])
def test_generate_samples_rejects_range_beyond_int64(low, high):
    with pytest.raises(InvalidInputError, match="64-bit"):
        generate_samples(10, low, high)


def test_generate_samples_full_int64_range():
    arr = generate_samples(50, -(2**63), 2**63 - 1, seed=8)
    assert arr.size == 50

"""Tests for fuse_dimensions and split_dimensions."""

import numpy as np
import pytest

from quantics import (
    OutOfRangeError,
    ShapeMismatchError,
    fuse_dimensions,
    merge_dimensions,
    split_dimensions,
)


class TestFuseDimensions:
    """Tests for fuse_dimensions."""

    def test_two_dimensions(self):
        """Test position-wise 1 + (a - 1) + 2 (b - 1)."""
        fused = fuse_dimensions([1, 2, 1], [2, 1, 1])
        assert fused.tolist() == [3, 2, 1]

    def test_first_list_least_significant(self):
        """Test that the last list carries the largest weight."""
        assert fuse_dimensions([2], [1], [1]).tolist() == [2]
        assert fuse_dimensions([1], [2], [1]).tolist() == [3]
        assert fuse_dimensions([1], [1], [2]).tolist() == [5]

    def test_single_dimension_is_identity(self):
        """Test that fusing one list returns the same digits."""
        assert fuse_dimensions([1, 2, 2, 1]).tolist() == [1, 2, 2, 1]

    def test_base_three(self):
        """Test fusing base-3 digits."""
        # 1 + (3 - 1) + 3 * (2 - 1) = 6
        assert fuse_dimensions([3, 1], [2, 3], base=3).tolist() == [6, 7]

    def test_returns_int64_array(self):
        fused = fuse_dimensions([1, 2], [2, 2])
        assert isinstance(fused, np.ndarray)
        assert fused.dtype == np.int64

    def test_batch(self):
        """Test that leading axes are treated as a batch."""
        a = np.array([[1, 2, 1], [2, 2, 2]])
        b = np.array([[2, 1, 1], [1, 1, 2]])
        fused = fuse_dimensions(a, b)
        assert fused.shape == (2, 3)
        assert fused.tolist() == [[3, 2, 1], [2, 2, 4]]

    def test_out(self):
        """Test writing into a preallocated array."""
        out = np.full(3, 99, dtype=np.int64)
        result = fuse_dimensions([1, 2, 1], [2, 1, 1], out=out)
        assert result is out
        assert out.tolist() == [3, 2, 1]

    @pytest.mark.parametrize("alias", [0, 1])
    def test_out_aliases_input(self, alias):
        """Test that out may be one of the input arrays."""
        inputs = [np.array([1, 2, 1], dtype=np.int64), np.array([2, 1, 1], dtype=np.int64)]
        out = inputs[alias]
        result = fuse_dimensions(*inputs, out=out)
        assert result is out
        assert out.tolist() == [3, 2, 1]

    def test_out_wrong_shape(self):
        with pytest.raises(ShapeMismatchError):
            fuse_dimensions([1, 2, 1], [2, 1, 1], out=np.ones(2, dtype=np.int64))

    def test_does_not_modify_inputs(self):
        a = np.array([1, 2, 1])
        b = np.array([2, 1, 1])
        fuse_dimensions(a, b)
        assert a.tolist() == [1, 2, 1]
        assert b.tolist() == [2, 1, 1]

    def test_merge_dimensions_alias(self):
        assert merge_dimensions([1, 2, 1], [2, 1, 1]).tolist() == [3, 2, 1]

    def test_unequal_lengths(self):
        """Test that lists of different length are rejected."""
        with pytest.raises(ShapeMismatchError):
            fuse_dimensions([1, 2, 1], [2, 1])

    def test_no_lists(self):
        with pytest.raises(ShapeMismatchError):
            fuse_dimensions()

    @pytest.mark.parametrize("bad", [[0, 1], [1, 3]])
    def test_digit_out_of_range(self, bad):
        """Test that digits outside [1, base] are rejected."""
        with pytest.raises(OutOfRangeError):
            fuse_dimensions(bad, [1, 1])

    def test_invalid_base(self):
        with pytest.raises(ValueError):
            fuse_dimensions([1, 1], base=1)

    def test_non_integer_digits(self):
        with pytest.raises(TypeError):
            fuse_dimensions([1.0, 2.0])


class TestSplitDimensions:
    """Tests for split_dimensions."""

    def test_two_dimensions(self):
        parts = split_dimensions([3, 2, 1], 2)
        assert len(parts) == 2
        assert parts[0].tolist() == [1, 2, 1]
        assert parts[1].tolist() == [2, 1, 1]

    def test_base_three(self):
        parts = split_dimensions([6, 7], 2, base=3)
        assert parts[0].tolist() == [3, 1]
        assert parts[1].tolist() == [2, 3]

    def test_single_dimension(self):
        (part,) = split_dimensions([1, 2, 2], 1)
        assert part.tolist() == [1, 2, 2]

    def test_out(self):
        out = [np.zeros(3, dtype=np.int64), np.zeros(3, dtype=np.int64)]
        parts = split_dimensions([3, 2, 1], 2, out=out)
        assert parts[0] is out[0]
        assert out[0].tolist() == [1, 2, 1]
        assert out[1].tolist() == [2, 1, 1]

    def test_out_wrong_count(self):
        with pytest.raises(ShapeMismatchError):
            split_dimensions([3, 2, 1], 2, out=[np.zeros(3, dtype=np.int64)])

    @pytest.mark.parametrize("bad", [0, 5])
    def test_fused_digit_out_of_range(self, bad):
        """Test that fused digits outside [1, base**d] are rejected."""
        with pytest.raises(OutOfRangeError):
            split_dimensions([1, bad], 2)

    def test_invalid_d(self):
        with pytest.raises(ValueError):
            split_dimensions([1, 2], 0)

    def test_scalar_rejected(self):
        with pytest.raises(ShapeMismatchError):
            split_dimensions(3, 2)


class TestPackingInverse:
    """split_dimensions undoes fuse_dimensions."""

    @pytest.mark.parametrize("base", [2, 3, 4])
    @pytest.mark.parametrize("d", [1, 2, 3])
    def test_split_fuse(self, base, d):
        rng = np.random.default_rng(1234 + 10 * base + d)
        lists = [rng.integers(1, base + 1, size=7) for _ in range(d)]
        parts = split_dimensions(fuse_dimensions(*lists, base=base), d, base=base)
        for part, original in zip(parts, lists):
            np.testing.assert_array_equal(part, original)

    @pytest.mark.parametrize("base", [2, 3])
    def test_fuse_split_exhaustive(self, base):
        """Every fused digit of base**2 survives split then fuse."""
        fused = np.arange(1, base ** 2 + 1)
        parts = split_dimensions(fused, 2, base=base)
        np.testing.assert_array_equal(fuse_dimensions(*parts, base=base), fused)

    def test_grouped_fuse_matches_flat_fuse(self):
        """Fusing in two stages equals one flat fuse."""
        a, b, c = [1, 2, 2], [2, 1, 2], [2, 2, 1]
        flat = fuse_dimensions(a, b, c)
        inner = fuse_dimensions(a, b)
        # inner digits are base 4; c is the next, more significant, dimension
        staged = inner + (np.asarray(c) - 1) * 4
        np.testing.assert_array_equal(flat, staged)

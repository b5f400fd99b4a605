# Python documentation examples: quantics index conversion
#
# Run with:
#   python docs/examples/python/codec.py

import numpy as np

from quantics import (
    QuanticsFunction,
    deinterleave_dimensions,
    fuse_dimensions,
    index_to_quantics,
    interleave_dimensions,
    quantics_to_index,
    split_dimensions,
)


# ANCHOR: single_index
q = index_to_quantics(5, 4)
assert q.tolist() == [1, 2, 1, 1]
assert quantics_to_index(q) == 5
# ANCHOR_END: single_index


# ANCHOR: fused
q = index_to_quantics([2, 6], 3, unfoldingscheme="fused")
assert q.tolist() == [3, 1, 4]
assert quantics_to_index(q, 2, unfoldingscheme="fused").tolist() == [2, 6]
# ANCHOR_END: fused


# ANCHOR: interleaved
q = index_to_quantics([2, 6], 3, unfoldingscheme="interleaved")
assert q.tolist() == [1, 2, 1, 1, 2, 2]
assert quantics_to_index(q, 2, unfoldingscheme="interleaved").tolist() == [2, 6]
# ANCHOR_END: interleaved


# ANCHOR: packing
fused = fuse_dimensions([1, 2, 1], [2, 1, 1])
assert fused.tolist() == [3, 2, 1]
assert [s.tolist() for s in split_dimensions(fused, 2)] == [[1, 2, 1], [2, 1, 1]]

long = interleave_dimensions([1, 2], [2, 1])
assert long.tolist() == [1, 2, 2, 1]
assert [s.tolist() for s in deinterleave_dimensions(long, 2)] == [[1, 2], [2, 1]]
# ANCHOR_END: packing


# ANCHOR: base
q = index_to_quantics(16, 3, base=3)
assert q.tolist() == [2, 3, 1]
assert quantics_to_index(q, base=3) == 16
# ANCHOR_END: base


# ANCHOR: batch
indices = np.array([[1, 1], [2, 6], [8, 8]])
q = index_to_quantics(indices, 3, unfoldingscheme="fused")
assert q.shape == (3, 3)
assert (quantics_to_index(q, 2, unfoldingscheme="fused") == indices).all()
# ANCHOR_END: batch


# ANCHOR: function
def f(idx):
    x, y = idx
    return float(x * y)


qf = QuanticsFunction.interleaved(f, 2)
q = index_to_quantics([3, 5], 4, unfoldingscheme="interleaved")
assert qf(q) == 15.0

# A batch of digit sequences is evaluated element-wise
qs = index_to_quantics(np.array([[1, 2], [4, 4]]), 4, unfoldingscheme="interleaved")
assert qf(qs) == [2.0, 16.0]
# ANCHOR_END: function

# nist_sts

Statistical tests for judging the randomness of bit sequences, following the
NIST SP 800-22 test suite.

## Installation

```
pip install .
```

The tests that use the incomplete gamma function need `scipy`, which is
installed with the package.

## Input data

Every test works on a `BitVec` (`nist_sts.bitvec.BitVec`), an immutable list
of bits. It can be built from a string of `'0'` and `'1'` characters, from
bytes (or a list of byte values, read most significant bit first), or from a
list of booleans:

```python
from nist_sts.bitvec import BitVec

bits = BitVec("1011010101")
from_bytes = BitVec(b"\x8f\x01")
from_bools = BitVec([True, False, True])
lossy = BitVec("101a101100b", lossy=True)   # other characters are skipped
short = BitVec(b"\xff\x00", max_length=12)  # keep at most 12 bits

len(bits)        # 10
bits[0]          # True
bits[2:6]        # a BitVec holding bits 2..5
list(bits)       # the bits as booleans
bits.crop(4)     # a new BitVec holding the first 4 bits
str(bits)        # 'BitVec(length=10)'
```

A string holding other characters raises `ValueError` unless `lossy=True` is
given. Other input types raise `TypeError`, and a negative `max_length` or
crop length raises `ValueError`.

## Results and errors

`nist_sts.result.TestResult` holds a `p_value` and an optional `comment`.
`passed(threshold)` returns whether the P-value is at least the threshold;
the default is `TestResult.DEFAULT_THRESHOLD`, 0.01.

A test that cannot be run on the given data raises
`nist_sts.result.TestError`. The module also defines `RunnerError` and
`StsError` (also available as `LibError`).

## Tests

| Module | Function | Result |
|---|---|---|
| `nist_sts.binary_matrix_rank` | `binary_matrix_rank_test(data)` | one `TestResult` |
| `nist_sts.linear_complexity` | `linear_complexity_test(data, test_arg=None)` | one `TestResult` |
| `nist_sts.random_excursions_variant` | `random_excursions_variant_test(data)` | tuple of 18 `TestResult`s |

```python
import os

from nist_sts.bitvec import BitVec
from nist_sts.binary_matrix_rank import binary_matrix_rank_test
from nist_sts.linear_complexity import LinearComplexityTestArg, linear_complexity_test
from nist_sts.random_excursions_variant import random_excursions_variant_test

data = BitVec(os.urandom(125_000))  # 10^6 bits

print(binary_matrix_rank_test(data))
print(linear_complexity_test(data, LinearComplexityTestArg(1000)))
for result in random_excursions_variant_test(data):
    print(result.comment, result.p_value)
```

- **Binary matrix rank** cuts the data into 32x32 bit matrices and compares
  the distribution of their ranks with the expected one. Data shorter than
  38 912 bits gives a P-value of 0.0 with the comment
  `"Data is too short! Minimum is 38 912 Bits."`.
- **Linear complexity** needs at least 10^6 bits. `LinearComplexityTestArg()`
  (or a block length of 0) uses a block length of 512; a manual block length
  must lie between 500 and 5000 and give at least 200 blocks, otherwise the
  test raises `TestError`.
- **Random excursions variant** needs at least 10^6 bits. The results are for
  the states -9..-1 and +1..+9 in that order, each commented like
  `"x = +3"`. With too few cycles every result has a P-value of 0.0 and the
  comment `"Too few cycles"`.

## Helpers

- `nist_sts.linear_complexity.berlekamp_massey(bits)` returns the linear
  complexity of a sequence of bits.
- `nist_sts.binary_matrix_rank.binary_rank(rows)` returns the rank over GF(2)
  of a square matrix given as integer rows (most significant bit first).
- `nist_sts.block_patterns.pattern_counts(data, block_length)` counts every
  overlapping pattern of `block_length` bits, wrapping around the end of the
  data; `access_bits(data, start_idx, block_length)` reads one such pattern
  as an integer, and `validate_block_length(block_length)` accepts lengths
  from 2 to 64 and raises `ValueError` otherwise.

## What the package does not do

The package provides the three tests listed above and nothing more: the other
tests of the suite, including the serial and approximate entropy tests, are
not part of it. There is no runner that executes a set of tests in one call,
and no command-line program; the tests are called as Python functions.
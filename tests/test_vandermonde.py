"""Tests for exact Vandermonde coding over GF(p)."""

import pytest

from finite_field import Field, FieldElement
from vandermonde import (
    VandermondeCode,
    build_vandermonde,
    decode_evaluations_to_rows,
    encode_rows_as_evaluations,
)

GF17 = Field(17)


def ints(values):
    return [v.number for v in values]


def test_build_vandermonde():
    V = build_vandermonde([0, 2, 3], 3, GF17)
    assert V.shape == (3, 3)
    assert ints(V[0]) == [1, 0, 0]
    assert ints(V[1]) == [1, 2, 4]
    assert ints(V[2]) == [1, 3, 9]


def test_encode_evaluates_polynomials():
    # p(x) = 1 + 2x + 3x^2, q(x) = 5 + 16x^2
    evals = encode_rows_as_evaluations([[1, 2, 3], [5, 0, 16]], [0, 1, 2], GF17)
    assert evals.shape == (2, 3)
    assert ints(evals[0]) == [1, 6, 0]
    assert ints(evals[1]) == [5, 4, 1]


def test_decode_recovers_coefficients():
    rows = [[1, 2, 3], [5, 0, 16]]
    nodes = [3, 7, 11]
    evals = encode_rows_as_evaluations(rows, nodes, GF17)
    recovered = decode_evaluations_to_rows(evals, nodes, GF17)
    assert [ints(r) for r in recovered] == rows
    assert all(isinstance(c, FieldElement) for c in recovered[0])


def test_decode_repeated_nodes_is_singular():
    with pytest.raises(ValueError):
        decode_evaluations_to_rows([[1, 2, 3]], [1, 1, 2], GF17)


def test_decode_length_mismatch():
    with pytest.raises(ValueError):
        decode_evaluations_to_rows([[1, 2]], [1, 2, 3], GF17)


def test_code_extra_nodes():
    code = VandermondeCode([1, 2, 3, 4, 5], row_degree=2, field=GF17)
    evals = code.encode([[4, 9]])
    assert evals.shape == (1, 5)
    assert [ints(r) for r in code.decode(evals)] == [[4, 9]]


def test_code_rejects_too_few_nodes():
    with pytest.raises(ValueError):
        VandermondeCode([1, 2], row_degree=3, field=GF17)


def test_code_rejects_wrong_row_length():
    code = VandermondeCode([1, 2, 3], row_degree=3, field=GF17)
    with pytest.raises(ValueError):
        code.encode([[1, 2]])


def test_empty_rows_rejected():
    with pytest.raises(ValueError):
        encode_rows_as_evaluations([[]], [1, 2], GF17)


def test_code_rejects_zero_degree():
    with pytest.raises(ValueError):
        VandermondeCode([1, 2], row_degree=0, field=GF17)

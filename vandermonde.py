"""
vandermonde.py

Exact polynomial coding helpers over a prime field.

This module provides:
 - build_vandermonde(nodes, degree, field) -> Vandermonde matrix (numpy object array of FieldElement)
 - encode_rows_as_evaluations(rows, nodes, field) -> evaluate polynomials (rows are coefficient vectors)
 - decode_evaluations_to_rows(evals, nodes, field) -> interpolate to recover coefficients

numpy is only used as a container (dtype=object); every entry is a FieldElement,
so there is no rounding anywhere. Interpolation divides, so the field order must be prime.
"""

from functools import reduce
from typing import List, Sequence, Union
import logging
import operator

import numpy as np

from finite_field import Field, FieldElement

logger = logging.getLogger(__name__)

Scalar = Union[int, FieldElement]


def _lift(values: Sequence[Scalar], field: Field) -> List[FieldElement]:
    return [v if isinstance(v, FieldElement) else field.element(v) for v in values]


def _dot(a: np.ndarray, b: np.ndarray) -> FieldElement:
    # elementwise products reduced with field addition; no integer 0 start value
    return reduce(operator.add, a * b)


def build_vandermonde(nodes: Sequence[Scalar], degree: int, field: Field) -> np.ndarray:
    """
    Build a Vandermonde matrix V where V[i, j] = nodes[i]**j for j in [0..degree-1].

    Args:
        nodes: evaluation points (ints or FieldElement)
        degree: number of polynomial coefficients (polynomial degree = degree-1)
        field: field the entries live in

    Returns:
        numpy object array shape (len(nodes), degree)
    """
    xs = _lift(nodes, field)
    deg = int(degree)
    if deg < 1:
        raise ValueError(f"degree must be at least 1, got {deg}")
    V = np.empty((len(xs), deg), dtype=object)
    for i, x in enumerate(xs):
        acc = field.one()
        for j in range(deg):
            V[i, j] = acc
            acc = acc * x
    return V


def encode_rows_as_evaluations(rows: List[Sequence[Scalar]], nodes: Sequence[Scalar], field: Field) -> np.ndarray:
    """
    Encode rows (each row is a list of polynomial coefficients [a0, a1, ...])
    by evaluating each polynomial at every node.

    Returns:
        evals: numpy object array shape (len(rows), len(nodes))
    """
    rows_arr = np.array([_lift(r, field) for r in rows], dtype=object)
    if rows_arr.ndim != 2:
        raise ValueError("rows must all have the same number of coefficients")
    r, deg = rows_arr.shape
    V = build_vandermonde(nodes, degree=deg, field=field)
    evals = np.empty((r, V.shape[0]), dtype=object)
    for i in range(r):
        for k in range(V.shape[0]):
            evals[i, k] = _dot(rows_arr[i], V[k])
    return evals


def _solve(V: np.ndarray, Y: np.ndarray) -> np.ndarray:
    """
    Gauss-Jordan elimination of V X = Y over the field. V is square.
    """
    n = V.shape[0]
    M = np.concatenate([V, Y], axis=1)
    for col in range(n):
        pivot = next((r for r in range(col, n) if not M[r, col].is_zero()), None)
        if pivot is None:
            raise ValueError("singular Vandermonde system (are the nodes distinct?)")
        if pivot != col:
            M[[col, pivot]] = M[[pivot, col]]
        M[col] = M[col] / M[col, col]
        for r in range(n):
            if r != col and not M[r, col].is_zero():
                M[r] = M[r] - M[col] * M[r, col]
    return M[:, n:]


def decode_evaluations_to_rows(evals: List[Sequence[Scalar]], nodes: Sequence[Scalar], field: Field) -> List[List[FieldElement]]:
    """
    Given polynomial evaluations (list of evaluation-vectors for each polynomial),
    interpolate to recover coefficient vectors.

    Args:
        evals: shape (r, n_nodes)
        nodes: length n_nodes, distinct
    Returns:
        list of coefficient lists (length = n_nodes)
    """
    evals_arr = np.array([_lift(e, field) for e in evals], dtype=object)
    r, n_nodes = evals_arr.shape
    if n_nodes != len(nodes):
        raise ValueError(f"expected {len(nodes)} evaluations per row, got {n_nodes}")
    V = build_vandermonde(nodes, degree=n_nodes, field=field)
    logger.debug("interpolating %d rows over %d nodes in %r", r, n_nodes, field)
    coeffs = _solve(V, evals_arr.T)  # shape (n_nodes, r)
    return [list(coeffs[:, i]) for i in range(coeffs.shape[1])]


class VandermondeCode:
    """
    Encode/decode many rows using the same node set.
    """

    def __init__(self, nodes: Sequence[Scalar], row_degree: int, field: Field):
        """
        nodes: evaluation points (must be distinct)
        row_degree: number of coefficients per row (polynomial degree + 1)
        """
        if row_degree < 1:
            raise ValueError("row_degree must be at least 1")
        if len(nodes) < row_degree:
            raise ValueError("Number of nodes must be >= row_degree for interpolation")
        self.field = field
        self.nodes = _lift(nodes, field)
        self.row_degree = int(row_degree)
        self.vand = build_vandermonde(self.nodes, self.row_degree, field)  # shape (n_nodes, deg)

    def encode(self, rows: List[Sequence[Scalar]]) -> np.ndarray:
        """
        Encode multiple rows (each is a coefficient vector len==row_degree)
        -> returns evaluations shape (len(rows), len(nodes))
        """
        for row in rows:
            if len(row) != self.row_degree:
                raise ValueError(f"row has {len(row)} coefficients, expected {self.row_degree}")
        return encode_rows_as_evaluations(rows, self.nodes, self.field)

    def decode(self, evals: List[Sequence[Scalar]]) -> List[List[FieldElement]]:
        """
        Decode evaluations back to coefficient rows, using the first row_degree nodes.
        """
        k = self.row_degree
        head = [list(e)[:k] for e in evals]
        return decode_evaluations_to_rows(head, self.nodes[:k], self.field)

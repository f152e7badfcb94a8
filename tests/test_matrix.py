# tests/test_matrix.py
# -*- coding: utf-8 -*-
"""
Serial tests of the Matrix class: layout, element access, copies and
the distribution rules of mult / transpose_mult. In a serial run the
reductions of the distributed products are no-ops, the parallel
behaviour is covered in test_parallel.py.
"""

import copy

import numpy as np
import pytest

from pyROB import Matrix, Vector
from pyROB.utils import ContractError


def make(rows, cols, distributed, offset=0.0):
    data = np.arange(rows * cols, dtype=np.double).reshape(rows, cols) + offset
    return Matrix.from_data(data, rows, cols, distributed)


# ---------------------------------------------------------------------
# Construction and layout
# ---------------------------------------------------------------------

def test_new_matrix_is_zero():
    m = Matrix(3, 4, False)
    assert m.num_rows == 3
    assert m.num_columns == 4
    assert not m.distributed
    assert not m.readonly
    assert np.array_equal(m.to_numpy(), np.zeros((3, 4)))


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2), (2, -5)])
def test_dimensionless_matrix_is_rejected(rows, cols):
    with pytest.raises(ContractError):
        Matrix(rows, cols, True)


def test_from_data_is_row_major():
    m = Matrix.from_data([1, 2, 3, 4, 5, 6], 2, 3, True)
    assert m.distributed
    assert m[0, 2] == 3.0
    assert m[1, 0] == 4.0


def test_from_data_copies_the_buffer():
    data = np.ones((2, 2))
    m = Matrix.from_data(data, 2, 2, False)
    data[0, 0] = 7.0
    assert m[0, 0] == 1.0


def test_from_data_size_mismatch():
    with pytest.raises(ContractError):
        Matrix.from_data(np.ones(5), 2, 3, False)
    with pytest.raises(ContractError):
        Matrix.from_data(None, 2, 3, False)


# ---------------------------------------------------------------------
# Element access
# ---------------------------------------------------------------------

def test_item_round_trip():
    m = Matrix(3, 2, True)
    for r in range(3):
        for c in range(2):
            v = 10.0 * r + c + 0.125
            m[r, c] = v
            assert m[r, c] == v
            assert m.item(r, c) == v


@pytest.mark.parametrize("row, col", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_item_out_of_range(row, col):
    m = Matrix(3, 2, False)
    with pytest.raises(ContractError):
        m[row, col]
    with pytest.raises(ContractError):
        m[row, col] = 1.0


@pytest.mark.parametrize("row, col", [(0.5, 0), (0, 1.0), ("0", 0)])
def test_item_rejects_non_integer_indices(row, col):
    m = Matrix(3, 2, False)
    with pytest.raises(ContractError):
        m[row, col]
    with pytest.raises(ContractError):
        m[row, col] = 1.0
    assert m[np.int64(1), 1] == 0.0


def test_readonly_matrix_cannot_be_modified():
    m = make(2, 2, False).freeze()
    assert m.readonly
    with pytest.raises(ContractError):
        m[0, 0] = 5.0
    assert m[0, 0] == 0.0


# ---------------------------------------------------------------------
# Copies
# ---------------------------------------------------------------------

@pytest.mark.parametrize("dup", [lambda m: m.copy(), copy.copy, copy.deepcopy])
def test_copies_do_not_alias(dup):
    m = make(2, 3, True)
    c = dup(m)
    c[0, 0] = -1.0
    assert m[0, 0] == 0.0
    assert c.distributed == m.distributed
    assert (c.num_rows, c.num_columns) == (2, 3)


def test_copy_of_readonly_is_writable():
    c = make(2, 2, False).freeze().copy()
    assert not c.readonly
    c[1, 1] = 9.0
    assert c[1, 1] == 9.0


# ---------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------

@pytest.mark.parametrize("distributed", [False, True])
def test_mult_matrix_keeps_distribution(distributed):
    A = make(4, 3, distributed)
    B = make(3, 2, False, offset=1.0)
    C = A.mult(B)
    assert C.distributed == distributed
    assert np.allclose(C.to_numpy(), A.to_numpy() @ B.to_numpy())


def test_mult_vector():
    A = make(4, 3, True)
    v = Vector.from_data([1.0, -1.0, 2.0], 3, False)
    w = A.mult(v)
    assert isinstance(w, Vector)
    assert w.distributed
    assert w.dim == 4
    assert np.allclose(w.to_numpy(), A.to_numpy() @ v.to_numpy())


@pytest.mark.parametrize("distributed", [False, True])
def test_transpose_mult_matrix(distributed):
    A = make(4, 3, distributed)
    B = make(4, 2, distributed, offset=2.0)
    C = A.transpose_mult(B)
    assert not C.distributed
    assert (C.num_rows, C.num_columns) == (3, 2)
    assert np.allclose(C.to_numpy(), A.to_numpy().T @ B.to_numpy())


def test_transpose_mult_vector():
    A = make(4, 3, True)
    v = Vector.from_data([1.0, 0.0, -1.0, 0.5], 4, True)
    w = A.transpose_mult(v)
    assert not w.distributed
    assert w.dim == 3
    assert np.allclose(w.to_numpy(), A.to_numpy().T @ v.to_numpy())


@pytest.mark.parametrize(
    "a_shape, a_dist, b_shape, b_dist",
    [
        ((4, 3), False, (2, 2), False),  # columns vs rows
        ((4, 3), True, (4, 2), False),
        ((4, 3), False, (3, 2), True),  # distributed right operand
        ((4, 3), True, (3, 2), True),
    ],
)
def test_mult_matrix_preconditions(a_shape, a_dist, b_shape, b_dist):
    with pytest.raises(ContractError):
        make(*a_shape, a_dist).mult(make(*b_shape, b_dist))


@pytest.mark.parametrize(
    "a_dist, v_dim, v_dist",
    [
        (False, 3, False),  # undistributed matrix
        (True, 3, True),  # distributed vector
        (True, 2, False),  # size mismatch
    ],
)
def test_mult_vector_preconditions(a_dist, v_dim, v_dist):
    with pytest.raises(ContractError):
        make(4, 3, a_dist).mult(Vector(v_dim, v_dist))


@pytest.mark.parametrize(
    "a_dist, b_rows, b_dist",
    [
        (True, 4, False),  # mixed distribution
        (False, 4, True),
        (False, 3, False),  # rows mismatch
        (True, 5, True),
    ],
)
def test_transpose_mult_matrix_preconditions(a_dist, b_rows, b_dist):
    with pytest.raises(ContractError):
        make(4, 3, a_dist).transpose_mult(make(b_rows, 2, b_dist))


@pytest.mark.parametrize(
    "a_dist, v_dim, v_dist",
    [
        (False, 4, False),
        (False, 4, True),
        (True, 4, False),
        (True, 3, True),  # size mismatch
    ],
)
def test_transpose_mult_vector_preconditions(a_dist, v_dim, v_dist):
    with pytest.raises(ContractError):
        make(4, 3, a_dist).transpose_mult(Vector(v_dim, v_dist))


def test_product_with_none():
    A = make(2, 2, True)
    with pytest.raises(ContractError):
        A.mult(None)
    with pytest.raises(ContractError):
        A.transpose_mult(None)


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------

def test_transpose():
    A = make(2, 3, False)
    T = A.transpose()
    assert (T.num_rows, T.num_columns) == (3, 2)
    assert np.array_equal(T.to_numpy(), A.to_numpy().T)
    with pytest.raises(ContractError):
        make(2, 3, True).transpose()


def test_get_first_n_columns():
    A = make(3, 4, True)
    F = A.get_first_n_columns(2)
    assert F.distributed
    assert np.array_equal(F.to_numpy(), A.to_numpy()[:, :2])
    with pytest.raises(ContractError):
        A.get_first_n_columns(5)

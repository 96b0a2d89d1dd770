"""Tests for the lattice structure (infimum and supremum) of points/vectors"""

from hypothesis import given
import numpy as np

from dgkernel.point_vector import PointVector
from .hypothesis_extra_strategies import gen_point_vectors


@given(points=gen_point_vectors(2, exact_arithmetic=False))
def test_inf_and_sup__are_commutative(points):
    a, b = points
    assert a.inf(b) == b.inf(a)
    assert a.sup(b) == b.sup(a)


@given(points=gen_point_vectors(3, exact_arithmetic=False))
def test_inf_and_sup__are_associative(points):
    a, b, c = points
    assert a.inf(b).inf(c) == a.inf(b.inf(c))
    assert a.sup(b).sup(c) == a.sup(b.sup(c))


@given(points=gen_point_vectors(1, exact_arithmetic=False))
def test_inf_and_sup__are_idempotent(points):
    (a, ) = points
    assert a.inf(a) == a
    assert a.sup(a) == a


@given(points=gen_point_vectors(2, exact_arithmetic=False))
def test_absorption(points):
    a, b = points
    assert a.inf(a.sup(b)) == a
    assert a.sup(a.inf(b)) == a


@given(points=gen_point_vectors(2, exact_arithmetic=False))
def test_is_lower__iff_infimum_is_self(points):
    a, b = points
    assert a.is_lower(b) == (a.inf(b) == a)
    assert a.inf(b).is_lower(a) and a.inf(b).is_lower(b)


@given(points=gen_point_vectors(2, exact_arithmetic=False))
def test_is_upper__iff_supremum_is_self(points):
    a, b = points
    assert a.is_upper(b) == (a.sup(b) == a)
    assert a.sup(b).is_upper(a) and a.sup(b).is_upper(b)


@given(points=gen_point_vectors(2, exact_arithmetic=False))
def test_inf_and_sup__leave_operands_unchanged(points):
    a, b = points
    a_before, b_before = a.copy(), b.copy()
    a.inf(b)
    a.sup(b)
    assert a == a_before and b == b_before


def test_inf_and_sup__are_componentwise():
    V = PointVector[np.int64, 4]
    a, b = V(3, -1, 7, 0), V(2, 5, 7, -4)
    assert a.inf(b) == V(2, -1, 7, -4)
    assert a.sup(b) == V(3, 5, 7, 0)
    assert V(2, -1, 7, -4).is_lower(a)
    assert not a.is_lower(b) and not a.is_upper(b)

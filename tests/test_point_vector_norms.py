"""Tests for norms of points/vectors"""

import math

from expression import Option
from hypothesis import given
import numpy as np
import pytest

from dgkernel.point_vector import NormType, Point, PointVector
from .hypothesis_extra_strategies import ALL_COMPONENT_TYPES, FLOATING_COMPONENT_TYPES, INTEGER_COMPONENT_TYPES, gen_point_vectors

SIGNED_COMPONENT_TYPES = (np.int16, np.int32, np.int64, int) + FLOATING_COMPONENT_TYPES


@pytest.mark.parametrize("component_type", SIGNED_COMPONENT_TYPES)
def test_norms_of_small_example(component_type):
    p = Point[component_type, 3]()
    p[2] = 2
    p[1] = -1
    p[0] = 3
    assert p.norm(NormType.L_1) == 6
    assert p.norm(NormType.L_infty) == 3
    assert p.norm(NormType.L_2) == pytest.approx(math.sqrt(14))
    assert p.norm() == p.norm(NormType.L_2)


@pytest.mark.parametrize("component_type", ALL_COMPONENT_TYPES)
def test_norms__are_floats(component_type):
    p = PointVector[component_type, 2](3, 4)
    for norm_type in NormType:
        assert type(p.norm(norm_type)) is float
    assert p.norm() == 5


@pytest.mark.parametrize(["component_type", "exp_type"], [
    (np.int16, np.uint16),
    (np.int32, np.uint32),
    (np.int64, np.uint64),
    (np.uint32, np.uint32),
    (int, int),
    (np.float64, np.float64),
    ])
def test_exact_norms__are_of_unsigned_component_type(component_type, exp_type):
    V = PointVector[component_type, 3]
    p = V(3, 0, 2) if component_type is np.uint32 else V(3, -1, 2)
    assert V.UNSIGNED_COMPONENT_TYPE is exp_type
    assert type(p.norm1()) is exp_type
    assert type(p.norm_infinity()) is exp_type
    assert p.norm_infinity() == 3


@pytest.mark.parametrize("component_type", [np.int16, np.int32, np.int64])
def test_exact_norms__handle_most_negative_value(component_type):
    info = np.iinfo(component_type)
    p = PointVector[component_type, 2](info.min, 0)
    assert p.norm_infinity() == 2 ** (info.bits - 1)
    assert p.norm1() == 2 ** (info.bits - 1)
    assert p.norm(NormType.L_infty) == float(2 ** (info.bits - 1))


@pytest.mark.parametrize(["component_type", "values", "expected"], [
    (np.int16, (-32768, -32768, -32768), 98304.0),
    (np.int16, (30000, -30000, 30000), 90000.0),
    (np.int64, (2 ** 62, 2 ** 62, 2 ** 62, 2 ** 62), float(2 ** 64)),
    (np.uint8, (200, 200), 400.0),
    ])
def test_one_norm__does_not_wrap_when_sum_exceeds_component_range(component_type, values, expected):
    p = PointVector[component_type, len(values)](*values)
    assert p.norm(NormType.L_1) == expected
    assert p.norm(NormType.L_infty) == float(max(abs(v) for v in values))


@given(points=gen_point_vectors(1, component_types=INTEGER_COMPONENT_TYPES))
def test_infinity_norm__is_greatest_magnitude(points):
    (p, ) = points
    assert int(p.norm_infinity()) == max(abs(int(c)) for c in p)


@given(points=gen_point_vectors(1, component_types=[int]))
def test_one_norm__is_sum_of_magnitudes_when_unbounded(points):
    (p, ) = points
    assert p.norm1() == sum(abs(c) for c in p)
    assert p.norm_infinity() <= p.norm1()


@given(points=gen_point_vectors(1, component_types=[np.float64, float]))
def test_euclidean_norm__matches_hypot(points):
    (p, ) = points
    assert p.norm() == pytest.approx(math.hypot(*(float(c) for c in p)))


@pytest.mark.parametrize(["name", "expected"], [
    ("L_2", Option.Some(NormType.L_2)),
    ("L_1", Option.Some(NormType.L_1)),
    ("L_infty", Option.Some(NormType.L_infty)),
    ("l_2", Option.Nothing()),
    ("", Option.Nothing()),
    ])
def test_norm_type__parses_from_exact_name(name, expected):
    assert NormType.parse_exact(name) == expected


@pytest.mark.parametrize("norm_type", ["L_2", 2, None])
def test_norm__rejects_non_norm_type(norm_type):
    with pytest.raises(TypeError):
        PointVector[np.float64, 2](1, 1).norm(norm_type)

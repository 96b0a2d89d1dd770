"""
Traits of the scalar types which may serve as point/vector components.

Each supported scalar type has exactly one specialization here, fixed when the module is imported,
describing boundedness, signedness, limits, identities and signed/unsigned counterparts. Any other
type gets a generic fallback which declares those properties unknown, so that callers can tell
a specialized type from an unspecialized one rather than silently assuming defaults.
"""

from enum import Enum
import numbers
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import attrs
from expression import Option
from numpydoc_decorator import doc
import numpy as np

from dgkernel.numeric_types import BOUNDED_SIGNED_INTEGER_TYPES, BOUNDED_UNSIGNED_INTEGER_TYPES, FLOATING_TYPES

__all__ = [
    "SCALAR_TYPES_BY_NAME",
    "BoundEnum",
    "ParamType",
    "ScalarTraits",
    "SignEnum",
    "find_specialization",
    "scalar_traits",
    "specialized_scalar_types",
    ]


class BoundEnum(Enum):
    BOUNDED = 0
    UNBOUNDED = 1
    BOUND_UNKNOWN = 2


class SignEnum(Enum):
    SIGNED = 0
    UNSIGNED = 1
    SIGN_UNKNOWN = 2


class ParamType(Enum):
    """The recommended way to hand a value of a scalar type to a function"""
    BY_VALUE = "value"
    BY_REFERENCE = "reference"


_is_type = attrs.validators.instance_of(type)


@attrs.define(frozen=True, kw_only=True)
class ScalarTraits:
    """
    Bundle of facts about a single scalar type.

    For an unbounded (or unknown) type, min() and max() don't give bounds but rather the
    sentinels one and zero, respectively, which signal that bounds don't apply.
    """

    scalar_type = attrs.field(validator=_is_type) # type: type
    is_bounded = attrs.field(validator=attrs.validators.instance_of(BoundEnum)) # type: BoundEnum
    is_unsigned = attrs.field(validator=attrs.validators.instance_of(SignEnum)) # type: SignEnum
    is_specialized = attrs.field(validator=attrs.validators.instance_of(bool)) # type: bool
    signed_version = attrs.field(validator=_is_type) # type: type
    unsigned_version = attrs.field(validator=_is_type) # type: type
    param_type = attrs.field(validator=attrs.validators.instance_of(ParamType)) # type: ParamType
    lower_bound = attrs.field(default=None) # type: Any
    upper_bound = attrs.field(default=None) # type: Any
    digit_count = attrs.field(default=0, validator=[attrs.validators.instance_of(int), attrs.validators.ge(0)]) # type: int

    @classmethod
    def unspecialized(cls, scalar_type: type) -> "ScalarTraits":
        """The generic fallback, for a type without a concrete specialization"""
        return cls(
            scalar_type=scalar_type,
            is_bounded=BoundEnum.BOUND_UNKNOWN,
            is_unsigned=SignEnum.SIGN_UNKNOWN,
            is_specialized=False,
            signed_version=scalar_type,
            unsigned_version=scalar_type,
            param_type=ParamType.BY_VALUE if issubclass(scalar_type, numbers.Number) else ParamType.BY_REFERENCE,
        )

    def convert(self, value: Any) -> Any:
        """Coerce the given value to this scalar type."""
        return self.scalar_type(value)

    def zero(self) -> Any:
        return self.scalar_type(0)

    def one(self) -> Any:
        return self.scalar_type(1)

    def min(self) -> Any:
        """The least representable value, or one if the type is not (known to be) bounded"""
        return self.lower_bound if self.is_bounded is BoundEnum.BOUNDED else self.one()

    def max(self) -> Any:
        """The greatest representable value, or zero if the type is not (known to be) bounded"""
        return self.upper_bound if self.is_bounded is BoundEnum.BOUNDED else self.zero()

    def digits(self) -> int:
        return self.digit_count

    @property
    def storage_dtype(self) -> np.dtype:
        """The dtype of a numpy array holding values of this scalar type"""
        if issubclass(self.scalar_type, np.generic):
            return np.dtype(self.scalar_type)
        return np.dtype(object)


def _fixed_width_integer_specialization(scalar_type: type, *, signed_version: type, unsigned_version: type) -> ScalarTraits:
    info = np.iinfo(scalar_type)
    is_unsigned = info.min == 0
    return ScalarTraits(
        scalar_type=scalar_type,
        is_bounded=BoundEnum.BOUNDED,
        is_unsigned=SignEnum.UNSIGNED if is_unsigned else SignEnum.SIGNED,
        is_specialized=True,
        signed_version=signed_version,
        unsigned_version=unsigned_version,
        param_type=ParamType.BY_VALUE,
        lower_bound=scalar_type(info.min),
        upper_bound=scalar_type(info.max),
        # The sign bit isn't a significant digit.
        digit_count=info.bits if is_unsigned else info.bits - 1,
    )


def _floating_specialization(scalar_type: type) -> ScalarTraits:
    info = np.finfo(scalar_type)
    return ScalarTraits(
        scalar_type=scalar_type,
        is_bounded=BoundEnum.BOUNDED,
        is_unsigned=SignEnum.SIGNED,
        is_specialized=True,
        signed_version=scalar_type,
        unsigned_version=scalar_type,
        param_type=ParamType.BY_VALUE,
        lower_bound=scalar_type(info.min),
        upper_bound=scalar_type(info.max),
        # Count the implicit leading bit of the mantissa.
        digit_count=int(info.nmant) + 1,
    )


def _build_specializations() -> Iterable[ScalarTraits]:
    for signed, unsigned in zip(BOUNDED_SIGNED_INTEGER_TYPES, BOUNDED_UNSIGNED_INTEGER_TYPES, strict=True):
        yield _fixed_width_integer_specialization(signed, signed_version=signed, unsigned_version=unsigned)
        yield _fixed_width_integer_specialization(unsigned, signed_version=signed, unsigned_version=unsigned)
    yield ScalarTraits(
        scalar_type=int,
        is_bounded=BoundEnum.UNBOUNDED,
        is_unsigned=SignEnum.SIGNED,
        is_specialized=True,
        signed_version=int,
        unsigned_version=int,
        param_type=ParamType.BY_VALUE,
    )
    for t in FLOATING_TYPES:
        yield _floating_specialization(t)


_SPECIALIZATIONS: Mapping[type, ScalarTraits] = MappingProxyType({traits.scalar_type: traits for traits in _build_specializations()})

SCALAR_TYPES_BY_NAME: Mapping[str, type] = MappingProxyType({t.__name__: t for t in _SPECIALIZATIONS})


def _normalise_scalar_type(scalar_type: Any) -> type:
    if isinstance(scalar_type, np.dtype):
        return scalar_type.type
    if not isinstance(scalar_type, type):
        raise TypeError(f"Scalar type must be a type or numpy dtype, not {type(scalar_type).__name__}")
    return scalar_type


@doc(
    summary="Look up the concrete traits specialization for a scalar type, if there is one",
    parameters=dict(scalar_type="The type (or numpy dtype) for which to find traits"),
    returns="The specialized traits, or the empty option for a type without specialization",
    raises=dict(TypeError="If the argument is neither a type nor a numpy dtype"),
)
def find_specialization(scalar_type: Any) -> Option[ScalarTraits]:
    return Option.of_optional(_SPECIALIZATIONS.get(_normalise_scalar_type(scalar_type)))


@doc(
    summary="Get the traits of a scalar type, falling back to the generic unspecialized traits",
    parameters=dict(scalar_type="The type (or numpy dtype) for which to get traits"),
    returns="The traits bundle for the given scalar type",
    raises=dict(TypeError="If the argument is neither a type nor a numpy dtype"),
)
def scalar_traits(scalar_type: Any) -> ScalarTraits:
    t = _normalise_scalar_type(scalar_type)
    return find_specialization(t).default_with(lambda: ScalarTraits.unspecialized(t))


def specialized_scalar_types() -> list[type]:
    """The scalar types which have a concrete traits specialization, in registry order."""
    return list(_SPECIALIZATIONS.keys())

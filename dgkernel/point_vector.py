"""Fixed-dimension points and vectors, with lexicographic order, lattice operations and norms"""

from enum import Enum
import itertools
import logging
import math
import numbers
import threading
from typing import Any, Callable, ClassVar, Iterable, Iterator, Optional

from expression import Option, Result
import numpy as np

from dgkernel import DimensionalityError
from dgkernel.numeric_types import NumberLike
from dgkernel.scalar_traits import ScalarTraits, scalar_traits
from dgkernel.utilities import catch_as_message

__all__ = ["NormType", "Point", "PointVector", "Vector"]


class NormType(Enum):
    L_2 = "L_2"
    L_1 = "L_1"
    L_infty = "L_infty"

    @classmethod
    def parse_exact(cls, s: str) -> Option["NormType"]:
        return Option.of_optional(next((m for m in cls if m.value == s), None))


# One concrete class per (base, component type, dimension); each is built, along with its zero, exactly once.
_INSTANTIATIONS: dict[tuple[type, type, int], type] = {}
_INSTANTIATION_LOCK = threading.Lock()


def _check_dimension(dimension: Any) -> int:
    if not isinstance(dimension, numbers.Integral) or isinstance(dimension, bool): # Handle the fact that instance check of Boolean against int can be True.
        raise TypeError(f"Dimension is of illegal type: {type(dimension).__name__}")
    if dimension < 1:
        raise DimensionalityError(f"Dimension must be at least 1, not {dimension}")
    return int(dimension)


def _instantiate(base: type["PointVector"], component_type: Any, dimension: Any) -> type["PointVector"]:
    traits = scalar_traits(component_type)
    dimension = _check_dimension(dimension)
    key = (base, traits.scalar_type, dimension)
    with _INSTANTIATION_LOCK:
        try:
            return _INSTANTIATIONS[key]
        except KeyError:
            pass
        if not traits.is_specialized:
            logging.warning("No scalar traits specialization for %s; its bounds and sign are unknown", traits.scalar_type.__name__)
        name = f"{base.__name__}[{traits.scalar_type.__name__}, {dimension}]"
        concrete = type(base)(name, (base,), {
            "__slots__": (),
            "__module__": base.__module__,
            "__qualname__": name,
            "COMPONENT_TYPE": traits.scalar_type,
            "DIMENSION": dimension,
            "TRAITS": traits,
            "UNSIGNED_COMPONENT_TYPE": traits.unsigned_version,
        })
        zero = concrete()
        zero._components.flags.writeable = False
        concrete.zero = zero
        _INSTANTIATIONS[key] = concrete
        logging.debug("Created point/vector type: %s", name)
        return concrete


class PointVector:
    """
    A digital point or vector: a fixed number of components of a single scalar type.

    A concrete type is obtained by parametrising with a component type and a dimension,
    e.g. ``PointVector[np.int32, 3]``; the same parameters always give back the same class.
    Whether an instance is a point or a vector depends only on how it's used; adding two
    points has no geometric meaning but isn't prevented.

    The comparison operators implement lexicographic order, from component 0 to N-1, which
    is total and is what sorting uses. Separately, ``inf``, ``sup``, ``is_lower`` and ``is_upper``
    implement the component-wise lattice (partial) order.

    Indexing isn't bounds-checked by this type; 0 <= i < N is the caller's responsibility.

    Examples
    --------
    >>> V = PointVector[np.float64, 5]
    >>> p, q = V(), V()
    >>> p[1] = 2.0
    >>> q[3] = -5.5
    >>> (p + q).norm(NormType.L_infty)
    5.5
    """

    COMPONENT_TYPE: ClassVar[Optional[type]] = None
    DIMENSION: ClassVar[Optional[int]] = None
    TRAITS: ClassVar[Optional[ScalarTraits]] = None
    UNSIGNED_COMPONENT_TYPE: ClassVar[Optional[type]] = None
    zero: ClassVar["PointVector"]

    __slots__ = ("_components",)

    # Instances are mutable.
    __hash__ = None

    def __class_getitem__(cls, params: tuple[Any, int]) -> type["PointVector"]:
        if cls.DIMENSION is not None:
            raise TypeError(f"{cls.__qualname__} is already parametrised")
        try:
            component_type, dimension = params
        except (TypeError, ValueError):
            raise TypeError(f"{cls.__name__} takes a component type and a dimension, e.g. {cls.__name__}[np.int32, 3]") from None
        return _instantiate(cls, component_type, dimension)

    def __init__(self, *values: NumberLike):
        """
        Create a point/vector from leading component values; components not given are zero.

        Parameters
        ----------
        values : component type
            Values for the first len(values) components, each converted to the component type

        Raises
        ------
        TypeError
            If this type hasn't been parametrised with component type and dimension
        DimensionalityError
            If more values than the dimension are given
        """
        cls = type(self)
        cls._check_parametrised()
        if len(values) > cls.DIMENSION:
            raise DimensionalityError(f"{len(values)} value(s) given for {cls.DIMENSION} component(s) of {cls.__qualname__}")
        components = np.full(cls.DIMENSION, cls.TRAITS.zero(), dtype=cls.TRAITS.storage_dtype)
        if len(values) > 0:
            components[:len(values)] = [cls.TRAITS.convert(v) for v in values]
        self._components = components

    @classmethod
    def from_array(cls, source: Iterable[Any]) -> "PointVector":
        """Build from a contiguous source holding at least as many values as the dimension; only the first N are read."""
        cls._check_parametrised()
        values = list(itertools.islice(source, cls.DIMENSION))
        if len(values) < cls.DIMENSION:
            raise DimensionalityError(f"Source has {len(values)} value(s), but {cls.__qualname__} needs {cls.DIMENSION}")
        return cls(*values)

    @classmethod
    def from_sequence(cls, values: Iterable[Any]) -> "PointVector":
        return cls(*values)

    @classmethod
    def try_from_sequence(cls, values: Iterable[Any]) -> Result["PointVector", str]:
        @catch_as_message((DimensionalityError, TypeError, ValueError, OverflowError), f"Building {cls.__qualname__} from sequence")
        def safe_build(vs: Iterable[Any]) -> "PointVector":
            return cls.from_sequence(vs)

        return safe_build(values)

    @classmethod
    def from_combination(cls, first: "PointVector", second: "PointVector", f: Callable[[Any, Any], Any]) -> "PointVector":
        """Build the instance whose i-th component is f(first[i], second[i])."""
        cls._check_operand(first)
        cls._check_operand(second)
        return cls(*(f(a, b) for a, b in zip(first._components, second._components, strict=True)))

    @classmethod
    def size(cls) -> int:
        cls._check_parametrised()
        return cls.DIMENSION

    @classmethod
    def dimension(cls) -> int:
        return cls.size()

    def at(self, i: int) -> Any:
        return self._components[i]

    def set_at(self, i: int, value: NumberLike) -> None:
        self._components[i] = self.TRAITS.convert(value)

    def __getitem__(self, i: int) -> Any:
        return self.at(i)

    def __setitem__(self, i: int, value: NumberLike) -> None:
        self.set_at(i, value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._components)

    def __len__(self) -> int:
        return self.DIMENSION

    def cast(self, other: "PointVector") -> "PointVector":
        """Overwrite this instance with the components of another of the same dimension, converted to this component type."""
        if not isinstance(other, PointVector) or other.DIMENSION is None:
            raise TypeError(f"Can only cast from a parametrised {PointVector.__name__}, not {type(other).__name__}")
        if other.DIMENSION != self.DIMENSION:
            raise DimensionalityError(f"Cannot cast {type(other).__qualname__} to {type(self).__qualname__}")
        self._components[:] = [self.TRAITS.convert(v) for v in other._components]
        return self

    def copy(self) -> "PointVector":
        return self._wrap(self._components.copy())

    def __copy__(self) -> "PointVector":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "PointVector":
        return self.copy()

    def reset(self) -> None:
        self._components.fill(self.TRAITS.zero())

    def to_tuple(self) -> tuple[Any, ...]:
        return tuple(self._components)

    def to_numpy(self) -> np.ndarray:
        return self._components.copy()

    # Comparison: lexicographic order over the components.

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._lexicographic_key() == other._lexicographic_key()

    def __lt__(self, other: "PointVector") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._lexicographic_key() < other._lexicographic_key()

    def __le__(self, other: "PointVector") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._lexicographic_key() <= other._lexicographic_key()

    def __gt__(self, other: "PointVector") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._lexicographic_key() > other._lexicographic_key()

    def __ge__(self, other: "PointVector") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._lexicographic_key() >= other._lexicographic_key()

    # Arithmetic, with the wrap-around (or not) of the component type

    def __add__(self, other: "PointVector") -> "PointVector":
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._components + other._components)

    def __iadd__(self, other: "PointVector") -> "PointVector":
        if type(other) is not type(self):
            return NotImplemented
        self._components += other._components
        return self

    def __sub__(self, other: "PointVector") -> "PointVector":
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._components - other._components)

    def __isub__(self, other: "PointVector") -> "PointVector":
        if type(other) is not type(self):
            return NotImplemented
        self._components -= other._components
        return self

    def __imul__(self, coeff: NumberLike) -> "PointVector":
        self._components *= self.TRAITS.convert(coeff)
        return self

    # Lattice

    def inf(self, other: "PointVector") -> "PointVector":
        """The infimum (greatest lower bound): component-wise minimum of this instance and the other."""
        self._check_operand(other)
        return self._wrap(np.minimum(self._components, other._components))

    def sup(self, other: "PointVector") -> "PointVector":
        """The supremum (least upper bound): component-wise maximum of this instance and the other."""
        self._check_operand(other)
        return self._wrap(np.maximum(self._components, other._components))

    def is_lower(self, p: "PointVector") -> bool:
        """Whether this instance equals inf(self, p), i.e. no component exceeds the corresponding one of p"""
        self._check_operand(p)
        return bool(np.less_equal(self._components, p._components).all())

    def is_upper(self, p: "PointVector") -> bool:
        """Whether this instance equals sup(self, p), i.e. no component is less than the corresponding one of p"""
        self._check_operand(p)
        return bool(np.greater_equal(self._components, p._components).all())

    # Norms

    def norm(self, norm_type: NormType = NormType.L_2) -> float:
        """
        Compute a norm of this point/vector, as a float.

        Parameters
        ----------
        norm_type : NormType, optional
            Which norm to compute: Euclidean (the default), sum of absolute values, or maximum absolute value

        Returns
        -------
        float
            The value of the requested norm
        """
        match norm_type:
            case NormType.L_2:
                return math.sqrt(float(np.sum(np.square(self._components.astype(np.float64)))))
            case NormType.L_1:
                return float(np.sum(self._magnitudes().astype(np.float64)))
            case NormType.L_infty:
                return float(self.norm_infinity())
            case _:
                raise TypeError(f"Norm type is of illegal type: {type(norm_type).__name__}")

    def norm1(self) -> Any:
        """The sum of the absolute values of the components, exactly, as the unsigned component type"""
        unsigned = scalar_traits(self.UNSIGNED_COMPONENT_TYPE)
        return unsigned.convert(self._magnitudes().sum(dtype=unsigned.storage_dtype))

    def norm_infinity(self) -> Any:
        """The greatest absolute value among the components, exactly, as the unsigned component type"""
        unsigned = scalar_traits(self.UNSIGNED_COMPONENT_TYPE)
        return unsigned.convert(self._magnitudes().max())

    def _magnitudes(self) -> np.ndarray:
        if self.UNSIGNED_COMPONENT_TYPE is self.COMPONENT_TYPE:
            return np.abs(self._components)
        # The most negative value has no positive counterpart of the same width, but negation
        # modulo 2**bits in the unsigned counterpart gives every magnitude exactly.
        magnitudes = self._components.astype(scalar_traits(self.UNSIGNED_COMPONENT_TYPE).storage_dtype)
        np.negative(magnitudes, out=magnitudes, where=self._components < 0)
        return magnitudes

    # Interface

    def self_display(self) -> str:
        return "[PointVector] {" + ", ".join(str(c) for c in self._components) + "}"

    def is_valid(self) -> bool:
        return self._components.shape == (self.DIMENSION,) and self._components.dtype == self.TRAITS.storage_dtype

    def __str__(self) -> str:
        return self.self_display()

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}({', '.join(repr(c) for c in self._components.tolist())})"

    # Hidden services

    def _lexicographic_key(self) -> list[Any]:
        return self._components.tolist()

    @classmethod
    def _wrap(cls, components: np.ndarray) -> "PointVector":
        instance = cls.__new__(cls)
        instance._components = components
        return instance

    @classmethod
    def _check_parametrised(cls) -> None:
        if cls.DIMENSION is None:
            raise TypeError(f"{cls.__name__} must be parametrised with component type and dimension, e.g. {cls.__name__}[np.int32, 3]")

    @classmethod
    def _check_operand(cls, other: Any) -> None:
        if type(other) is not cls:
            raise TypeError(f"Operand must be {cls.__qualname__}, not {type(other).__qualname__}")


# Points and vectors share one representation; these names only document the intended role.
Point = PointVector
Vector = PointVector

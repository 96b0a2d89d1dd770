"""Digital geometry kernel: fixed-dimension points and vectors over numeric scalar types"""

from typing import *

from expression import Result, result

__all__ = [
    "COMPONENT_TYPE_KEY",
    "DEFAULT_NORM_KEY",
    "DIMENSION_KEY",
    "ConfigurationValueError",
    "DgKernelException",
    "DimensionalityError",
    "unsafe_extract_result",
    ]


COMPONENT_TYPE_KEY = "componentType"
DEFAULT_NORM_KEY = "defaultNorm"
DIMENSION_KEY = "dimension"

_E = TypeVar('_E', bound=BaseException)
_R = TypeVar('_R', covariant=True)


def unsafe_extract_result(res: Result[_R, _E]) -> _R:
    match res:
        case result.Result(tag="ok", ok=r):
            return r
        case result.Result(tag="error", error=e):
            raise e
        case unexpected:
            raise TypeError(f"Unexpected result type ({type(unexpected).__name__}), not expression.Result")


class DgKernelException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class DimensionalityError(DgKernelException):
    """Error subtype for when the number of components of an object is unexpected"""
    pass


class ConfigurationValueError(DgKernelException):
    "Exception subtype for when something's wrong with a config file value"
    pass

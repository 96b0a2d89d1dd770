"""Very general-purpose utilities"""

import functools
from typing import Callable, ParamSpec, TypeVar

from expression import Result
from numpydoc_decorator import doc

_A = TypeVar("_A")
_P = ParamSpec("_P")


@doc(
    summary="Build a decorator which turns the given exception types into an error message in a Result",
    parameters=dict(
        exc="Exception type(s) to catch; anything else propagates",
        context="Prefix of each error message, separated from the exception's text by a colon",
    ),
    returns="Decorator which makes a raising function return a Result instead",
)
def catch_as_message(
    exc: type[Exception] | tuple[type[Exception], ...],
    context: str,
) -> Callable[[Callable[_P, _A]], Callable[_P, Result[_A, str]]]:
    def decorate(fun: Callable[_P, _A]) -> Callable[_P, Result[_A, str]]:
        @functools.wraps(fun)
        def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> Result[_A, str]:
            try:
                value = fun(*args, **kwargs)
            except exc as e:
                return Result.Error(f"{context}: {e}")
            return Result.Ok(value)
        return wrapper
    return decorate

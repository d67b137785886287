"""Helpers for writing extension operations on ``AssertingThat``."""

from __future__ import annotations

import functools
import logging
from typing import Callable, Concatenate, ParamSpec, TypeVar

from asserting_that.core import AssertingThat

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger("asserting_that")


def check(condition: object, message: str = "") -> None:
    """Raise ``AssertionError(message)`` unless ``condition`` is truthy.

    Unlike the ``assert`` statement this also runs under ``python -O``.
    """
    if not condition:
        raise AssertionError(message)


def extension(
    fn: Callable[Concatenate[T, P], object],
) -> Callable[Concatenate[AssertingThat[T], P], AssertingThat[T]]:
    """Turn a check on a plain value into a chainable extension operation.

    The decorated function receives ``instance_to_assert`` instead of the
    context; its return value is ignored and the context is always returned.

    >>> @extension
    ... def is_positive(value: int) -> None:
    ...     check(value > 0, f"Expected a positive number but found {value}")
    >>> AssertingThat(5).then(is_positive).instance_to_assert
    5
    """

    @functools.wraps(fn)
    def wrapper(
        context: AssertingThat[T], *args: P.args, **kwargs: P.kwargs
    ) -> AssertingThat[T]:
        fn(context.instance_to_assert, *args, **kwargs)
        logger.debug(f"{getattr(fn, '__qualname__', repr(fn))} passed")
        return context

    return wrapper

"""The assertion context and the factory that starts a chain."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Concatenate, Generic, ParamSpec, TypeVar

T = TypeVar("T")
P = ParamSpec("P")

logger = logging.getLogger("asserting_that")


@dataclass(frozen=True, eq=False)
class AssertingThat(Generic[T]):
    """Wraps an instance so that assertion functions can be chained on it.

    Attributes:
        instance_to_assert: The value under test, stored as given. It is never
            copied, validated or replaced.

    Extension operations are plain functions taking the context as their first
    argument. They check ``instance_to_assert`` and return the context::

        def has_been_shipped(ctx: AssertingThat[Order]) -> AssertingThat[Order]:
            assert ctx.instance_to_assert.status is OrderStatus.SHIPPED
            return ctx

        Asserting.that(order).then(has_been_shipped).then(has_total_amount, 99)
    """

    instance_to_assert: T

    def __eq__(self, other: object) -> bool:
        # Compare with ``==`` directly; tuple comparison would short-circuit on identity.
        if not isinstance(other, AssertingThat):
            return NotImplemented
        return self.instance_to_assert == other.instance_to_assert

    def __hash__(self) -> int:
        return hash(self.instance_to_assert)

    def then(
        self,
        check: Callable[Concatenate[AssertingThat[T], P], AssertingThat[T] | None],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> AssertingThat[T]:
        """Apply ``check`` to this context and return the context to continue with.

        A check returning ``None`` is treated as terminal and the chain carries
        on with ``self``. Exceptions raised by ``check`` are not caught.
        """
        logger.debug(f"Applying {getattr(check, '__qualname__', repr(check))}")
        result = check(self, *args, **kwargs)
        return self if result is None else result


class Asserting:
    """Static entry point for assertion chains: ``Asserting.that(value)``."""

    @staticmethod
    def that(instance_to_assert: T) -> AssertingThat[T]:
        return AssertingThat(instance_to_assert)


that = Asserting.that

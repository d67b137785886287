"""Account and authorization assertions for ``User``.

Written against the plain value with ``@extension``, so each check reads the
user directly and the context is returned for chaining.
"""

from __future__ import annotations

from asserting_that import check, extension
from tests.demo.models import User


@extension
def is_active(user: User) -> None:
    check(user.is_active, "Expected user to be active")


@extension
def is_inactive(user: User) -> None:
    check(not user.is_active, "Expected user to be inactive")


@extension
def has_role(user: User, role_name: str) -> None:
    check(role_name in user.roles, f"Expected role '{role_name}' in {user.roles}")


@extension
def has_verified_email(user: User) -> None:
    check(user.email_verified, "Expected email to be verified")


@extension
def has_unverified_email(user: User) -> None:
    check(not user.email_verified, "Expected email to be unverified")


@extension
def has_logged_in(user: User) -> None:
    check(user.last_login_at is not None, "Expected user to have logged in")


@extension
def has_never_logged_in(user: User) -> None:
    check(user.last_login_at is None, "Expected user to have never logged in")


@extension
def has_at_least_roles(user: User, minimum_count: int) -> None:
    check(
        len(user.roles) >= minimum_count,
        f"Expected at least {minimum_count} roles but found {len(user.roles)}",
    )

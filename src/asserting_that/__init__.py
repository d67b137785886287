"""Fluent, extensible assertions for test code."""

from asserting_that.core import Asserting, AssertingThat, that
from asserting_that.extensions import check, extension

__all__ = ["Asserting", "AssertingThat", "check", "extension", "that"]

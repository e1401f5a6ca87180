"""
Assertion helpers for element accessor tests.

Framework-neutral comparison primitives. Each helper either returns or
raises AssertionFailure; nothing is ever caught here.

Equality over Optional values:
    - None and None are equal
    - None and a value are unequal
    - Two values are compared with ==

Booleans and integers go through the same path, since both compare by value.
"""

from typing import Optional, TypeVar


T = TypeVar("T")


class AssertionFailure(AssertionError):
    """Raised when an expected condition does not hold."""


def _optional_equal(a: Optional[T], b: Optional[T]) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a == b


def assert_true(condition: bool) -> None:
    if condition:
        return
    raise AssertionFailure("Expected condition to be true")


def assert_equals(a: Optional[T], b: Optional[T]) -> None:
    if _optional_equal(a, b):
        return
    raise AssertionFailure(f"Expected {a!r} == {b!r}")


def assert_not_equals(a: Optional[T], b: Optional[T]) -> None:
    if not _optional_equal(a, b):
        return
    raise AssertionFailure(f"Expected {a!r} != {b!r}")


__all__ = ["AssertionFailure", "assert_true", "assert_equals", "assert_not_equals"]

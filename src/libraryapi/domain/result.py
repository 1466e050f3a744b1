"""
Result values returned by the rule components.

A rule component returns ``Ok(value)`` when the operation was accepted and
``Err(error)`` when a business rule rejected it. Callers branch on the
result explicitly:

    result = await service.create(book)
    if isinstance(result, Err):
        ...
    book = result.value

or call ``unwrap()`` to get the value and let the error propagate to the
exception handlers.
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from libraryapi.domain.errors import BusinessRuleViolation

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Accepted operation."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Rejected operation carrying the violated rule."""

    error: BusinessRuleViolation

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Ok[T] | Err

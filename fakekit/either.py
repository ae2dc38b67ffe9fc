"""Pick one of two fakers at random and wrap the result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fakekit.rng import random_bool

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class WrappedVal(Generic[T]):
    """A value produced by an :class:`EitherFaker`."""

    value: T

    def into_inner(self) -> T:
        """Return the wrapped value."""
        return self.value


def _run_faker(faker: Any, rng: Any) -> Any:
    if hasattr(faker, "fake_with_rng"):
        return faker.fake_with_rng(rng)
    if callable(faker):
        return faker(rng)
    raise TypeError(f"{faker!r} is neither a faker nor a callable")


@dataclass(frozen=True)
class EitherFaker(Generic[A, B]):
    """Faker that delegates to ``a`` or ``b`` depending on a random boolean.

    Each of ``a`` and ``b`` is an object with ``fake_with_rng(rng)`` or a
    callable taking the random source.
    """

    a: A
    b: B

    def fake_with_rng(self, rng: Any) -> WrappedVal[Any]:
        """Draw a boolean, then produce a value from ``a`` if true, else ``b``."""
        chosen = self.a if random_bool(rng) else self.b
        return WrappedVal(_run_faker(chosen, rng))


def either(a: A, b: B) -> EitherFaker[A, B]:
    """Build a faker choosing between ``a`` and ``b``."""
    return EitherFaker(a, b)
"""Settle-all fan-out with per-result failure isolation."""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Literal, TypeVar

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """Outcome of one awaitable: either a value or the error it raised."""

    status: Literal["fulfilled", "rejected"]
    value: T | None = None
    error: BaseException | None = None

    @classmethod
    def fulfilled(cls, value: T) -> "Settled[T]":
        return cls(status="fulfilled", value=value)

    @classmethod
    def rejected(cls, error: BaseException) -> "Settled[T]":
        return cls(status="rejected", error=error)

    @property
    def ok(self) -> bool:
        return self.status == "fulfilled"

    def value_or(self, default: T) -> T:
        """Return the value if fulfilled, otherwise ``default``."""
        return self.value if self.ok else default

    def validated(self, adapter: TypeAdapter) -> "Settled":
        """
        Validate a fulfilled value against ``adapter``.

        A value that fails validation becomes a rejection carrying the
        ValidationError. Rejections pass through unchanged.
        """
        if not self.ok:
            return self
        try:
            return Settled.fulfilled(adapter.validate_python(self.value))
        except ValidationError as e:
            return Settled.rejected(e)


async def settle_all(*awaitables: Awaitable[Any]) -> list[Settled]:
    """
    Run awaitables concurrently and wait for every one of them.

    A failure in one does not cancel or short-circuit the others.

    Returns:
        One Settled per awaitable, in input order
    """
    results = await asyncio.gather(*awaitables, return_exceptions=True)
    return [
        Settled.rejected(r) if isinstance(r, BaseException) else Settled.fulfilled(r)
        for r in results
    ]

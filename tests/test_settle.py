"""Unit tests for settle_all fan-out."""

import asyncio

import pytest
from pydantic import TypeAdapter, ValidationError

from profilepage.core.settle import Settled, settle_all


async def _value(v):
    return v


async def _fail(exc):
    raise exc


class TestSettled:
    """Test the tagged result."""

    def test_fulfilled(self):
        s = Settled.fulfilled([1, 2])
        assert s.ok is True
        assert s.value == [1, 2]
        assert s.error is None

    def test_rejected(self):
        err = ValueError("boom")
        s = Settled.rejected(err)
        assert s.ok is False
        assert s.error is err

    def test_value_or_uses_value_when_fulfilled(self):
        assert Settled.fulfilled(False).value_or(True) is False

    def test_value_or_uses_default_when_rejected(self):
        assert Settled.rejected(RuntimeError()).value_or([]) == []

    def test_validated_keeps_valid_value(self):
        s = Settled.fulfilled(["1", 2]).validated(TypeAdapter(list[int]))
        assert s.ok is True
        assert s.value == [1, 2]

    def test_validated_rejects_invalid_value(self):
        s = Settled.fulfilled([{"no": "int"}]).validated(TypeAdapter(list[int]))
        assert s.ok is False
        assert isinstance(s.error, ValidationError)
        assert s.value_or([]) == []

    def test_validated_passes_rejection_through(self):
        original = Settled.rejected(OSError("gone"))
        assert original.validated(TypeAdapter(bool)) is original


class TestSettleAll:
    """Test concurrent settle behavior."""

    @pytest.mark.asyncio
    async def test_preserves_input_order(self):
        results = await settle_all(_value("a"), _value("b"), _value("c"))
        assert [r.value for r in results] == ["a", "b", "c"]

    @pytest.mark.asyncio
    async def test_failure_does_not_short_circuit(self):
        results = await settle_all(_fail(KeyError("x")), _value(2), _value(3))
        assert results[0].ok is False
        assert isinstance(results[0].error, KeyError)
        assert results[1].value == 2
        assert results[2].value == 3

    @pytest.mark.asyncio
    async def test_all_rejected(self):
        results = await settle_all(_fail(ValueError()), _fail(OSError()))
        assert not any(r.ok for r in results)

    @pytest.mark.asyncio
    async def test_runs_concurrently(self):
        """The first awaitable can only finish once the second has started."""
        started = asyncio.Event()

        async def waiter():
            await started.wait()
            return "waited"

        async def starter():
            started.set()
            return "started"

        results = await asyncio.wait_for(settle_all(waiter(), starter()), timeout=1)
        assert [r.value for r in results] == ["waited", "started"]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await settle_all() == []

"""Unit tests for KeyedLock."""

import asyncio

import pytest

from eco.util.locks import KeyedLock


class TestKeyedLock:
    """Tests for per-key serialization."""

    @pytest.mark.asyncio
    async def test_same_key_is_serialized(self):
        """Two holders of one key never overlap."""
        locks = KeyedLock()
        events = []

        async def worker(name: str):
            async with locks.hold("user-1"):
                events.append(f"{name}-start")
                await asyncio.sleep(0.01)
                events.append(f"{name}-end")

        await asyncio.gather(worker("a"), worker("b"))

        assert events == ["a-start", "a-end", "b-start", "b-end"]

    @pytest.mark.asyncio
    async def test_different_keys_run_concurrently(self):
        """Holding one key does not block another."""
        locks = KeyedLock()
        inside = asyncio.Event()

        async def first():
            async with locks.hold("user-1"):
                await asyncio.wait_for(inside.wait(), timeout=1)

        async def second():
            async with locks.hold("user-2"):
                inside.set()

        await asyncio.gather(first(), second())

    @pytest.mark.asyncio
    async def test_idle_locks_are_dropped(self):
        """No lock is kept for a key nobody holds."""
        locks = KeyedLock()

        async with locks.hold("user-1"):
            assert len(locks) == 1

        assert len(locks) == 0

    @pytest.mark.asyncio
    async def test_released_on_error(self):
        """An exception inside the block releases the lock."""
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            async with locks.hold("user-1"):
                raise RuntimeError("boom")

        assert len(locks) == 0
        async with locks.hold("user-1"):
            pass

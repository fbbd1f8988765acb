import asyncio
import time

import pytest

from genco.future_handler import wait


def test_wait_fake_async():
    async def call():
        return 1

    assert wait(call()) == 1


def test_wait_async():
    async def call():
        time.sleep(0.01)
        return 1

    assert wait(call()) == 1


def test_wait_awaits_sleep():
    async def call():
        await asyncio.sleep(0.01)
        return "done"

    assert wait(call()) == "done"


def test_wait_propagates_errors():
    async def call():
        raise KeyError("missing")

    with pytest.raises(KeyError):
        wait(call())
import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from app.services.retry import is_transient_db_error, retry_db_operation, safe_db_operation


def _connection_error():
    return OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))


def test_is_transient_db_error():
    assert is_transient_db_error(_connection_error())
    assert is_transient_db_error(TimeoutError())
    assert is_transient_db_error(RuntimeError("read timed out"))
    assert not is_transient_db_error(IntegrityError("INSERT", {}, Exception("duplicate key")))
    assert not is_transient_db_error(ValueError("bad input"))


@pytest.mark.asyncio
async def test_retry_recovers_after_transient_failures():
    calls = []

    async def op():
        calls.append(1)
        if len(calls) < 3:
            raise _connection_error()
        return "ok"

    assert await retry_db_operation(op, max_retries=3, delay=0) == "ok"
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_retry_gives_up_after_max_retries():
    calls = []

    async def op():
        calls.append(1)
        raise _connection_error()

    with pytest.raises(OperationalError):
        await retry_db_operation(op, max_retries=2, delay=0)
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_retry_raises_other_errors_immediately():
    calls = []

    async def op():
        calls.append(1)
        raise ValueError("bad input")

    with pytest.raises(ValueError):
        await retry_db_operation(op, delay=0)
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_retry_backoff_doubles_delay(monkeypatch):
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    monkeypatch.setattr("app.services.retry.asyncio.sleep", fake_sleep)

    async def op():
        raise TimeoutError()

    with pytest.raises(TimeoutError):
        await retry_db_operation(op, max_retries=3, delay=1.0)
    assert sleeps == [1.0, 2.0]


@pytest.mark.asyncio
async def test_safe_db_operation_returns_fallback():
    async def op():
        raise _connection_error()

    assert await safe_db_operation(op, fallback=[]) == []


@pytest.mark.asyncio
async def test_safe_db_operation_passes_result_through():
    async def op():
        return 42

    assert await safe_db_operation(op, fallback=0) == 42

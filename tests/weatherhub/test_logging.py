"""Tests for api_logging.py: decorators and file logging."""

from __future__ import annotations

import logging

import pytest

from weatherhub.api_logging import LOGGER_NAME, log_provider_call, log_service_call


class _FakeProvider:
    """Minimal class to test logging decorators."""

    name = "fake"

    @log_provider_call
    async def fetch_items(self, lat: float) -> list[dict]:
        return [{"name": "item1"}, {"name": "item2"}]

    @log_provider_call
    async def fetch_failing(self, lat: float) -> list[dict]:
        raise ValueError("test error")

    @log_service_call
    async def compute_stuff(self, data: list) -> dict:
        return {"result": len(data)}

    @log_service_call
    async def compute_failing(self) -> None:
        raise RuntimeError("service error")


@pytest.fixture
def fake_provider():
    return _FakeProvider()


class TestLogProviderCall:
    @pytest.mark.asyncio
    async def test_returns_result(self, fake_provider) -> None:
        result = await fake_provider.fetch_items(48.85)
        assert result == [{"name": "item1"}, {"name": "item2"}]

    @pytest.mark.asyncio
    async def test_logs_call_and_ok(self, fake_provider, _log_to_tmp_path) -> None:
        await fake_provider.fetch_items(48.85)
        content = (_log_to_tmp_path / "api_calls.log").read_text()
        assert "CALL: [fake] _FakeProvider.fetch_items(48.85)" in content
        assert "OK: [fake] _FakeProvider.fetch_items(48.85) -> 2 items" in content

    @pytest.mark.asyncio
    async def test_logs_failure(self, fake_provider, _log_to_tmp_path) -> None:
        with pytest.raises(ValueError, match="test error"):
            await fake_provider.fetch_failing(1.0)
        content = (_log_to_tmp_path / "api_calls.log").read_text()
        assert "FAIL: [fake] _FakeProvider.fetch_failing(1.0)" in content
        assert "ValueError" in content

    def test_preserves_function_name(self, fake_provider) -> None:
        assert fake_provider.fetch_items.__name__ == "fetch_items"


class TestLogServiceCall:
    @pytest.mark.asyncio
    async def test_returns_result(self, fake_provider) -> None:
        assert await fake_provider.compute_stuff([1, 2, 3]) == {"result": 3}

    @pytest.mark.asyncio
    async def test_logs_service_call(self, fake_provider, _log_to_tmp_path) -> None:
        await fake_provider.compute_stuff([1, 2])
        content = (_log_to_tmp_path / "api_calls.log").read_text()
        assert "SERVICE CALL: _FakeProvider.compute_stuff" in content
        assert "SERVICE OK: _FakeProvider.compute_stuff" in content

    @pytest.mark.asyncio
    async def test_logs_service_failure(self, fake_provider, _log_to_tmp_path) -> None:
        with pytest.raises(RuntimeError, match="service error"):
            await fake_provider.compute_failing()
        content = (_log_to_tmp_path / "api_calls.log").read_text()
        assert "SERVICE FAIL: _FakeProvider.compute_failing" in content
        assert "RuntimeError" in content

    @pytest.mark.asyncio
    async def test_creates_log_directory(self, tmp_path) -> None:
        """Log directory is created on first use."""
        import weatherhub.api_logging as mod

        new_dir = tmp_path / "nested" / "logs"
        mod._LOG_DIR = str(new_dir)
        mod._LOG_FILE = str(new_dir / "api_calls.log")
        mod._logger = None
        logging.getLogger(LOGGER_NAME).handlers.clear()

        await _FakeProvider().compute_stuff([])

        assert new_dir.exists()
        assert (new_dir / "api_calls.log").exists()

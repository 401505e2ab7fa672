"""Unit tests for correlation ID management."""

import asyncio
import re

import pytest

from ballot_campaign.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


class TestGenerateCorrelationId:
    """Tests for generate_correlation_id function."""

    def test_generate_returns_uuid4(self) -> None:
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
        )
        assert uuid_pattern.match(generate_correlation_id()) is not None

    def test_generate_returns_unique_ids(self) -> None:
        ids = [generate_correlation_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestCorrelationIdContext:
    """Tests for correlation ID context management."""

    @pytest.mark.asyncio
    async def test_set_and_get(self) -> None:
        set_correlation_id("test-correlation-id-123")

        assert get_correlation_id() == "test-correlation-id-123"

        set_correlation_id("")

    @pytest.mark.asyncio
    async def test_context_isolation_between_tasks(self) -> None:
        results: dict[str, str] = {}

        async def task_with_id(task_name: str, correlation_id: str) -> None:
            set_correlation_id(correlation_id)
            await asyncio.sleep(0.01)
            results[task_name] = get_correlation_id()

        await asyncio.gather(
            task_with_id("task1", "id-for-task-1"),
            task_with_id("task2", "id-for-task-2"),
        )

        assert results == {"task1": "id-for-task-1", "task2": "id-for-task-2"}


class TestCorrelationIdProcessor:
    """Tests for the structlog correlation ID processor."""

    def test_processor_adds_correlation_id_when_set(self) -> None:
        set_correlation_id("processor-test-id")

        result = correlation_id_processor(None, "info", {"event": "test_event"})

        assert result == {"event": "test_event", "correlation_id": "processor-test-id"}
        set_correlation_id("")

    def test_processor_skips_empty_id(self) -> None:
        set_correlation_id("")

        result = correlation_id_processor(None, "info", {"event": "test_event"})

        assert "correlation_id" not in result

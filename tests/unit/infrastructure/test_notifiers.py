"""Tests for the built-in notifiers."""

import io
import json
from datetime import datetime
from pathlib import Path

import httpx
import pytest
from loguru import logger
from rich.console import Console

from motash.domain.entities.failure import Failure
from motash.infrastructure.notifiers.console_notifier import ConsoleNotifier
from motash.infrastructure.notifiers.file_notifier import FileNotifier
from motash.infrastructure.notifiers.log_notifier import LogNotifier
from motash.infrastructure.notifiers.webhook_notifier import WebhookNotifier

FAILURES = [
    Failure(name="Backup", path="\\Jobs\\Backup", last_run=datetime(2024, 3, 1, 7, 5, 9), result=5),
    Failure(name="Sync", path="\\Jobs\\Sync", last_run=datetime(2024, 3, 1, 8, 0, 0), result=1),
]


class TestConsoleNotifier:
    def test_prints_table(self) -> None:
        console = Console(file=io.StringIO(), width=120)
        ConsoleNotifier(console).send(FAILURES)

        output = console.file.getvalue()  # type: ignore[attr-defined]
        assert "2 problems found" in output
        assert "\\Jobs\\Backup" in output
        assert "01-Mar-2024 08:00:00" in output


class TestLogNotifier:
    def test_writes_report_to_log(self) -> None:
        messages: list[str] = []
        sink_id = logger.add(messages.append, level="WARNING", format="{message}")
        try:
            LogNotifier().send(FAILURES)
        finally:
            logger.remove(sink_id)

        assert len(messages) == 1
        assert "2 scheduled task problems" in messages[0]
        assert "\\Jobs\\Backup (5) at: 01-Mar-2024 07:05:09" in messages[0]


class TestFileNotifier:
    def test_appends_report(self, tmp_path: Path) -> None:
        path = tmp_path / "reports" / "motash.txt"
        notifier = FileNotifier(path, "{path}={result}")

        notifier.send(FAILURES)
        notifier.send(FAILURES[:1])

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("# Audit at ")
        assert lines[1:3] == ["\\Jobs\\Backup=5", "\\Jobs\\Sync=1"]
        assert lines[3].startswith("# Audit at ")
        assert lines[4] == "\\Jobs\\Backup=5"


class TestWebhookNotifier:
    def test_posts_payload(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(204)

        notifier = WebhookNotifier(
            "https://hooks.example.com/motash", transport=httpx.MockTransport(handler)
        )
        notifier.send(FAILURES)

        assert len(requests) == 1
        body = json.loads(requests[0].content)
        assert body["application"] == "Motash"
        assert body["count"] == 2
        assert body["failures"][0]["path"] == "\\Jobs\\Backup"
        assert body["failures"][0]["result"] == 5
        assert body["text"].splitlines()[1] == "\\Jobs\\Sync (1) at: 01-Mar-2024 08:00:00"

    def test_retries_server_errors(self) -> None:
        statuses = iter([503, 200])
        calls: list[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            status = next(statuses)
            calls.append(status)
            return httpx.Response(status)

        notifier = WebhookNotifier(
            "https://hooks.example.com/motash",
            transport=httpx.MockTransport(handler),
            retry_wait=0,
        )
        notifier.send(FAILURES)

        assert calls == [503, 200]

    def test_client_error_not_retried(self) -> None:
        calls: list[int] = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(1)
            return httpx.Response(400)

        notifier = WebhookNotifier(
            "https://hooks.example.com/motash",
            transport=httpx.MockTransport(handler),
            retry_wait=0,
        )
        with pytest.raises(httpx.HTTPStatusError):
            notifier.send(FAILURES)

        assert len(calls) == 1

    def test_gives_up_after_max_attempts(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        notifier = WebhookNotifier(
            "https://hooks.example.com/motash",
            transport=httpx.MockTransport(handler),
            max_attempts=2,
            retry_wait=0,
        )
        with pytest.raises(httpx.ConnectError):
            notifier.send(FAILURES)

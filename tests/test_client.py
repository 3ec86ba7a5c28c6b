"""Tests for the API client, the session state holder and the CLI.

The HTTP layer is replaced by ``httpx.MockTransport`` so every request the
client makes can be inspected.
"""

from __future__ import annotations

import json

import httpx
import pytest

from content_api.client import cli
from content_api.client.api_client import ContentAPIClient, ContentAPIError
from content_api.client.session import (
    GENERATED_ERROR,
    GENERATED_FALLBACK,
    SAVE_ERROR_ALERT,
    SAVE_INCOMPLETE_ALERT,
    SAVE_SUCCESS_ALERT,
    SUMMARY_ERROR,
    SUMMARY_FALLBACK,
    ContentSession,
)

SAVED_ROW = {"id": 1, "title": "T", "summary_text": "hi", "created_at": "2024-01-01T00:00:00"}


class FakeBackend:
    """Route table for MockTransport that records every request."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response] | None = None) -> None:
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, text="Not Found")
        return response

    def bodies(self, path: str) -> list[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.path == path]

    def client(self) -> ContentAPIClient:
        return ContentAPIClient("http://api.test", transport=httpx.MockTransport(self))


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend(
        {
            ("POST", "/api/summarize"): httpx.Response(
                200, json={"summary": "short", "original_length": 11, "summary_length": 5}
            ),
            ("POST", "/api/generate"): httpx.Response(200, json={"generated": "more ideas"}),
            ("POST", "/api/save"): httpx.Response(
                200, json={"id": 1, "message": "Content saved successfully"}
            ),
            ("GET", "/api/retrieve"): httpx.Response(200, json={"summaries": [SAVED_ROW]}),
            ("GET", "/api/test"): httpx.Response(
                200, json={"message": "API is working!", "bindings": {"db": "Connected"}}
            ),
        }
    )


class TestContentAPIClient:
    def test_save_sends_camel_case_body(self, backend: FakeBackend) -> None:
        with backend.client() as client:
            result = client.save(title="T", original_text="hello", summary="hi", generated_content="g")

        assert result["id"] == 1
        assert backend.bodies("/api/save") == [
            {"title": "T", "originalText": "hello", "summary": "hi", "generatedContent": "g"}
        ]

    def test_retrieve_returns_list(self, backend: FakeBackend) -> None:
        with backend.client() as client:
            assert client.retrieve() == [SAVED_ROW]

    def test_error_body_becomes_exception_message(self) -> None:
        backend = FakeBackend(
            {("POST", "/api/summarize"): httpx.Response(500, json={"error": "Text is required"})}
        )

        with backend.client() as client, pytest.raises(ContentAPIError, match="Text is required"):
            client.summarize("")

    def test_plain_text_error_uses_status(self, backend: FakeBackend) -> None:
        with backend.client() as client, pytest.raises(ContentAPIError, match="HTTP 404"):
            client._request("GET", "/missing")

    def test_transport_failure_is_wrapped(self) -> None:
        def explode(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        client = ContentAPIClient("http://api.test", transport=httpx.MockTransport(explode))

        with pytest.raises(ContentAPIError, match="failed"):
            client.status()
        client.close()


class TestContentSession:
    def test_mount_loads_saved_list(self, backend: FakeBackend) -> None:
        session = ContentSession(client=backend.client())

        assert session.mount() is True

        assert session.saved == [SAVED_ROW]

    def test_blank_inputs_send_no_request(self, backend: FakeBackend) -> None:
        session = ContentSession(client=backend.client(), text="   ", prompt="")

        session.summarize()
        session.generate()

        assert backend.requests == []
        assert session.summary == ""
        assert session.generated == ""

    def test_summarize_and_generate_fill_state(self, backend: FakeBackend) -> None:
        session = ContentSession(client=backend.client(), text="hello world", prompt="tea")

        session.summarize()
        session.generate()

        assert session.summary == "short"
        assert session.generated == "more ideas"
        assert session.loading is False

    def test_missing_fields_use_fallbacks(self) -> None:
        backend = FakeBackend(
            {
                ("POST", "/api/summarize"): httpx.Response(200, json={}),
                ("POST", "/api/generate"): httpx.Response(200, json={"generated": ""}),
            }
        )
        session = ContentSession(client=backend.client(), text="x", prompt="y")

        session.summarize()
        session.generate()

        assert session.summary == SUMMARY_FALLBACK
        assert session.generated == GENERATED_FALLBACK

    def test_failures_show_error_placeholders(self) -> None:
        backend = FakeBackend()
        session = ContentSession(client=backend.client(), text="x", prompt="y")

        session.summarize()
        session.generate()

        assert session.summary == SUMMARY_ERROR
        assert session.generated == GENERATED_ERROR
        assert session.loading is False

    def test_save_requires_title_text_and_summary(self, backend: FakeBackend) -> None:
        session = ContentSession(client=backend.client(), title="T", text="x")

        assert session.save() is False
        assert session.alert == SAVE_INCOMPLETE_ALERT
        assert backend.requests == []

    def test_successful_save_clears_form_and_refreshes(self, backend: FakeBackend) -> None:
        session = ContentSession(
            client=backend.client(), title="T", text="hello", summary="hi", prompt="p", generated="g"
        )

        assert session.save() is True

        assert session.alert == SAVE_SUCCESS_ALERT
        assert (session.title, session.text, session.summary, session.prompt, session.generated) == (
            "", "", "", "", ""
        )
        assert session.saved == [SAVED_ROW]
        assert [r.url.path for r in backend.requests] == ["/api/save", "/api/retrieve"]

    def test_failed_save_keeps_form(self) -> None:
        backend = FakeBackend({("POST", "/api/save"): httpx.Response(500, json={"error": "boom"})})
        session = ContentSession(client=backend.client(), title="T", text="hello", summary="hi")

        assert session.save() is False

        assert session.alert == SAVE_ERROR_ALERT
        assert session.title == "T"
        assert session.summary == "hi"

    def test_failed_refresh_keeps_previous_list(self) -> None:
        backend = FakeBackend()
        session = ContentSession(client=backend.client(), saved=[SAVED_ROW])

        assert session.refresh_saved() is False

        assert session.saved == [SAVED_ROW]


class TestCli:
    def test_summarize_prints_summary(self, backend: FakeBackend, capsys) -> None:
        code = cli.main(["summarize", "hello world"], client=backend.client())

        assert code == 0
        assert capsys.readouterr().out.strip() == "short"

    def test_summarize_and_save(self, backend: FakeBackend, capsys) -> None:
        code = cli.main(["summarize", "hello world", "--save-as", "Notes"], client=backend.client())

        assert code == 0
        assert SAVE_SUCCESS_ALERT in capsys.readouterr().out
        assert backend.bodies("/api/save")[0]["title"] == "Notes"

    def test_summarize_reads_file(self, backend: FakeBackend, tmp_path) -> None:
        source = tmp_path / "article.txt"
        source.write_text("from a file", encoding="utf-8")

        cli.main(["summarize", "-f", str(source)], client=backend.client())

        assert backend.bodies("/api/summarize") == [{"text": "from a file"}]

    def test_empty_input_exits_with_usage_code(self, backend: FakeBackend) -> None:
        assert cli.main(["generate", "  "], client=backend.client()) == 2
        assert backend.requests == []

    def test_generate_failure_exits_nonzero(self, capsys) -> None:
        code = cli.main(["generate", "tea"], client=FakeBackend().client())

        assert code == 1
        assert GENERATED_ERROR in capsys.readouterr().out

    def test_save_incomplete(self, backend: FakeBackend, capsys) -> None:
        code = cli.main(["save", "--title", "T", "--summary", "s"], client=backend.client())

        assert code == 1
        assert SAVE_INCOMPLETE_ALERT in capsys.readouterr().out

    def test_list(self, backend: FakeBackend, capsys) -> None:
        assert cli.main(["list"], client=backend.client()) == 0

        out = capsys.readouterr().out
        assert "[1] T" in out
        assert "hi" in out

    def test_list_failure_exits_nonzero(self, capsys) -> None:
        assert cli.main(["list"], client=FakeBackend().client()) == 1

        captured = capsys.readouterr()
        assert "Could not load saved content." in captured.err
        assert "No saved content yet." not in captured.out

    def test_status_failure(self, capsys) -> None:
        assert cli.main(["status"], client=FakeBackend().client()) == 1
        assert "API unavailable" in capsys.readouterr().err

    def test_base_url_defaults_to_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("CONTENT_API_URL", "http://elsewhere:9000")

        args = cli.build_parser().parse_args(["list"])

        assert args.base_url == "http://elsewhere:9000"

"""Unit tests for Logfire setup helpers."""

from fastapi import Request

from folio.config import ObservabilitySettings, Settings
from folio.util.observability import _discovery_attributes, should_send_to_logfire


def _request(query: bytes) -> Request:
    return Request({"type": "http", "query_string": query, "headers": []})


class TestShouldSendToLogfire:
    def test_console_only_by_default(self):
        settings = Settings(observability=ObservabilitySettings())

        assert should_send_to_logfire(settings) is False

    def test_token_turns_export_on(self):
        settings = Settings(
            observability=ObservabilitySettings(logfire_token="pylf_token")
        )

        assert should_send_to_logfire(settings) is True

    def test_explicit_flag_wins_over_token(self):
        settings = Settings(
            observability=ObservabilitySettings(
                logfire_token="pylf_token", send_to_logfire=False
            )
        )

        assert should_send_to_logfire(settings) is False


class TestDiscoveryAttributes:
    def test_search_facets_copied_onto_span(self):
        request = _request(b"text=cells&date_range=week&tags=biology&tags=ml")

        result = _discovery_attributes(request, {"http.route": "/posts"})

        assert result == {
            "http.route": "/posts",
            "text": "cells",
            "date_range": "week",
            "tags": ["biology", "ml"],
        }

    def test_plain_request_unchanged(self):
        attributes = {"http.route": "/health"}

        assert _discovery_attributes(_request(b""), attributes) == attributes

"""
Tests for template payload parsing.
"""

from __future__ import annotations

import logging

import pytest

from src.core.services.template_data import extract_components, parse_template_data


class TestParseTemplateData:
    """Normalization of persisted template payloads."""

    def test_none(self) -> None:
        assert parse_template_data(None) is None

    def test_mapping_returned_as_is(self) -> None:
        payload = {"components": []}
        assert parse_template_data(payload) is payload

    def test_json_object_string(self) -> None:
        raw = '{"template_id": "landing", "components": [{"type": "hero"}]}'
        assert parse_template_data(raw) == {
            "template_id": "landing",
            "components": [{"type": "hero"}],
        }

    def test_invalid_json_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.core.services.template_data"):
            assert parse_template_data("{broken") is None
        assert "invalid JSON" in caplog.text

    @pytest.mark.parametrize("raw", ["[]", '"text"', "null", "1"])
    def test_json_non_object(self, raw: str) -> None:
        assert parse_template_data(raw) is None

    @pytest.mark.parametrize("raw", [42, 1.5, ["components"], b"{}"])
    def test_other_types(self, raw: object) -> None:
        assert parse_template_data(raw) is None

    def test_empty_string(self) -> None:
        assert parse_template_data("") is None


class TestExtractComponents:
    def test_list(self) -> None:
        comps = [{"type": "hero"}]
        assert extract_components({"components": comps}) is comps

    @pytest.mark.parametrize(
        "payload",
        [None, {}, {"components": None}, {"components": "hero"}, {"components": {"0": {}}}, []],
    )
    def test_missing_or_malformed(self, payload: object) -> None:
        assert extract_components(payload) == []


class TestDeeplyNestedPayload:
    """Nesting deep enough to exhaust the JSON decoder."""

    def test_returns_none(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="src.core.services.template_data"):
            assert parse_template_data("[" * 100000) is None
        assert "invalid JSON" in caplog.text

    def test_nested_object_returns_none(self) -> None:
        assert parse_template_data('{"a":' * 100000) is None

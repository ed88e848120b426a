"""Tests for OpenAI-compatible provider parsing and catalog building."""

import json
import logging

import pytest

from llm_registry.providers.compatible import (
    build_compatible_catalog,
    parse_compatible_providers,
)
from llm_registry.providers.openai import OpenAICompatibleModelHandle

LOGGER = "llm_registry.providers.compatible"


def _provider(name: str, *models: str, **extra) -> dict:
    return {
        "name": name,
        "baseURL": f"https://{name}.test/v1",
        "models": [{"name": m} for m in models],
        **extra,
    }


class TestParseCompatibleProviders:
    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_absent_payload_is_empty(self, raw):
        assert parse_compatible_providers(raw) == []

    def test_invalid_json_is_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            assert parse_compatible_providers("[{not json") == []
        assert "not valid JSON" in caplog.text

    def test_deeply_nested_payload_is_empty(self, caplog):
        """A payload too deep for the JSON decoder is treated as unparseable."""
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            assert parse_compatible_providers("[" * 200_000) == []
        assert "not valid JSON" in caplog.text

    def test_non_list_payload_is_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            result = parse_compatible_providers(json.dumps(_provider("a", "m")))
        assert result == []
        assert "must be a JSON list" in caplog.text

    def test_valid_entry(self):
        raw = json.dumps(
            [
                {
                    "name": "acme",
                    "baseURL": "https://llm.acme.test/v1",
                    "apiKey": "acme-key",
                    "models": [{"name": "acme-mini", "supportsTools": False}, {"name": "acme-large"}],
                }
            ]
        )
        [config] = parse_compatible_providers(raw)
        assert config.name == "acme"
        assert config.base_url == "https://llm.acme.test/v1"
        assert config.api_key == "acme-key"
        assert [m.name for m in config.models] == ["acme-mini", "acme-large"]
        assert [m.supports_tools for m in config.models] == [False, True]

    def test_malformed_entry_is_isolated(self, caplog):
        """Three valid entries and one without models parse to three providers."""
        broken = {"name": "broken", "baseURL": "https://broken.test/v1"}
        raw = json.dumps(
            [_provider("a", "m1"), broken, _provider("b", "m2"), _provider("c", "m3", "m4")]
        )
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            configs = parse_compatible_providers(raw)
        assert [c.name for c in configs] == ["a", "b", "c"]
        assert "#1" in caplog.text

    @pytest.mark.parametrize(
        "entry",
        [
            {"name": "x", "baseURL": "https://x.test/v1", "models": []},
            {"name": "", "baseURL": "https://x.test/v1", "models": [{"name": "m"}]},
            {"name": "x", "models": [{"name": "m"}]},
            {"name": "x", "baseURL": "  ", "models": [{"name": "m"}]},
            {"name": "x", "baseURL": "https://x.test/v1", "models": [{"name": ""}]},
            {"name": "x", "baseURL": "https://x.test/v1", "models": [{"name": "m"}, {"name": "m"}]},
            "not-an-object",
            None,
        ],
    )
    def test_invalid_entries_are_dropped(self, entry):
        raw = json.dumps([entry, _provider("ok", "m")])
        assert [c.name for c in parse_compatible_providers(raw)] == ["ok"]

    def test_duplicate_provider_name_keeps_first(self, caplog):
        first = _provider("dup", "m1")
        second = {**_provider("dup", "m2"), "baseURL": "https://second.test/v1"}
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            configs = parse_compatible_providers(json.dumps([first, second]))
        assert len(configs) == 1
        assert configs[0].base_url == "https://dup.test/v1"
        assert "duplicate provider name 'dup'" in caplog.text

    def test_blank_api_key_is_treated_as_missing(self):
        [config] = parse_compatible_providers(json.dumps([_provider("a", "m", apiKey="  ")]))
        assert config.api_key is None


class TestBuildCompatibleCatalog:
    def test_empty(self):
        catalog = build_compatible_catalog([])
        assert catalog.providers == {}
        assert catalog.unsupported == frozenset()

    def test_builds_handles_and_unsupported_set(self):
        raw = json.dumps(
            [
                {
                    "name": "acme",
                    "baseURL": "https://llm.acme.test/v1",
                    "models": [{"name": "acme-mini", "supportsTools": False}, {"name": "acme-large"}],
                },
                _provider("local", "llama3"),
            ]
        )
        catalog = build_compatible_catalog(parse_compatible_providers(raw))
        assert list(catalog.providers) == ["acme", "local"]
        mini = catalog.providers["acme"]["acme-mini"]
        assert isinstance(mini, OpenAICompatibleModelHandle)
        assert mini.base_url == "https://llm.acme.test/v1"
        assert mini.api_key is None
        assert mini.key == ("acme", "acme-mini")
        assert catalog.unsupported == frozenset({mini})

    def test_model_names_may_contain_slashes(self):
        raw = json.dumps([_provider("hf", "meta-llama/Llama-3.1-8B")])
        catalog = build_compatible_catalog(parse_compatible_providers(raw))
        assert list(catalog.providers["hf"]) == ["meta-llama/Llama-3.1-8B"]

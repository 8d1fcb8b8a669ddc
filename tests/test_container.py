"""Tests for asset values and containers."""

from __future__ import annotations

import dataclasses
import pickle
import re

import pytest

from assethandler.core import ANY, Asset, AssetContainer, compile_file_regex


def _container(**overrides) -> AssetContainer:
    settings = {
        "container_type": "scripts",
        "base_url": "/js",
        "base_path": "/public/js",
        "print_pattern": "{{URL}}",
        "file_regex": "/\\.js$/",
    }
    settings.update(overrides)
    return AssetContainer(**settings)


class TestAsset:
    def test_name_defaults_to_path(self):
        asset = Asset("js/app.js", container_type="scripts")

        assert asset.name == "js/app.js"
        assert asset.container_type == "scripts"

    def test_is_immutable(self):
        asset = Asset("app.js", "app", "scripts")

        with pytest.raises(dataclasses.FrozenInstanceError):
            asset.name = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "base,expected",
        [
            ("/js", "/js/app.js"),
            ("/js/", "/js/app.js"),
            ("", "app.js"),
            ("https://cdn.example.com", "https://cdn.example.com/app.js"),
        ],
    )
    def test_full_url(self, base, expected):
        assert Asset("app.js").full_url(base) == expected

    def test_full_path_without_base(self):
        assert Asset("app.js").full_path(None) == "app.js"


class TestAnySentinel:
    def test_is_singleton_and_not_a_string(self):
        assert not isinstance(ANY, str)
        assert type(ANY)() is ANY
        assert repr(ANY) == "ANY"

    def test_survives_pickling(self):
        assert pickle.loads(pickle.dumps(ANY)) is ANY


class TestCompileFileRegex:
    def test_delimited_with_flags(self):
        pattern = compile_file_regex("/\\.JS$/i")

        assert pattern.search("app.js")
        assert pattern.flags & re.IGNORECASE

    def test_alternate_delimiter(self):
        assert compile_file_regex("#\\.css$#").search("site.css")

    def test_bare_pattern(self):
        pattern = compile_file_regex("\\.js$")

        assert pattern.search("app.js")
        assert not pattern.search("app.jsx")

    def test_slash_pattern_without_flags_is_compiled_as_written(self):
        pattern = compile_file_regex("/static/.*\\.js")

        assert pattern.search("/static/vendor/app.js")

    def test_invalid_pattern_raises(self):
        with pytest.raises(re.error):
            compile_file_regex("/(unclosed/")

    def test_unicode_and_dollar_modifiers_are_accepted(self):
        pattern = compile_file_regex("/\\.js$/uD")

        assert pattern.pattern == "\\.js$"
        assert pattern.search("app.js")

    def test_unknown_modifier_raises(self):
        with pytest.raises(re.error, match="modifier"):
            compile_file_regex("/\\.js$/q")


class TestAssetContainer:
    def test_add_preserves_order(self):
        container = _container()
        first, second = Asset("b.js", container_type="scripts"), Asset("a.js", container_type="scripts")

        assert container.add(first) is True
        assert container.add(second) is True

        assert container.to_list() == [first, second]
        assert list(container) == [first, second]
        assert len(container) == 2

    def test_add_does_not_enforce_uniqueness(self):
        container = _container()
        container.add(Asset("a.js", "same"))
        container.add(Asset("b.js", "same"))

        assert len(container) == 2

    def test_remove_uses_identity(self):
        container = _container()
        stored = Asset("a.js", "a", "scripts")
        equal_copy = Asset("a.js", "a", "scripts")
        container.add(stored)

        assert container.remove(equal_copy) is False
        assert container.remove(stored) is True
        assert container.remove(stored) is False

    def test_find_returns_first_match(self):
        container = _container()
        first = Asset("a.js", "dup")
        container.add(first)
        container.add(Asset("b.js", "dup"))

        assert container.find(lambda asset: asset.name == "dup") is first
        assert container.find(lambda asset: asset.name == "nope") is None

    def test_to_list_is_a_snapshot(self):
        container = _container()
        snapshot = container.to_list()
        container.add(Asset("a.js"))

        assert snapshot == []

    def test_settings_are_mutable(self):
        container = _container()

        container.base_url = "/static"
        container.base_path = None
        container.versioned = True

        assert container.base_url == "/static"
        assert container.base_path is None
        assert container.versioned is True
        assert container.type == "scripts"

    def test_matches_without_regex(self):
        container = _container(file_regex=None)

        assert container.file_regex is None
        assert container.matches("app.js") is False

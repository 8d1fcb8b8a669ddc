"""Shared fixtures for asset handler tests."""

from __future__ import annotations

import pytest

from assethandler.core import AssetRegistry

SCRIPT_PATTERN = '<script src="{{URL}}"></script>'
STYLE_PATTERN = '<link rel="stylesheet" href="{{URL}}">'


class StubFilesystem:
    """In-memory filesystem with controllable directories and modification times."""

    def __init__(self) -> None:
        self.directories: set[str] = set()
        self.files: dict[str, int] = {}
        self.calls: list[tuple[str, str]] = []

    def is_directory(self, path: str) -> bool:
        self.calls.append(("is_directory", path))
        return path in self.directories

    def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        return path in self.files or path in self.directories

    def modification_time(self, path: str) -> int:
        self.calls.append(("modification_time", path))
        return self.files[path]


@pytest.fixture
def stub_fs() -> StubFilesystem:
    return StubFilesystem()


@pytest.fixture
def container_settings() -> dict[str, dict]:
    return {
        "scripts": {
            "url": "/js",
            "path": "/public/js",
            "print_pattern": SCRIPT_PATTERN,
            "file_regex": "/\\.js$/",
        },
        "styles": {
            "url": "/css",
            "path": "/public/css",
            "print_pattern": STYLE_PATTERN,
            "file_regex": "/\\.css$/i",
        },
    }


@pytest.fixture
def registry(container_settings, stub_fs) -> AssetRegistry:
    return AssetRegistry(container_settings, filesystem=stub_fs)

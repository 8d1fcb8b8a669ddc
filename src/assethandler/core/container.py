"""Typed asset buckets with their rendering configuration."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator

from assethandler.core.asset import Asset

_DELIMITERS = "/#~!@%|+"
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    # str patterns are always Unicode-aware.
    "u": 0,
    # No Python equivalent; "$" still matches before a trailing newline.
    "D": 0,
}


def compile_file_regex(pattern: str) -> re.Pattern[str]:
    """Compile a file pattern, accepting both bare and ``/body/flags`` notation.

    ``/\\.js$/i`` and ``\\.js$`` with ``re.IGNORECASE`` are equivalent. Text after
    the closing delimiter made up of letters is read as modifiers, and an unknown
    modifier raises ``re.error``. Any other pattern is compiled as written.
    """

    if len(pattern) >= 2 and pattern[0] in _DELIMITERS:
        end = pattern.rfind(pattern[0])
        modifiers = pattern[end + 1 :]
        if end > 0 and (not modifiers or modifiers.isalpha()):
            flags = 0
            for modifier in modifiers:
                if modifier not in _FLAG_MAP:
                    raise re.error(f"Unsupported pattern modifier {modifier!r} in {pattern!r}")
                flags |= _FLAG_MAP[modifier]
            return re.compile(pattern[1:end], flags)
    return re.compile(pattern)


class AssetContainer:
    """Ordered collection of assets sharing URL, path and print settings.

    The container does not enforce name uniqueness; that is left to the registry
    that owns it.
    """

    def __init__(
        self,
        container_type: str,
        base_url: str,
        base_path: str | None,
        print_pattern: str,
        file_regex: str | None = None,
        versioned: bool = False,
    ) -> None:
        self._type = container_type
        self._base_url = base_url
        self._base_path = base_path
        self._print_pattern = print_pattern
        self._file_regex = file_regex
        self._matcher: re.Pattern[str] | None = (
            compile_file_regex(file_regex) if file_regex is not None else None
        )
        self._versioned = versioned
        self._assets: list[Asset] = []

    def __repr__(self) -> str:
        return (
            f"AssetContainer(type={self._type!r}, base_url={self._base_url!r}, "
            f"base_path={self._base_path!r}, assets={len(self._assets)})"
        )

    @property
    def type(self) -> str:
        return self._type

    @property
    def base_url(self) -> str:
        return self._base_url

    @base_url.setter
    def base_url(self, url: str) -> None:
        self._base_url = url

    @property
    def base_path(self) -> str | None:
        return self._base_path

    @base_path.setter
    def base_path(self, path: str | None) -> None:
        self._base_path = path

    @property
    def print_pattern(self) -> str:
        return self._print_pattern

    @property
    def file_regex(self) -> str | None:
        return self._file_regex

    @property
    def versioned(self) -> bool:
        return self._versioned

    @versioned.setter
    def versioned(self, state: bool) -> None:
        self._versioned = bool(state)

    def matches(self, file_name: str) -> bool:
        """Return True if this container's file pattern matches ``file_name``."""

        if self._matcher is None:
            return False
        return self._matcher.search(file_name) is not None

    def add(self, asset: Asset) -> bool:
        self._assets.append(asset)
        return True

    def remove(self, asset: Asset) -> bool:
        for index, existing in enumerate(self._assets):
            if existing is asset:
                del self._assets[index]
                return True
        return False

    def find(self, predicate: Callable[[Asset], bool]) -> Asset | None:
        """Return the first asset, in insertion order, accepted by ``predicate``."""

        return next((asset for asset in self._assets if predicate(asset)), None)

    def to_list(self) -> list[Asset]:
        return list(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(list(self._assets))

    def __len__(self) -> int:
        return len(self._assets)

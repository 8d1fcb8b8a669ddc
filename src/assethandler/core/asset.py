"""Asset value type and the wildcard container reference."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Union


class _AnyContainer:
    """Sentinel type for "resolve automatically" / "apply to all containers"."""

    __slots__ = ()
    _instance: _AnyContainer | None = None

    def __new__(cls) -> _AnyContainer:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self) -> str:
        return "ANY"


ANY: Final = _AnyContainer()

ContainerRef = Union[str, _AnyContainer]


def join_location(base: str | None, path: str) -> str:
    """Join a base URL or directory with a relative asset path using a single slash."""

    if not base:
        return path
    if not path:
        return base
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


@dataclass(frozen=True, slots=True)
class Asset:
    """A registered asset.

    ``name`` falls back to ``path`` when left empty. The asset knows which container
    it was added to but holds no reference to it; URLs and filesystem paths are
    composed from the container's settings when the asset is rendered.
    """

    path: str
    name: str = ""
    container_type: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", self.path)

    def full_url(self, base_url: str) -> str:
        """Return the asset URL below ``base_url``."""

        return join_location(base_url, self.path)

    def full_path(self, base_path: str | None) -> str:
        """Return the asset location below ``base_path``."""

        return join_location(base_path, self.path)

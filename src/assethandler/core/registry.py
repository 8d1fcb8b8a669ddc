"""Registry that groups assets into containers and renders them as markup."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from assethandler.core.asset import ANY, Asset, ContainerRef
from assethandler.core.container import AssetContainer
from assethandler.core.errors import (
    AssetNameNotUniqueError,
    AssetNotFoundError,
    ContainerNotDeterminableError,
    ContainerNotExistError,
    ContainerNotUniqueError,
    InvalidAssetPathError,
    InvalidPathError,
    PrintPatternMissingError,
)
from assethandler.core.filesystem import Filesystem, LocalFilesystem

if TYPE_CHECKING:
    from assethandler.config import Config

logger = logging.getLogger(__name__)

PLACEHOLDER_PATH = "{{PATH}}"
PLACEHOLDER_URL = "{{URL}}"
PLACEHOLDER_URI = "{{URI}}"
PLACEHOLDER_NAME = "{{NAME}}"
LINE_TERMINATOR = "\n"


def _setting(settings: Any, key: str, default: Any = None) -> Any:
    """Read a container setting from a mapping or an attribute-style model."""

    if isinstance(settings, Mapping):
        return settings.get(key, default)
    return getattr(settings, key, default)


class AssetRegistry:
    """Owns the asset containers and implements lookup and rendering across them.

    Containers keep their insertion order. That order decides which container
    wins when several file patterns match the same name, and the order in which
    ``print_all`` and ``get_assets`` walk the containers.

    All public operations hold a single re-entrant lock, so one registry may be
    shared between threads.
    """

    def __init__(
        self,
        containers: Mapping[str, Any] | None = None,
        *,
        filesystem: Filesystem | None = None,
    ) -> None:
        self._containers: dict[str, AssetContainer] = {}
        self._filesystem: Filesystem = filesystem or LocalFilesystem()
        self._lock = threading.RLock()

        for container_type, settings in (containers or {}).items():
            self._containers[container_type] = AssetContainer(
                container_type,
                _setting(settings, "url", ""),
                _setting(settings, "path"),
                _setting(settings, "print_pattern", ""),
                _setting(settings, "file_regex"),
                bool(_setting(settings, "versioned", False)),
            )
        logger.debug("Asset registry initialised with containers: %s", list(self._containers))

    @classmethod
    def from_config(cls, config: Config, *, filesystem: Filesystem | None = None) -> AssetRegistry:
        """Build a registry from loaded configuration."""

        return cls(config.containers, filesystem=filesystem)

    @property
    def containers(self) -> tuple[str, ...]:
        """Registered container names in insertion order."""

        with self._lock:
            return tuple(self._containers)

    def has_container(self, name: str) -> bool:
        with self._lock:
            return name in self._containers

    def get_container(self, name: str) -> AssetContainer:
        with self._lock:
            return self._require_container(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_container(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._containers)

    # -- resolution -----------------------------------------------------------------

    def determine_container(self, file_name: str) -> str | None:
        """Return the first container, in registration order, whose pattern matches."""

        with self._lock:
            for container_type, container in self._containers.items():
                if container.file_regex is None:
                    continue
                if container.matches(file_name):
                    return container_type
            return None

    def _require_container(self, name: str) -> AssetContainer:
        try:
            return self._containers[name]
        except KeyError:
            raise ContainerNotExistError(name) from None

    def _resolve_single(self, file_name: str, container: ContainerRef) -> str:
        """Resolve ``container`` to a registered name, failing fast."""

        if container is ANY:
            resolved = self.determine_container(file_name)
            if resolved is None:
                raise ContainerNotDeterminableError(file_name)
            container = resolved
        self._require_container(container)
        return container

    def _expand(self, container: ContainerRef) -> list[str]:
        """Return every container name for ANY, else the validated single name."""

        if container is ANY:
            return list(self._containers)
        self._require_container(container)
        return [container]

    def _find_by_name(self, name: str, containers: Iterable[str]) -> Asset | None:
        for container_type in containers:
            found = self._containers[container_type].find(lambda asset: asset.name == name)
            if found is not None:
                return found
        return None

    def _find_by_path(self, path: str, containers: Iterable[str]) -> Asset | None:
        for container_type in containers:
            found = self._containers[container_type].find(lambda asset: asset.path == path)
            if found is not None:
                return found
        return None

    # -- assets ---------------------------------------------------------------------

    def add(self, asset_path: str, asset_name: str = "", container: ContainerRef = ANY) -> bool:
        """Register an asset.

        Args:
            asset_path: Path relative to the container's base path and URL.
            asset_name: Lookup name; defaults to ``asset_path``.
            container: Target container, or ``ANY`` to pick one by file pattern.

        Raises:
            ContainerNotDeterminableError: ``ANY`` was given and no pattern matched.
            ContainerNotExistError: the container is not registered.
            AssetNameNotUniqueError: the container already has an asset with this name.
        """

        asset_name = asset_name or asset_path
        with self._lock:
            target = self._resolve_single(asset_path, container)
            if self._find_by_name(asset_name, [target]) is not None:
                raise AssetNameNotUniqueError(asset_name, target)

            added = self._containers[target].add(Asset(asset_path, asset_name, target))
            logger.debug("Added asset %s (%s) to container %s", asset_name, asset_path, target)
            return added

    def remove(self, asset: str, container: ContainerRef = ANY) -> bool:
        """Remove an asset by path or name.

        With ``ANY`` the container is picked by matching ``asset`` against the file
        patterns, whether it is a path or a display name. Returns False when the
        container holds no such asset.
        """

        with self._lock:
            target = self._resolve_single(asset, container)
            found = self._find_by_path(asset, [target]) or self._find_by_name(asset, [target])
            if found is None:
                return False

            removed = self._containers[target].remove(found)
            logger.debug("Removed asset %s from container %s", found.name, target)
            return removed

    def get_assets(self, container: ContainerRef = ANY) -> list[Asset]:
        """Return a snapshot of the assets in one container, or in all of them."""

        with self._lock:
            assets: list[Asset] = []
            for container_type in self._expand(container):
                assets.extend(self._containers[container_type].to_list())
            return assets

    # -- rendering ------------------------------------------------------------------

    def print(self, asset_name: str, container: ContainerRef = ANY, custom: str = "") -> str:
        """Render one asset as markup.

        With ``ANY`` the container is picked by file pattern; when no pattern
        matches, every container is searched instead. Within the searched
        containers assets are matched by name first, then by path.

        Args:
            asset_name: Name or path of the asset.
            container: Container to search, or ``ANY``.
            custom: Template to use instead of the container's print pattern.

        Raises:
            AssetNotFoundError: no container in the search set holds the asset.
            InvalidAssetPathError: the container is versioned and the file is missing.
        """

        with self._lock:
            if container is ANY:
                determined = self.determine_container(asset_name)
                search = list(self._containers) if determined is None else [determined]
            else:
                search = [container] if container in self._containers else []

            found = self._find_by_name(asset_name, search) or self._find_by_path(asset_name, search)
            if found is None:
                raise AssetNotFoundError(asset_name, None if container is ANY else container)

            return self._render(found, custom)

    render = print

    def print_all(self, container: ContainerRef = ANY) -> str:
        """Render every asset of one container, or of all containers, in order."""

        with self._lock:
            output: list[str] = []
            for container_type in self._expand(container):
                owner = self._containers[container_type]
                for asset in owner:
                    output.append(self._render(asset, owner.print_pattern))
            return "".join(output)

    render_all = print_all

    def _render(self, asset: Asset, custom: str = "") -> str:
        owner = self._containers.get(asset.container_type)
        if owner is None:
            raise PrintPatternMissingError(asset.container_type)

        pattern = custom or owner.print_pattern
        url = asset.full_url(owner.base_url)
        path = asset.full_path(owner.base_path)

        if owner.versioned:
            url = f"{url}?{self._version_of(asset, path)}"

        return (
            pattern.replace(PLACEHOLDER_PATH, path)
            .replace(PLACEHOLDER_URL, url)
            .replace(PLACEHOLDER_URI, url)
            .replace(PLACEHOLDER_NAME, asset.name)
            + LINE_TERMINATOR
        )

    def _version_of(self, asset: Asset, path: str) -> int:
        if not self._filesystem.exists(path):
            raise InvalidAssetPathError(asset.name, path)
        try:
            return self._filesystem.modification_time(path)
        except OSError as exc:
            raise InvalidAssetPathError(asset.name, path) from exc

    # -- containers -----------------------------------------------------------------

    def add_container(
        self,
        name: str,
        print_pattern: str,
        path: str | None = "/public/assets",
        url: str = "/assets",
        file_regex: str | None = None,
    ) -> bool:
        """Create a new, unversioned container.

        Raises:
            ContainerNotUniqueError: a container with this name already exists.
        """

        with self._lock:
            if name in self._containers:
                raise ContainerNotUniqueError(name)
            self._containers[name] = AssetContainer(name, url, path, print_pattern, file_regex)
            logger.debug("Added container %s (url=%s, path=%s)", name, url, path)
            return True

    def remove_container(self, name: str) -> bool:
        """Drop a container together with all of its assets."""

        with self._lock:
            self._require_container(name)
            del self._containers[name]
            logger.debug("Removed container %s", name)
            return True

    def set_base_url(self, url: str = "/assets", container: ContainerRef = ANY) -> bool:
        with self._lock:
            for container_type in self._expand(container):
                self._containers[container_type].base_url = url
            return True

    def set_base_path(self, path: str | None, container: ContainerRef = ANY) -> bool:
        """Point one container, or all of them, at a new base directory.

        ``path`` must be an existing directory; ``None`` clears the base path
        without touching the filesystem. Nothing is changed when validation fails.

        Raises:
            ContainerNotExistError: the container is not registered.
            InvalidPathError: ``path`` is not an existing directory.
        """

        with self._lock:
            targets = self._expand(container)
            if path is not None and not self._filesystem.is_directory(path):
                raise InvalidPathError(path)

            for container_type in targets:
                self._containers[container_type].base_path = path
            return True

    def set_is_using_versioning(self, state: bool, container: ContainerRef = ANY) -> bool:
        with self._lock:
            for container_type in self._expand(container):
                self._containers[container_type].versioned = state
            return True

    def is_using_versioning(self, container: str) -> bool:
        with self._lock:
            return self._require_container(container).versioned

"""Exceptions raised by the asset registry."""

from __future__ import annotations

CONTAINER_NOT_EXIST = "Container '{container}' does not exist."
CONTAINER_NOT_UNIQUE = "Container '{container}' already exists."
CONTAINER_NOT_DETERMINABLE = "Could not determine a container for '{asset}'."
PRINT_PATTERN_MISSING = "No print pattern available for container '{container}'."
ASSET_NOT_EXIST = "Asset '{asset}' could not be found in any container."
ASSET_NOT_EXIST_IN_CONTAINER = "Asset '{asset}' could not be found in container '{container}'."
ASSET_NOT_CONTAINER_UNIQUE = "An asset named '{asset}' already exists in container '{container}'."
INVALID_ASSET_PATH = "Asset '{asset}' has no file at '{path}'."
INVALID_PATH = "Path '{path}' is not an existing directory."


class AssetHandlerError(Exception):
    """Base class for all asset handler failures."""


class ContainerError(AssetHandlerError):
    """Raised for container lookup and lifecycle failures."""


class ContainerNotExistError(ContainerError):
    """Raised when a referenced container is not registered."""

    def __init__(self, container: str) -> None:
        super().__init__(CONTAINER_NOT_EXIST.format(container=container))
        self.container = container


class ContainerNotUniqueError(ContainerError):
    """Raised when adding a container whose name is already taken."""

    def __init__(self, container: str) -> None:
        super().__init__(CONTAINER_NOT_UNIQUE.format(container=container))
        self.container = container


class ContainerNotDeterminableError(ContainerError):
    """Raised when no container pattern matches a file name."""

    def __init__(self, asset: str) -> None:
        super().__init__(CONTAINER_NOT_DETERMINABLE.format(asset=asset))
        self.asset = asset


class PrintPatternMissingError(ContainerError):
    """Raised when an asset's container vanished before it could be rendered."""

    def __init__(self, container: str) -> None:
        super().__init__(PRINT_PATTERN_MISSING.format(container=container))
        self.container = container


class AssetError(AssetHandlerError):
    """Raised for asset lookup and registration failures."""


class AssetNotFoundError(AssetError):
    """Raised when an asset cannot be located in the searched containers."""

    def __init__(self, asset: str, container: str | None = None) -> None:
        if container is None:
            message = ASSET_NOT_EXIST.format(asset=asset)
        else:
            message = ASSET_NOT_EXIST_IN_CONTAINER.format(asset=asset, container=container)
        super().__init__(message)
        self.asset = asset
        self.container = container


class AssetNameNotUniqueError(AssetError):
    """Raised when a container already holds an asset with the same name."""

    def __init__(self, asset: str, container: str) -> None:
        super().__init__(ASSET_NOT_CONTAINER_UNIQUE.format(asset=asset, container=container))
        self.asset = asset
        self.container = container


class InvalidAssetPathError(AssetError):
    """Raised when a versioned asset has no backing file."""

    def __init__(self, asset: str, path: str) -> None:
        super().__init__(INVALID_ASSET_PATH.format(asset=asset, path=path))
        self.asset = asset
        self.path = path


class InvalidPathError(AssetHandlerError):
    """Raised when a base path is not an existing directory."""

    def __init__(self, path: str) -> None:
        super().__init__(INVALID_PATH.format(path=path))
        self.path = path

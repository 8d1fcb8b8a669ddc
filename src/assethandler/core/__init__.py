"""Core asset registry components."""

from .asset import ANY, Asset, ContainerRef
from .container import AssetContainer, compile_file_regex
from .errors import (
    AssetError,
    AssetHandlerError,
    AssetNameNotUniqueError,
    AssetNotFoundError,
    ContainerError,
    ContainerNotDeterminableError,
    ContainerNotExistError,
    ContainerNotUniqueError,
    InvalidAssetPathError,
    InvalidPathError,
    PrintPatternMissingError,
)
from .filesystem import Filesystem, LocalFilesystem
from .registry import AssetRegistry

__all__ = [
    "ANY",
    "Asset",
    "AssetContainer",
    "AssetError",
    "AssetHandlerError",
    "AssetNameNotUniqueError",
    "AssetNotFoundError",
    "AssetRegistry",
    "ContainerError",
    "ContainerNotDeterminableError",
    "ContainerNotExistError",
    "ContainerNotUniqueError",
    "ContainerRef",
    "Filesystem",
    "InvalidAssetPathError",
    "InvalidPathError",
    "LocalFilesystem",
    "PrintPatternMissingError",
    "compile_file_regex",
]

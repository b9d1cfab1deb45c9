"""Constants shared by the scaffolder and the asset manager."""

from enum import Enum


class AssetKind(str, Enum):
    """Fixed subdirectories of every post asset directory."""

    IMAGES = "images"
    VIDEOS = "videos"
    DATA = "data"


ASSET_KINDS: tuple[AssetKind, ...] = tuple(AssetKind)


class AssetCommand(str, Enum):
    """Commands understood by the asset manager CLI."""

    POSTS = "posts"
    LIST = "list"
    CLEANUP = "cleanup"
    AUDIT = "audit"
    DELETE = "delete"


BYTES_PER_KB = 1024
BYTES_PER_MB = 1024 * 1024
DEFAULT_DESCRIPTION_LENGTH = 160

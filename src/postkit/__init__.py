"""postkit: post scaffolding, asset management and feed helpers for a static blog."""

from postkit.description import extract_description
from postkit.utils.paths import slugify

__version__ = "0.1.0"
__all__ = [
    "extract_description",
    "slugify",
]

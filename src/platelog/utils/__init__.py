"""Utility modules for PlateLog."""

from .data_prep import PostLoadError, load_posts, prepare_export, stamp_export, export_to_json

__all__ = [
    "PostLoadError",
    "load_posts",
    "prepare_export",
    "stamp_export",
    "export_to_json",
]

"""Stylesheet rendering and asset export."""

from .export import ExportResult, export_assets
from .manifest import TokenManifest, create_manifest, write_manifest
from .styles import CSS, render_stylesheet

__all__ = [
    "CSS",
    "render_stylesheet",
    "TokenManifest",
    "create_manifest",
    "write_manifest",
    "ExportResult",
    "export_assets",
]

"""Write the generated stylesheet and token manifest to disk."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel

from ..config import STYLESHEET_MIN_NAME, STYLESHEET_NAME
from ..tokens.scale import DEFAULT_SCALE, TypeScale
from ..tokens.theme import ThemeMode, parse_mode
from .css import minify
from .manifest import create_manifest, write_manifest
from .styles import render_stylesheet


class ExportResult(BaseModel):
    """Result of exporting assets."""

    model_config = {"arbitrary_types_allowed": True}

    output_dir: Path
    stylesheet: Path
    manifest: Path
    total_bytes: int
    warnings: list[str]


def export_assets(
    out_dir: Path,
    mode: ThemeMode | str = ThemeMode.AUTO,
    minified: bool = False,
    scale: TypeScale = DEFAULT_SCALE,
) -> ExportResult:
    """Render the stylesheet and write it with its manifest.

    Args:
        out_dir: Output directory (created if missing)
        mode: Theme mode
        minified: Write ``style.min.css`` instead of ``style.css``
        scale: Type scale parameters

    Returns:
        ExportResult with written paths
    """
    warnings: list[str] = []
    mode = parse_mode(mode)
    out_dir.mkdir(parents=True, exist_ok=True)

    css = render_stylesheet(mode, scale)
    if minified:
        css = minify(css) + "\n"

    name = STYLESHEET_MIN_NAME if minified else STYLESHEET_NAME
    stale = out_dir / (STYLESHEET_NAME if minified else STYLESHEET_MIN_NAME)
    if stale.exists():
        warnings.append(f"{stale.name} from a previous export is still present")

    css_path = out_dir / name
    css_path.write_text(css, encoding="utf-8")
    manifest_path = write_manifest(create_manifest(css, scale), out_dir)

    return ExportResult(
        output_dir=out_dir,
        stylesheet=css_path,
        manifest=manifest_path,
        total_bytes=css_path.stat().st_size + manifest_path.stat().st_size,
        warnings=warnings,
    )

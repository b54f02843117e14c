"""Token manifest model and generation."""

import hashlib
import json
from pathlib import Path

from pydantic import BaseModel

from .. import __version__
from ..config import MANIFEST_NAME, SCHEMA_VERSION
from ..tokens.lookups import FAMILIES, WEIGHTS, Z_INDEX
from ..tokens.scale import DEFAULT_SCALE, TypeScale, scale_table
from ..tokens.theme import DARK, LIGHT

# Steps listed in the manifest's scale table
MANIFEST_STEPS = (-2, 4)


class ScaleEntry(BaseModel):
    """One row of the type scale."""

    step: int
    font_size: float
    font_size_css: str
    line_height: float


class TokenManifest(BaseModel):
    """All design tokens plus a hash of the stylesheet they produced."""

    schema_version: int = SCHEMA_VERSION
    version: str = __version__
    scale: TypeScale
    steps: list[ScaleEntry]
    weights: dict[str, int]
    families: dict[str, str]
    z_index: dict[str, int]
    themes: dict[str, dict[str, str]]
    stylesheet_sha256: str


def compute_sha256(content: bytes | str) -> str:
    """Fingerprint stylesheet text (UTF-8) so tokens.json can be matched to the CSS it shipped with."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    return hashlib.sha256(data).hexdigest()


def create_manifest(css: str, scale: TypeScale = DEFAULT_SCALE) -> TokenManifest:
    """Create a manifest describing the tokens behind ``css``.

    Args:
        css: Stylesheet text the manifest accompanies
        scale: Type scale used to render it

    Returns:
        Populated TokenManifest
    """
    start, stop = MANIFEST_STEPS
    steps = [
        ScaleEntry(
            step=r.step,
            font_size=r.font_size,
            font_size_css=r.font_size_css,
            line_height=r.line_height,
        )
        for r in scale_table(start, stop, scale)
    ]
    return TokenManifest(
        scale=scale,
        steps=steps,
        weights={k.value: v for k, v in WEIGHTS.items()},
        families={k.value: v for k, v in FAMILIES.items()},
        z_index={k.value: v for k, v in Z_INDEX.items()},
        themes={"light": LIGHT.model_dump(), "dark": DARK.model_dump()},
        stylesheet_sha256=compute_sha256(css),
    )


def write_manifest(manifest: TokenManifest, output_dir: Path) -> Path:
    """Write ``tokens.json`` next to the stylesheet.

    Keys are sorted and the file ends with a newline, so the same tokens
    always produce the same bytes.

    Returns:
        Path to the written tokens file
    """
    text = json.dumps(manifest.model_dump(mode="json"), indent=2, sort_keys=True, ensure_ascii=False)
    tokens_path = output_dir / MANIFEST_NAME
    tokens_path.write_text(text + "\n", encoding="utf-8")
    return tokens_path

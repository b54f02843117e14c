"""Small CSS writer used by the stylesheet generator."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_SPACE_RE = re.compile(r"\s+")
_PUNCT_RE = re.compile(r"\s*([{}:;,>])\s*")


def declarations(mapping: Mapping[str, object]) -> list[str]:
    out = []
    for prop, value in mapping.items():
        if not prop or not str(prop).strip():
            raise ValueError("empty CSS property name")
        out.append(f"{prop}: {value};")
    return out


def rule(selector: str, mapping: Mapping[str, object]) -> str:
    if not selector or not selector.strip():
        raise ValueError("empty CSS selector")
    decls = declarations(mapping)
    # Short rules stay on one line.
    if len(decls) <= 2:
        return f"{selector} {{ {' '.join(decls)} }}"
    body = "\n".join(f"  {d}" for d in decls)
    return f"{selector} {{\n{body}\n}}"


def media(query: str, rules: Iterable[str]) -> str:
    if not query or not query.strip():
        raise ValueError("empty media query")
    inner = "\n".join("  " + line if line else line for r in rules for line in r.split("\n"))
    return f"@media {query} {{\n{inner}\n}}"


def comment(text: str) -> str:
    return f"/* {text.replace('*/', '* /')} */"


def stylesheet(blocks: Iterable[str]) -> str:
    return "\n\n".join(b for b in blocks if b) + "\n"


def minify(css: str) -> str:
    """Strip comments and insignificant whitespace."""
    css = _COMMENT_RE.sub("", css)
    css = _SPACE_RE.sub(" ", css)
    css = _PUNCT_RE.sub(r"\1", css)
    css = css.replace(";}", "}")
    return css.strip()

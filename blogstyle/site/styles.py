"""Stylesheet generated from the design tokens."""

from __future__ import annotations

from .. import __version__
from ..config import PAGE_MAX_WIDTH, TRANSITION_DURATION
from ..tokens.lookups import FontFamily, FontWeight, ZIndex, family_of, weight_of, z_index_of
from ..tokens.scale import DEFAULT_SCALE, TypeScale, TypeScaleResult, compute_type_scale, vertical_rhythm
from ..tokens.theme import DARK, ThemeMode, palette_for, parse_mode, theme_variables
from ..tokens.transitions import build_transition
from ..tokens.units import px_to_rem
from .css import comment, media, rule, stylesheet

# Scale step per element.
BODY_STEP = 0
HEADING_STEPS = {"h1": 4, "h2": 3, "h3": 2, "h4": 1}
SMALL_STEP = -1
CAPTION_STEP = -2


def link_underline(visible: bool) -> dict[str, str]:
    """Underline declarations; hidden underlines stay laid out so toggling does not shift text."""
    return {
        "text-decoration-line": "underline",
        "text-decoration-color": "currentColor" if visible else "transparent",
    }


def container(max_width: str = PAGE_MAX_WIDTH) -> dict[str, str]:
    return {
        "max-width": max_width,
        "margin-left": "auto",
        "margin-right": "auto",
        "padding-left": px_to_rem(24).css(),
        "padding-right": px_to_rem(24).css(),
    }


def _root_rule(mode: ThemeMode, body: TypeScaleResult) -> str:
    props: dict[str, object] = dict(theme_variables(palette_for(mode)))
    props.update(
        {
            "--font-sans": family_of(FontFamily.SANS),
            "--font-serif": family_of(FontFamily.SERIF),
            "--font-mono": family_of(FontFamily.MONO),
            "--transition-duration": TRANSITION_DURATION,
            "--page-max": PAGE_MAX_WIDTH,
            "--line-height": body.line_height_css,
        }
    )
    return rule(":root", props)


def _dark_rules() -> list[str]:
    dark = theme_variables(DARK)
    return [
        media("(prefers-color-scheme: dark)", [rule(':root:not([data-theme="light"])', dark)]),
        rule('[data-theme="dark"]', dark),
    ]


def _typography(scale: TypeScale, body: TypeScaleResult) -> list[str]:
    rhythm = vertical_rhythm(body.line_height).css()
    out = [
        rule(
            "body",
            {
                "font-family": "var(--font-serif)",
                "font-weight": weight_of(FontWeight.REGULAR),
                **body.declarations(),
                "background": "var(--bg)",
                "color": "var(--fg)",
                "margin": "0",
                "text-rendering": "optimizeLegibility",
                "-webkit-font-smoothing": "antialiased",
            },
        ),
        rule("main", container()),
        rule("p, ul, ol, blockquote, pre, figure, table", {"margin": f"0 0 {rhythm}"}),
    ]

    for tag, step in HEADING_STEPS.items():
        heading = compute_type_scale(step, scale)
        before = vertical_rhythm(heading.line_height, 1.5).css()
        after = vertical_rhythm(heading.line_height, 0.5).css()
        out.append(
            rule(
                tag,
                {
                    "font-family": "var(--font-sans)",
                    "font-weight": weight_of(FontWeight.BOLD if step >= 3 else FontWeight.SEMIBOLD),
                    **heading.declarations(),
                    "margin": f"{before} 0 {after}",
                },
            )
        )

    small = compute_type_scale(SMALL_STEP, scale)
    caption = compute_type_scale(CAPTION_STEP, scale)
    out.append(rule("small, .small", small.declarations()))
    out.append(rule("figcaption, .caption", {**caption.declarations(), "color": "var(--muted)"}))
    out.append(rule("strong, b", {"font-weight": weight_of(FontWeight.BOLD)}))
    return out


def _links() -> list[str]:
    return [
        rule(
            "a",
            {
                "color": "var(--link)",
                **link_underline(True),
                "text-underline-offset": "0.15em",
                "transition": build_transition(["color", "text-decoration-color"]),
            },
        ),
        rule("a:hover, a:focus-visible", {"color": "var(--accent)"}),
        rule("nav a, .post-list a", link_underline(False)),
        rule("nav a:hover, .post-list a:hover", link_underline(True)),
    ]


def _chrome(scale: TypeScale) -> list[str]:
    small = compute_type_scale(SMALL_STEP, scale)
    return [
        rule(
            "header.site-header",
            {
                "position": "sticky",
                "top": "0",
                "z-index": z_index_of(ZIndex.HEADER),
                "background": "var(--bg)",
                "border-bottom": "1px solid var(--border)",
                "font-family": "var(--font-sans)",
            },
        ),
        rule("header.site-header nav", {**container(), "display": "flex", "gap": "1rem"}),
        rule("nav a", {"color": "var(--muted)", "font-size": small.font_size_css}),
        rule(
            ".post-list",
            {
                "display": "grid",
                "grid-template-columns": "minmax(0, 1fr) auto",
                "gap": f"{vertical_rhythm(small.line_height, 0.5).css()} 1rem",
                "list-style": "none",
                "padding-left": "0",
            },
        ),
        rule(".post-list time", {"color": "var(--muted)", "font-family": "var(--font-mono)"}),
        rule("hr", {"border": "none", "border-top": "1px solid var(--border)", "margin": "2rem 0"}),
        rule(
            "blockquote",
            {"padding": "0 1rem", "border-left": "2px solid var(--border)", "color": "var(--muted)"},
        ),
    ]


def _code(scale: TypeScale) -> list[str]:
    small = compute_type_scale(SMALL_STEP, scale)
    return [
        rule("code, kbd, samp, pre", {"font-family": "var(--font-mono)", "font-size": small.font_size_css}),
        rule("p code, li code", {"background": "var(--code-bg)", "padding": "0.1em 0.25em"}),
        rule(
            "pre",
            {
                "background": "var(--code-bg)",
                "border": "1px solid var(--border)",
                "padding": "0.75rem 1rem",
                "overflow-x": "auto",
                "line-height": small.line_height_css,
            },
        ),
        rule("pre code", {"font-size": "inherit", "background": "none", "padding": "0"}),
    ]


def _comments(scale: TypeScale, body: TypeScaleResult) -> list[str]:
    title = compute_type_scale(HEADING_STEPS["h3"], scale)
    meta = compute_type_scale(SMALL_STEP, scale)
    rhythm = vertical_rhythm(body.line_height)
    field_transition = build_transition(["border-color", "box-shadow"])
    return [
        rule(
            ".comments",
            {
                "margin-top": (rhythm * 2).css(),
                "padding-top": rhythm.css(),
                "border-top": "1px solid var(--border)",
            },
        ),
        rule(".comments-title", {**title.declarations(), "font-family": "var(--font-sans)"}),
        rule(
            ".comment",
            {
                "background": "var(--comment-bg)",
                "border-left": "2px solid var(--border)",
                "padding": "0.75rem 1rem",
                "margin-bottom": rhythm.css(),
            },
        ),
        rule(".comment .comment", {"margin-left": "1.5rem", "margin-bottom": "0"}),
        rule(".comment:target", {"border-left-color": "var(--accent)"}),
        rule(
            ".comment-meta",
            {
                **meta.declarations(),
                "font-family": "var(--font-sans)",
                "color": "var(--muted)",
            },
        ),
        rule(".comment-author", {"font-weight": weight_of(FontWeight.SEMIBOLD), "color": "var(--fg)"}),
        rule(".comment-body > :last-child", {"margin-bottom": "0"}),
        rule(
            ".comment-form input, .comment-form textarea",
            {
                "font": "inherit",
                "width": "100%",
                "color": "var(--fg)",
                "background": "var(--bg)",
                "border": "1px solid var(--border)",
                "padding": "0.5rem",
                "transition": field_transition,
            },
        ),
        rule(
            ".comment-form input:focus, .comment-form textarea:focus",
            {"outline": "none", "border-color": "var(--accent)"},
        ),
        rule(
            ".comment-form button",
            {
                "font-family": "var(--font-sans)",
                "font-weight": weight_of(FontWeight.SEMIBOLD),
                "color": "var(--bg)",
                "background": "var(--fg)",
                "border": "none",
                "padding": "0.5rem 1rem",
                "cursor": "pointer",
                "transition": build_transition(["background-color", "color"]),
            },
        ),
        rule(".comment-form button:hover", {"background": "var(--accent)"}),
    ]


def _media() -> list[str]:
    return [
        media(
            "(prefers-reduced-motion: reduce)",
            [rule("*, *::before, *::after", {"transition": "none !important"})],
        ),
        media(
            "print",
            [
                rule("body", {"background": "#fff", "color": "#000"}),
                rule("header.site-header, .comment-form", {"display": "none"}),
                rule("a", {"color": "#000", **link_underline(True)}),
            ],
        ),
        media(
            "(max-width: 700px)",
            [
                rule(".post-list", {"grid-template-columns": "minmax(0, 1fr)"}),
                rule(".comment .comment", {"margin-left": "0.75rem"}),
            ],
        ),
    ]


def render_stylesheet(mode: ThemeMode | str = ThemeMode.AUTO, scale: TypeScale = DEFAULT_SCALE) -> str:
    """Render the blog stylesheet.

    Args:
        mode: ``light`` or ``dark`` pins the palette; ``auto`` follows the
            reader's color scheme and the ``data-theme`` attribute
        scale: Type scale parameters

    Returns:
        CSS text
    """
    mode = parse_mode(mode)
    body = compute_type_scale(BODY_STEP, scale)

    blocks = [
        comment(f"Generated by blogstyle {__version__}. Do not edit by hand."),
        _root_rule(mode, body),
    ]
    if mode is ThemeMode.AUTO:
        blocks.extend(_dark_rules())
    blocks.append(rule("*, *::before, *::after", {"box-sizing": "border-box"}))
    blocks.extend(_typography(scale, body))
    blocks.extend(_links())
    blocks.extend(_chrome(scale))
    blocks.extend(_code(scale))
    blocks.extend(_comments(scale, body))
    blocks.extend(_media())
    return stylesheet(blocks)


CSS = render_stylesheet()

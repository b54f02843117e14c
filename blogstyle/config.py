"""Configuration constants and paths for blogstyle."""

import os
from pathlib import Path

# Output location for generated assets
# Override via BLOGSTYLE_OUT_DIR environment variable
OUT_DIR = Path(os.getenv("BLOGSTYLE_OUT_DIR", "./assets"))

# Manifest versioning for determinism tracking
SCHEMA_VERSION = 1

# Type scale (author-time constants, not runtime configurable)
BASE_SIZE = 1.0
BASE_UNIT = "rem"
SCALE_RATIO = 1.125

# line-height = slope * (font-size / base unit) + intercept
LINE_HEIGHT_SLOPE = -0.25
LINE_HEIGHT_INTERCEPT = 1.85

# Browser default root font size, used for px <-> rem conversion
ROOT_FONT_PX = 16.0

# Digits kept when printing CSS numbers
CSS_PRECISION = 4

# Transitions
TRANSITION_DURATION = "0.18s"
TRANSITION_DURATION_VAR = "var(--transition-duration)"
TRANSITION_EASING = "ease-in-out"

# Layout
PAGE_MAX_WIDTH = "42rem"

# Output file names
STYLESHEET_NAME = "style.css"
STYLESHEET_MIN_NAME = "style.min.css"
MANIFEST_NAME = "tokens.json"

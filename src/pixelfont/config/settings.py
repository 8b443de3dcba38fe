"""
Font Configuration Settings

All configuration constants for the font subsystem.
Modify these values to change texture layout and loading behaviour.
"""

from pathlib import Path

# ============================================================================
# Project Paths
# ============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
FONTS_DIR = ASSETS_DIR / "fonts"

# ============================================================================
# Font Directory Layout
# ============================================================================

# A font is a directory holding one texture and one metrics file
TEXTURE_FILE = "font.png"
METRICS_FILES = ("metrics.toml", "metrics.json")  # First one found wins

# ============================================================================
# Font Texture Grid
# ============================================================================

# Glyphs are laid out on a fixed grid, NUM_COLS cells per row
NUM_COLS = 32

# Characters below this code point have a cell in the texture grid
BYTE_GLYPH_LIMIT = 256

# Characters below this code point use the direct-indexed lookup table
ASCII_TABLE_SIZE = 128

# ============================================================================
# Texture Loading
# ============================================================================

TEXTURE_FILTER = "nearest"  # "nearest" keeps pixel fonts crisp, "linear" smooths
DEFAULT_TINT = (1.0, 1.0, 1.0, 1.0)  # RGBA multiplier for untinted glyphs

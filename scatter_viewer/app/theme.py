"""Solarized Bright theme constants for the Dash app chrome."""

# Solarized Bright palette
BASE3 = "#FDF6E3"   # background
BASE2 = "#EEE8D5"   # sidebar bg
BASE1 = "#93A1A1"   # borders
BASE00 = "#657B83"  # body text
BASE01 = "#586E75"  # headers / emphasis

RED = "#DC322F"

FONT_STACK = '"JetBrains Mono", "Fira Code", "Cascadia Code", monospace'

SIDEBAR_WIDTH = "260px"
RIGHT_SIDEBAR_WIDTH = "260px"

# Info window offset from its anchor, in pixels
INFO_OFFSET = 10

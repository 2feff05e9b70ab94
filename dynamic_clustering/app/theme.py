"""Solarized Bright colours and sizes for the clustering app."""

BASE3 = "#FDF6E3"   # plot and page background
BASE1 = "#93A1A1"   # muted labels
BASE00 = "#657B83"  # axis and body text
BASE02 = "#073642"  # advisory text

ORANGE = "#CB4B16"  # failure warning

FONT_STACK = '"JetBrains Mono", "Fira Code", "Cascadia Code", monospace'

SIDEBAR_WIDTH = "300px"
PLOT_HEIGHT = "600px"
POINT_SIZE = 10

# Overlay geometry constants. All values are in output-canvas pixels,
# origin top-left.

# Line spacing per spacing class. Ruled and calendar overlays share one table,
# grid cells are tighter.
RULED_SPACING = {
    "narrow": 18,
    "normal": 24,
    "wide": 32,
}

GRID_SPACING = {
    "narrow": 15,
    "normal": 20,
    "wide": 30,
}

SPACING_TABLES = {
    "ruled": RULED_SPACING,
    "calendar": RULED_SPACING,
    "grid": GRID_SPACING,
}

# Ruled paper
MARGIN_LINE_X = 60
MARGIN_LINE_COLOR = "#FF6B6B"
MARGIN_LINE_WIDTH = 2
MARGIN_LINE_ALPHA_FACTOR = 0.8
RULE_WIDTH = 1

# Grid paper: nominal 0.5px strokes rasterize to a single pixel column/row
GRID_LINE_WIDTH = 1

# Calendar planner
CALENDAR = {
    "header_height": 60,
    "columns": 7,   # days
    "rows": 6,      # weeks
    "backdrop_alpha": 0.4,
    "label_baseline_y": 30,
    "label_alpha": 0.8,
    "day_labels": ("S", "M", "T", "W", "T", "F", "S"),
}

# Smart margins. Rectangles are simulated detector output, expressed relative
# to the canvas edges: (x, y, width, height) where negative x/y and
# non-positive width count from the right/bottom edge.
SMART_MARGIN_AREAS = {
    "header": {"x": 50, "y": 100, "width": -100, "height": 200},
    "body": {"x": 50, "y": 320, "width": -100, "height": 150},
    "calendar": {"x": -200, "y": -150, "width": 180, "height": 120},
}
SMART_MARGIN_DASH = (5, 5)
SMART_MARGIN_RULE_SPACING = 20
SMART_MARGIN_RULE_INSET = 10
SMART_MARGIN_RULE_ALPHA_FACTOR = 0.6

# Raster formats accepted by the renderer, keyed by MIME type -> Pillow format
SUPPORTED_MEDIA = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
    "image/gif": "GIF",
    "image/webp": "WEBP",
}

# Formats that cannot carry transparency are flattened onto this color
FLATTEN_BACKGROUND = "#FFFFFF"

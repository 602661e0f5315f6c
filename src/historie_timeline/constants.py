"""
Timeline Constants

Central location for the shared axis scale, zoom limits and per-track
spacing values. Runtime-adjustable copies live in settings/storage.py;
these are the defaults.
"""

# =============================================================================
# Axis
# =============================================================================

PIXELS_PER_YEAR = 2  # Shared by every track so all rows stay aligned

# =============================================================================
# Zoom / Pan
# =============================================================================

DEFAULT_SCALE = 1.0
MIN_SCALE = 0.1  # Very zoomed out
MAX_SCALE = 10.0  # Very zoomed in
ZOOM_FACTOR = 1.2  # Geometric step per zoom_in / zoom_out

# =============================================================================
# Lane spacing
# =============================================================================

ERA_MIN_CLEARANCE_PX = 0  # Eras may touch end-to-start

# Media coverage and podcast series bars are drawn at least this wide
RANGE_MIN_WIDTH_PX = 60
RANGE_MIN_SPACING_PX = 10

# 40 years ~ 80px at 2px/year, matching the marker spacing
IDIOM_SPAN_YEARS = 40

EVENT_MARKER_MIN_SPACING_PX = 80

# =============================================================================
# Regions
# =============================================================================

# Display labels; key order is the display order of region rows
REGION_LABELS = {
    'china': '中国',
    'japan': '日本',
    'europe': 'ヨーロッパ',
    'middle_east': '中東',
    'asia': 'アジア',
    'americas': 'アメリカ',
    'world': '世界史',
    'other': 'その他',
}

REGION_ORDER = list(REGION_LABELS.keys())

MEDIA_TYPES = ('manga', 'novel')
SERIES_TYPES = ('normal', 'short')

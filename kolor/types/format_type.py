# Numeric constants shared by conversions and rendering
HUE_360 = 360.0
HUE_SECTOR = 60.0

# 8-bit channel maximum used by rgba() strings and packed integers
BYTE_MAX = 255

# hex digits per channel in #RRGGBB
DEFAULT_BYTE_WIDTH = 2

DEFAULT_ALPHA = 1.0

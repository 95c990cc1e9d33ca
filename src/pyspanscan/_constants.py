"""Capacity and buffer-size constants for the scanners."""

MAX_ENTRIES = 15
"""Default maximum number of key/value pairs a query-string dictionary holds."""

PROPERTY_SEARCH_BUFFER_SIZE = 40
"""Size of the quoted property-name search pattern, quotes included."""

MAX_PROPERTY_NAME_LENGTH = PROPERTY_SEARCH_BUFFER_SIZE - 2
"""Longest property name ``find_property`` accepts."""

NUL = 0x00
AMPERSAND = 0x26
EQUALS = 0x3D
DOUBLE_QUOTE = 0x22
COLON = 0x3A
COMMA = 0x2C
PERIOD = 0x2E
PERCENT = 0x25
SPACE = 0x20
TAB = 0x09

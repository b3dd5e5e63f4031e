"""Configuration constants for the Pickup Locator."""

# =============================================================================
# String Settings
# =============================================================================

# Default vibrating length in mm (typical guitar scale length)
DEFAULT_STRING_LENGTH = 650.0

# Range offered by the interactive controls (in mm)
STRING_LENGTH_MIN = 500.0
STRING_LENGTH_MAX = 1000.0

# =============================================================================
# Harmonic Weights
# =============================================================================

# Harmonic number of the first weight; weight i belongs to FIRST_HARMONIC + i
FIRST_HARMONIC = 2

# Defaults for harmonics 2-7
DEFAULT_WEIGHTS = (0.15, 1.50, 1.50, 1.50, 0.75, 0.75)

# Range offered by the weight controls
WEIGHT_MIN = 0.0
WEIGHT_MAX = 2.0

# =============================================================================
# Position Search
# =============================================================================

# Samples per string length. Sample i sits at (i / SEARCH_RESOLUTION) * length
SEARCH_RESOLUTION = 1000

# Pickups should be at least this fraction of the string apart
MIN_EXCLUSION_RATIO = 0.1

# Once past the minimum distance, a drop below this fraction of the
# bridge score ends the exclusion walk
PEAK_DROP_RATIO = 0.5

# Neck position (fraction of length) when no second peak exists
NECK_FALLBACK_RATIO = 0.3

# =============================================================================
# Heat Map
# =============================================================================

HEAT_MAP_RESOLUTION = 1000

# Color stops as 0xRRGGBB, from cold (0.0) to hot (1.0)
PALETTES: dict[str, tuple[int, ...]] = {
    "spectrum": (0x000000, 0x0000FF, 0x00FFFF, 0x00FF00, 0xFFFF00, 0xFF0000, 0xFFFFFF),
    "ember": (0x000000, 0x420A68, 0x932667, 0xDD513A, 0xFCA50A, 0xFCFFA4),
    "ocean": (0x0B1026, 0x1D4E89, 0x00B2CA, 0x7DCFB6, 0xFBFBEF),
    "mono": (0x000000, 0xFFFFFF),
}
DEFAULT_PALETTE = "spectrum"

# =============================================================================
# MIDI Configuration
# =============================================================================

# Pattern to match MIDI input port name (case-insensitive substring match)
# Set to None to use every available port
MIDI_PORT_PATTERN = None

# CC numbers for the parameters (KeyLab knobs/faders)
STRING_LENGTH_CC = 74
SEARCH_LIMIT_CC = 71

# One CC per harmonic weight, in harmonic order (2-7)
WEIGHT_CCS = (73, 75, 76, 77, 93, 18)

# Button CC that cycles the heat map palette (fires on value > 0)
PALETTE_CC = 22

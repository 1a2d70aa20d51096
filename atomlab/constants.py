# -----------------------
# Thermal scale
# -----------------------
LEVEL_MIN = 0.0
LEVEL_MAX = 100.0
KELVIN_PER_LEVEL = 20.0       # slider 0-100 -> 0-2000 K
DEFAULT_LEVEL = 25.0          # initial slider position
DEFAULT_TEMPERATURE = 300.0   # Kelvin, used when a temperature is not finite

# fallback phase thresholds (water-like), Kelvin
FREEZING_POINT_K = 273.0
BOILING_POINT_K = 373.0

# -----------------------
# Atom animation
# -----------------------
VIBRATION_PER_KILOKELVIN = 5.0
VIBRATION_BASE = 0.5
ORBIT_SLOWDOWN_SPAN_K = 3000.0
MIN_SPEED_MODIFIER = 0.1
BASE_ORBIT_PERIOD = 5.0       # innermost shell, time units per revolution
ORBIT_PERIOD_STEP = 2.0       # added per shell index
FALLBACK_ORBIT_PERIOD = 5.0
BASE_ORBIT_RADIUS = 15.0
RING_SPACING = 10.0
ELEMENT_VIEW_SCALE = 1.5      # a lone element is drawn larger

JITTER_X_RANGE = (0.2, 0.3)
JITTER_Y_RANGE = (0.25, 0.35)
JITTER_SALT = "atomlab-jitter-v1"

ELECTRON_RADIUS = 3.0
ELECTRON_PULSE_RADIUS = 4.0
ELECTRON_PULSE_PERIOD = 1.5
ELECTRON_PULSE_DELAY = 0.5

NUCLEUS_GLOW_RADIUS = 10.0
NUCLEUS_CORE_RADIUS = 6.0
ORBIT_STROKE_OPACITY = 0.2

# -----------------------
# Choreography
# -----------------------
COMBUSTION_CYCLE = 4.0
IONIC_ARC_DURATION = 2.0
IONIC_REPEAT_DELAY = 1.0
GENERIC_PULSE_PERIOD = 2.0
LABEL_PULSE_PERIOD = 2.0
TRANSFER_LABEL_PERIOD = 3.0

# -----------------------
# Colours
# -----------------------
ELECTRON_COLOR = "#22d3ee"
BOND_COLOR = "#52525b"
DOUBLE_BOND_SPACER_COLOR = "#09090b"
CHOREOGRAPHY_BOND_COLOR = "#555555"
GENERIC_RING_COLOR = "#eab308"
COMBUSTION_LABEL_COLOR = "#ef4444"
FIRE_COLOR = "#ff9900"
SCENE_BG = "#09090b"

SINGLE_BOND_WIDTH = 3.0
DOUBLE_BOND_WIDTH = 6.0
DOUBLE_BOND_SPACER_WIDTH = 2.0

# -----------------------
# Localization
# -----------------------
DEFAULT_LANGUAGE = "EN"

# -----------------------
# Logging
# -----------------------
LOGGING_LEVEL = "INFO"  # options: DEBUG, INFO, WARNING, ERROR

# -----------------------
# Misc
# -----------------------
EPSILON = 1e-12  # small value to prevent div by zero or numerical issues

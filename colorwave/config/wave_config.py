"""
Configuration settings for color wave sampling and rasterization.
"""

# Canvas settings
CANVAS_WIDTH = 720   # Pixels
CANVAS_HEIGHT = 300  # Pixels, split into two bands of equal height
BAND_SPLIT = CANVAS_HEIGHT // 2
COLUMN_WIDTH = 2     # Each angular sample paints this many pixel columns

# Angular sampling: one sample per degree over a full period
SAMPLE_COUNT = 360

# Reset values, keyed the same way as the persisted parameter record
DEFAULT_PARAMETERS = {
    "scale": 0.2,
    "seed": 0.0,
    "channel2_a": 0.5,
    "channel2_b": 0.5,
    "channel2_freq": 1.0,
    "channel3_a": 0.5,
    "channel3_b": 0.35,
    "channel3_freq": 1.0,
}

# Slider bounds for direct user adjustment
# Format: name -> (min, max)
PARAMETER_RANGES = {
    "scale": (0.0, 1.0),
    "seed": (0.0, 10.0),
    "channel2_a": (0.0, 1.0),
    "channel2_b": (0.0, 1.0),
    "channel2_freq": (0.0, 10.0),
    "channel3_a": (0.0, 1.0),
    "channel3_b": (0.0, 1.0),
    "channel3_freq": (0.0, 10.0),
}

# Random sampler settings
NORMAL_APPROX_SAMPLES = 8           # Uniform draws averaged per bell-shaped sample
RANDOM_SCALE_RANGE = (0.0, 1.0)     # Uniform
RANDOM_SEED_RANGE = (0.0, 10.0)     # Uniform
RANDOM_AMPLITUDE_RANGE = (0.0, 1.0) # Approximate normal
RANDOM_FREQ_RANGE = (0.0, 5.0)      # Approximate normal

# Color conversion settings
FALLBACK_COLOR = (0, 0, 0, 255)  # Opaque black for colors that cannot be encoded
OPAQUE_ALPHA = 255

# Shell settings
WINDOW_TITLE = "Procedural Color Generator"
STATE_PATH = "color_wave_state.json"

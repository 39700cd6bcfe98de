# --- Configuration Constants ---
DEFAULT_FPS = 30
DEFAULT_RESOLUTION = (1280, 720)
DEFAULT_DURATION = 30  # seconds
DEFAULT_OUTPUT = "particles.mp4"
BACKGROUND_COLOR = (20, 10, 10)  # BGR, very dark blue

# Generator settings
PARCEL_SIZE = 10  # Particles per spawn
MINIMUM_RADIUS = 1.0
MAX_RADIUS = 8.0
SPAWN_INTERVAL = 1.0  # seconds between parcels
SPAWN_BAND = 0.0  # 0 = spawn on the top edge, > 0 = random y within the band
DEFAULT_COLOR = (0, 0, 255)  # BGR red, used when the palette is empty

# Twinkle (opacity) animation
MIN_OPACITY = 0.15
MAX_OPACITY = 0.75
MIN_TWINKLE_DURATION = 0.3
TWINKLE_DURATION_RANGE = 50  # random int in [0, 50) // 10
TWINKLE_DELAY_RANGE = (1, 5)  # delay = 1 / (k * 0.5)

# Exit (translation) animation
TRANSLATION_DURATION_BASE = 60  # (random int in [0, 200) + 60) / 10
TRANSLATION_DURATION_RANGE = 200
TRANSLATION_OFFSET_RANGE = 10  # extra start offset, in tenths of the layer height
EXIT_TIMING = "linear"  # named timing function for the upward drift

# Animation keys
PARTICLE_ANIMATION_KEY = "particle.animations"
TRANSLATION_ANIMATION_KEY = "particle.translation"

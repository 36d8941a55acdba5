# --- Constants ---
WIDTH, HEIGHT = 800, 600
FPS = 60
DT = 1.0 / FPS

# --- Colors ---
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
LIGHT_GRAY = (211, 211, 211)

# --- Layout ---
CONTENT_MARGIN = 5
TRACK_SIZE_FACTOR = 0.5  # track width relative to the content width
TRACK_HEIGHT = 300
SQUARE_SIZE = 50
PANEL_TOP = TRACK_HEIGHT + 3 * CONTENT_MARGIN
PANEL_LINE_HEIGHT = 28

# --- Controls ---
PARAMETER_FORMAT = "%05.2f"
KEY_STEP = 0.05  # fraction of a slider's range per key press

from __future__ import annotations

# --- Grid ---
GRID_WIDTH, GRID_HEIGHT = 11, 11
SQUARE_SIZE = 48
WIDTH, HEIGHT = SQUARE_SIZE * GRID_WIDTH, SQUARE_SIZE * GRID_HEIGHT

# --- Timing ---
FRAME_STEP_MS = 100  # one snake step per 100ms
FPS = 60  # render rate; movement is gated by FRAME_STEP_MS

# --- Colours ---
SNAKE_COLOUR = "#08a3ef"
FOOD_COLOUR = "#efa8b1"
BACKGROUND_ODD = "#f8f8f8"
BACKGROUND_EVEN = "#fefefe"

# --- Initial state ---
INITIAL_SNAKE = ((3, 3), (4, 3), (5, 3), (6, 3))
INITIAL_FOOD = (0, 0)

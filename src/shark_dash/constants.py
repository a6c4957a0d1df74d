"""
constants.py: Centralized configuration for game, timer and leaderboard settings.
"""

import math

# -------- Playfield Config --------
PLAYFIELD_WIDTH = 800
PLAYFIELD_HEIGHT = 600
WATER_HEIGHT = 120              # 20% of the playfield; the floor the boat rides on
PLAYER_X = 0                    # Fixed boat X position, the world scrolls past it

# -------- Time Config --------
FRAME_RATE = 60
FRAME_INTERVAL_MS = 1000.0 / FRAME_RATE
COUNTDOWN_INTERVAL_MS = 1000.0
MAX_FRAMES_PER_ADVANCE = 5      # Catch-up limit after a stall
GAME_DURATION_S = 180           # 3 minutes

# -------- Physics Config (units / tick) --------
GRAVITY = 0.6
JUMP_IMPULSE = 15.0

# -------- Hit Boxes (bottom-left anchored) --------
PLAYER_WIDTH = 80               # Sprite footprint
PLAYER_HEIGHT = 40
PLAYER_HITBOX_WIDTH = 60
PLAYER_HITBOX_HEIGHT = 30
PLAYER_HITBOX_OFFSET_X = 10
PLAYER_HITBOX_OFFSET_Y = 5

SHARK_WIDTH = 40
SHARK_HEIGHT = 35
BIRD_WIDTH = 25
BIRD_HEIGHT = 20

# -------- Obstacle Config --------
SPAWN_INTERVAL_MIN_MS = 1000.0
SPAWN_INTERVAL_MAX_MS = 5000.0
SHARK_PROBABILITY = 0.7
SPAWN_X = PLAYFIELD_WIDTH + 50  # Just off the right edge
DESPAWN_X = -100                # Fully off the left edge

SHARK_DEPTH = WATER_HEIGHT - 25
SHARK_SPEED = 3.0
SWIM_PHASE_STEP = 0.1
SWIM_AMPLITUDE = 8.0
TWO_PI = 2 * math.pi

BIRD_ALTITUDE = WATER_HEIGHT + 100  # Above the jump apex
BIRD_SPEED = 2.0
BIRD_FALL_SPEED = 5.0

# -------- Leaderboard Config --------
MAX_PLAYER_NAME_LENGTH = 20
LEADERBOARD_LIMIT = 10
DB_FILE = "shark_dash.db"
SCORES_TABLE = "scores"

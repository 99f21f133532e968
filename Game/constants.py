# =============================================================================
# constants.py
# =============================================================================
# ALL game configuration lives here. Never hardcode values in game.py.
# Change things here and they update everywhere automatically.
#
# COORDINATES:
#   The world is y-UP: (0, 0) is the bottom-left corner of the base
#   resolution, (BASE_W, BASE_H) the top-right. Only the render sink flips
#   to pygame's y-down screen space (see Game._to_screen).
#
#   The world is tiny (144 × 200 units) and drawn 4× bigger with
#   nearest-neighbour scaling, so pixel-art sprites stay crisp.
# =============================================================================

import os

import pygame


# ── Display ───────────────────────────────────────────────────────────────────

BASE_W       = 144          # world width  in units (= sprite pixels)
BASE_H       = 200          # world height in units
SCREEN_SCALE = 4            # window pixels per world unit → 576 × 800 window
FPS          = 60           # target frame rate (vsync-ish)
WINDOW_TITLE = "Flappy Bird!"

# Longest tick we simulate. A window drag or breakpoint can stall the clock
# for seconds; one huge dt would teleport the bird through the clamp.
MAX_DT       = 1.0 / 30.0   # s


# ── Colours  (R, G, B) ────────────────────────────────────────────────────────

BG_COLOR     = (78,  192, 202)   # sky blue, used when the background is missing
PLAYER_COLOR = (250, 215, 60)    # yellow bird, used when the sprite is missing
HUD_COLOR    = (255, 255, 255)
SHADOW_COLOR = (40,  40,  60)


# ── Player ────────────────────────────────────────────────────────────────────

PLAYER_W     = 17           # sprite width  in world units
PLAYER_H     = 12           # sprite height in world units

# Margin the bird may travel past the top/bottom edge before it is stopped.
# Equal to the full sprite height, so the bird can hide just off screen.
PLAYER_HALF_HEIGHT = PLAYER_H

# Spawn point as a fraction of the world: one third across, half way up.
SPAWN_UV     = (1.0 / 3.0, 0.5)   # → (48, 100)


# ── Physics ───────────────────────────────────────────────────────────────────

# Downward acceleration in units/s² (negative because the world is y-up).
# At GRAVITY=-650 and JUMP_VELOCITY=150:
#   Time to peak   = 150 / 650 ≈ 0.23 s  (≈ 14 frames)
#   Peak height    = 150² / (2 × 650) ≈ 17 units ≈ 1.4 bird heights
GRAVITY       = -650.0      # units/s²

# Upward velocity set (not added) on every flap.
JUMP_VELOCITY = 150.0       # units/s

# Vertical interval the bird is clamped to.
LOWER_BOUND   = -PLAYER_HALF_HEIGHT            # -12
UPPER_BOUND   = BASE_H + PLAYER_HALF_HEIGHT    # 212

# Touching the floor ends the run (GAME → GAME_OVER).
FLOOR_KILLS   = True


# ── Input ─────────────────────────────────────────────────────────────────────

# pygame mouse button numbers: 1 = left, 2 = middle, 3 = right.
FLAP_BUTTONS  = (1, 3)

DEBUG_KEY     = pygame.K_SPACE
QUIT_KEYS     = (pygame.K_q, pygame.K_ESCAPE)


# ── Assets ────────────────────────────────────────────────────────────────────

# Asset paths below are relative to this directory.
ASSET_DIR         = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")

BIRD_SPRITE       = "sprites/bird-0.png"
BACKGROUND_SPRITE = "sprites/city-background.png"
SFX_WING          = "audio/sfx_wing.ogg"


# ── Audio ─────────────────────────────────────────────────────────────────────

GLOBAL_VOLUME = 0.2         # 0.0 – 1.0, applied to every sound effect

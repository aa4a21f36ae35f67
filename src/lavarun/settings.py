# settings.py
# Central place for constants so the game feel can be tweaked safely.
# Units are grid cells and seconds unless stated otherwise.

# Window / render
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
FPS = 60
TITLE = "Lava Run"

# Pixels per grid cell when drawing
SCALE = 30

# Simulation stepping
MAX_STEP = 0.05           # longest single tick; longer frames are split
MAX_FRAME = 1 / 20        # clamp if debugging causes huge dt
FINISH_DELAY = 1.0        # seconds the level keeps animating after win/lose

# Player physics (driven by the controller, not by the core)
PLAYER_X_SPEED = 7.0      # cells per second
GRAVITY = 30.0            # cells per second^2
JUMP_SPEED = 17.0         # cells per second

# Fireballs
HORIZONTAL_FIREBALL_SPEED = 2.0
VERTICAL_FIREBALL_SPEED = 2.0
FIRE_RAIN_SPEED = 3.0

# Coin bob
COIN_SPRING_SPEED = 8.0
COIN_SPRING_DIST = 0.07

# Colours by terrain / actor type
COLORS = {
    "background": (52, 166, 251),
    "wall": (255, 255, 255),
    "lava": (255, 100, 100),
    "player": (64, 64, 64),
    "player_lost": (160, 64, 64),
    "coin": (241, 229, 89),
    "fireball": (255, 100, 100),
    "actor": (200, 200, 200),
    "text": (240, 240, 240),
}

# --- Display ---
WIDTH = 900
HEIGHT = 400
FPS = 60
MAX_DT = 1.0 / 30.0         # clamp frame stalls (sec)

# --- Ground ---
GROUND_Y = 320              # y line of the running surface
GROUND_STRIPE_W = 10

# --- Player ---
PLAYER_X = 120              # player's fixed x (world scrolls left)
PLAYER_W = 40
PLAYER_STAND_H = 70
PLAYER_DUCK_H = 40
GRAVITY = 1400.0            # px/s^2
JUMP_VY = -700.0            # px/s, upward
MAX_JUMPS = 2               # double jump
GROUNDED_EPS = 1.0          # feet within this many px of the ground = grounded

# --- World speed ---
BASE_SPEED = 280.0          # px/s
MAX_SPEED = 1400.0
SPEED_GROWTH = 10.0         # px/s per second, always while running
FOLLOW_SPEED_GROWTH = 60.0  # extra ramp while the chaser follows

# --- Obstacles ---
SPAWN_X = WIDTH + 20
NORMAL_SPAWN_INTERVAL_S = 1.0
NORMAL_MIN_GAP = 220        # px between left edges, normal mode only
NORMAL_AIR_CHANCE = 0.45
NORMAL_W_RANGE = (28, 55)   # inclusive
CHAOS_AIR_CHANCE = 0.55
CHAOS_W_RANGE = (26, 61)
CHAOS_INTERVAL_RANGE_S = (0.4, 1.2)
AIR_H = 36
GROUND_OBS_H = 48
AIR_Y = GROUND_Y - 80
GROUND_CLEARANCE_TOL = 6    # feet this far below a rock's top still clear it

# --- Chaser cinematic ---
FINAL_LEVEL_SCORE = 200
CHASER_W, CHASER_H = 44, 70
BIG_CHASER_W, BIG_CHASER_H = 80, 100
CHASER_START_OFFSET = 300   # behind the player
CHASER_FOLLOW_FACTOR = 0.95
FOLLOW_DURATION_S = 30.0
PASS_FACTOR = 3.0
PASSED_WAIT_S = 5.0
RETURN_FACTOR = 1.2
BIG_RETURN_FACTOR = 1.7
CHASER_EXIT_MARGIN = 60
BIG_CHASER_SPAWN_OFFSET = 240
BIG_CHASER_EXIT_MARGIN = 120
FINAL_SPEED_BOOST = 1.2

# --- Score / HUD ---
SCORE_PER_S = 10.0
FIRST_MESSAGE_AT = 300
MESSAGE_STEP = (400, 700)
PROGRESS_SPAN = 10000.0     # fake progress wraps around every span px
MESSAGES = (
    "You're doing... something.",
    "At this rate, you might finish by next century!",
    "Wow! Such progress. Much effort. Mostly effort.",
    "Keep going - it's not like anyone's watching.",
    "Almost there! Just kidding.",
    "Every step forward moves the finish line two steps back.",
)
FINAL_LEVEL_MESSAGE = "Final Level! Watch out!"
QUIT_NOTICE = "Quit requested. Restarting to title."

# --- Persistence ---
HIGHSCORE_KEY = "sarcasticHighScore"
HIGHSCORE_FILE_DEFAULT = "~/.sarcastic_runner.json"

# --- Observation ---
OBS_NEXT_OBSTACLES = 3

# --- Colors (RGB) ---
COLOR_BG = (17, 17, 17)
COLOR_BG_FINAL = (51, 0, 0)
COLOR_FG = (255, 255, 255)
COLOR_HUD_DIM = (221, 221, 221)
COLOR_STRIPE_A = (39, 65, 86)
COLOR_STRIPE_B = (59, 83, 106)
COLOR_PLAYER = (0, 238, 255)
COLOR_ROCK = (255, 255, 255)
COLOR_MISSILE = (255, 159, 67)
COLOR_MISSILE_CHAOS = (255, 107, 129)
COLOR_CHASER = (128, 0, 128)
COLOR_BIG_CHASER = (255, 165, 0)
COLOR_PROGRESS = (102, 255, 102)
COLOR_PROGRESS_FRAME = (102, 102, 102)

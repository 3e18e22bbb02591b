"""
Configuration for the Genius Square solver.
"""
import os

# Board geometry
BOARD_SIZE = 6
NUM_CELLS = BOARD_SIZE * BOARD_SIZE

# Dice: one blocker per die
NUM_DICE = 7
NUM_BLOCKERS = NUM_DICE
DIE_FACES = 6

# Logging
LOG_LEVEL = os.environ.get("GSQ_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Rendering
SVG_OUTPUT = "solution.svg"

# HTTP server
SERVER_HOST = os.environ.get("GSQ_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("GSQ_PORT", "8000"))
MAX_RANDOM_BOARDS = int(os.environ.get("GSQ_MAX_RANDOM", "20"))

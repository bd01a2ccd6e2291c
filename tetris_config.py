
CONFIG = {
    # Board
    "COLS": 10,
    "ROWS": 20,
    "HIDDEN_ROWS": 1,
    # Gravity & progression
    "INITIAL_FALL_MS": 400,
    "SPEED_FACTOR": 0.8,
    "LINES_PER_LEVEL": 5,
    # Lock delay
    "LOCK_DELAY_MAX_MOVES": 5,
    # Randomizer
    "PREVIEW_COUNT": 5,
    "RNG_SEED": None,
    # View / input adapter
    "CELL_SIZE": 32,
    "DAS_MS": 170,
    "ARR_MS": 30,
    "SOFT_DROP_MS": 50,
    "TARGET_FPS": 60,
}

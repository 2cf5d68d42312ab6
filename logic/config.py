"""
Game configuration for the TicTacToe engine.
Board size, markers and search scores.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the default game!
    """

    # ==================== BOARD SETTINGS ====================
    # Classic TicTacToe is a 3x3 grid, any N >= 1 works
    DEFAULT_BOARD_SIZE = 3
    MIN_BOARD_SIZE = 1

    # Cross always moves first unless told otherwise
    DEFAULT_FIRST_PLAYER = "X"

    # ==================== DISPLAY SETTINGS ====================
    # Marker shown for each cell value (keys match Player values)
    MARKERS = {
        1: "X",    # Cross
        -1: "O",   # Nought
        0: "",     # Empty
    }

    # Characters accepted as an empty cell when loading a board from text
    EMPTY_INPUT_MARKERS = (".", " ", "")

    # ==================== SEARCH SETTINGS ====================
    # Leaf scores from the searching player's point of view
    SCORE_WIN = 1
    SCORE_DRAW = 0
    SCORE_LOSS = -1

    # Root alpha-beta window: exactly the range of achievable scores
    ROOT_ALPHA = SCORE_LOSS
    ROOT_BETA = SCORE_WIN

    # Print a summary line after every search
    VERBOSE = False

"""Constants and option defaults for caret scrolling."""

class ScrollConstants:
    """Central option names and defaults for the scroll planners."""

    # Option names
    SCROLLOFF = "scrolloff"
    SCROLLJUMP = "scrolljump"
    SIDESCROLLOFF = "sidescrolloff"
    SIDESCROLL = "sidescroll"

    # Short names accepted wherever an option name is
    ABBREVIATIONS = {
        "so": SCROLLOFF,
        "sj": SCROLLJUMP,
        "siso": SIDESCROLLOFF,
        "ss": SIDESCROLL,
    }

    # Vim defaults
    DEFAULTS = {
        SCROLLOFF: 0,
        SCROLLJUMP: 1,
        SIDESCROLLOFF: 0,
        SIDESCROLL: 0,
    }

    # Negative scrolljump is a percentage of the window height
    MIN_SCROLLJUMP = -100
    MAX_JUMP_PERCENT = 100

    # Config directory name for persisted options
    APP_NAME = "caretview"
    SETTINGS_FILENAME = "options.json"

"""
app settings: defaults as constants, overridable through TICTACTOE_AI_* env vars
"""
import os

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe AI"
THINKING_DELAY_MS = 500            # pause before the computer answers
MEDIUM_OPTIMAL_PROBABILITY = 0.5   # medium: chance of the minimax move
WIN_SCORE = 10                     # leaf value of a win at depth 0
LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

ENV_PREFIX = "TICTACTOE_AI_"

# -----------------------------------------------------------------------------
# ENVIRONMENT LOOKUPS
# -----------------------------------------------------------------------------

def _env(name):
    value = os.getenv(ENV_PREFIX + name)
    return value.strip() if value else None


def _env_int(name, default):
    raw = _env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def thinking_delay_ms():
    """
    delay in ms, env TICTACTOE_AI_DELAY_MS first
    """
    delay = _env_int("DELAY_MS", THINKING_DELAY_MS)
    if delay < 0:
        raise ValueError(f"thinking delay must be >= 0, got {delay}")
    return delay


def random_seed():
    # None means seed from the OS
    return _env_int("SEED", None)


def log_level():
    return (_env("LOG_LEVEL") or LOG_LEVEL).upper()

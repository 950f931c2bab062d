import os
from dataclasses import dataclass

from loguru import logger

from .theme import Theme

# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_THEME = Theme.LIGHT
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_WINDOW_WIDTH = 420
DEFAULT_WINDOW_HEIGHT = 560

ENV_THEME = "TTT_THEME"
ENV_LOG_LEVEL = "TTT_LOG_LEVEL"
ENV_WINDOW_WIDTH = "TTT_WINDOW_WIDTH"
ENV_WINDOW_HEIGHT = "TTT_WINDOW_HEIGHT"


@dataclass(frozen=True)
class AppConfig:
    theme: Theme = DEFAULT_THEME
    log_level: str = DEFAULT_LOG_LEVEL
    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT


def _read_int(env, name, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"{name}={raw!r} is not an integer, using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name}={raw!r} must be positive, using {default}")
        return default
    return value


def load_config(env=None) -> AppConfig:
    """
    Build the app config from environment variables, falling back to the
    module defaults. Call load_dotenv() first to pick up a .env file.

    Args:
        env: mapping to read from, os.environ when None.
    """
    env = os.environ if env is None else env

    theme = DEFAULT_THEME
    raw_theme = env.get(ENV_THEME)
    if raw_theme:
        try:
            theme = Theme.parse(raw_theme)
        except ValueError as e:
            logger.warning(f"{e}; using {DEFAULT_THEME.value}")

    log_level = (env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()

    return AppConfig(
        theme=theme,
        log_level=log_level,
        window_width=_read_int(env, ENV_WINDOW_WIDTH, DEFAULT_WINDOW_WIDTH),
        window_height=_read_int(env, ENV_WINDOW_HEIGHT, DEFAULT_WINDOW_HEIGHT),
    )

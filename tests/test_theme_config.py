import sys

import pytest
from loguru import logger

from tictactoe_app.config import (
    DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH, AppConfig, load_config,
)
from tictactoe_app.log import configure_logging
from tictactoe_app.theme import Theme


def test_toggle_flips_and_returns():
    assert Theme.LIGHT.toggled() is Theme.DARK
    assert Theme.DARK.toggled() is Theme.LIGHT
    assert Theme.LIGHT.toggled().toggled() is Theme.LIGHT


def test_labels_name_the_target_theme():
    assert Theme.LIGHT.button_label == "🌙 Dark"
    assert Theme.DARK.button_label == "☀️ Light"
    assert Theme.LIGHT.accessible_name == "Switch to dark mode"
    assert Theme.DARK.accessible_name == "Switch to light mode"


@pytest.mark.parametrize("text,expected", [
    ("light", Theme.LIGHT), ("DARK", Theme.DARK), ("  Dark ", Theme.DARK),
])
def test_parse(text, expected):
    assert Theme.parse(text) is expected


def test_parse_rejects_unknown():
    with pytest.raises(ValueError, match="unknown theme"):
        Theme.parse("blue")


def test_defaults_from_empty_env():
    assert load_config({}) == AppConfig()


def test_env_overrides():
    cfg = load_config({
        "TTT_THEME": "dark",
        "TTT_LOG_LEVEL": "debug",
        "TTT_WINDOW_WIDTH": "600",
        "TTT_WINDOW_HEIGHT": "700",
    })
    assert cfg.theme is Theme.DARK
    assert cfg.log_level == "DEBUG"
    assert (cfg.window_width, cfg.window_height) == (600, 700)


def test_bad_values_fall_back():
    cfg = load_config({
        "TTT_THEME": "purple",
        "TTT_WINDOW_WIDTH": "wide",
        "TTT_WINDOW_HEIGHT": "-5",
    })
    assert cfg.theme is Theme.LIGHT
    assert cfg.window_width == DEFAULT_WINDOW_WIDTH
    assert cfg.window_height == DEFAULT_WINDOW_HEIGHT


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_unknown_log_level_falls_back_to_info(restore_logger):
    lines = []
    configure_logging("verbose", sink=lines.append)
    logger.debug("hidden")
    logger.info("shown")
    text = "".join(lines)
    assert "unknown log level 'verbose', using INFO" in text
    assert "shown" in text
    assert "hidden" not in text


def test_known_log_level_is_used(restore_logger):
    lines = []
    configure_logging("DEBUG", sink=lines.append)
    logger.debug("hidden no more")
    assert "hidden no more" in "".join(lines)

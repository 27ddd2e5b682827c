import logging
from pathlib import Path
import sys
import types
from unittest.mock import AsyncMock

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from link_expander_bot.config import LinkExpanderConfig  # noqa: E402
from link_expander_bot.core.logging_utils import ROOT_LOGGER_NAME  # noqa: E402


TWITTER_MESSAGE = """
            This is a message that contains a twitter link (https://twitter.com/test/test), a
            x.com link (https://x.com/test/test), a mobile.twitter.com link
            (https://mobile.twitter.com/test/test), a mobile.x.com link
            (https://mobile.x.com/test/test), an unrelated link
            (https://otherwebsite/test/test), and a weird twitter link
            (https://weird.link.twitter.com/test/test).
        """

FIXED_TWITTER_MESSAGE = """
            This is a message that contains a twitter link (https://fxtwitter.com/test/test), a
            x.com link (https://fixupx.com/test/test), a mobile.twitter.com link
            (https://fxtwitter.com/test/test), a mobile.x.com link
            (https://fixupx.com/test/test), an unrelated link
            (https://otherwebsite/test/test), and a weird twitter link
            (https://weird.link.twitter.com/test/test).
        """


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture()
def sample_config(tmp_path) -> LinkExpanderConfig:
    return LinkExpanderConfig(
        discord_token="testing-token",
        test_guild_ids={2},
        user_agent="link-expander-tests",
        http_timeout=5.0,
        log_level="DEBUG",
        error_log_file=str(tmp_path / "errors.log"),
    )


class DummyInteraction:
    """Records the calls a cog makes on a ``discord.Interaction``."""

    def __init__(self) -> None:
        self.response = types.SimpleNamespace(send_message=AsyncMock())
        self.followup = types.SimpleNamespace(send=AsyncMock())
        self.edit_original_response = AsyncMock()
        self.delete_original_response = AsyncMock()
        self.user = types.SimpleNamespace(id=42)


@pytest.fixture()
def interaction() -> DummyInteraction:
    return DummyInteraction()


@pytest.fixture()
def error_engine():
    engine = types.SimpleNamespace(log_exception=lambda exc, context="": None)
    return engine


__all__ = [
    "sample_config",
    "interaction",
    "error_engine",
    "DummyInteraction",
    "TWITTER_MESSAGE",
    "FIXED_TWITTER_MESSAGE",
]

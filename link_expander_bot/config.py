"""Environment-backed configuration helpers for LinkExpanderBot."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Set

DEFAULT_CONFIG_FILE = "./discord-threads-link-expander-config.toml"
DEFAULT_USER_AGENT = "discord-threads-link-expander-bot"
DEFAULT_ERROR_LOG_FILE = "logs/link_expander_errors.log"


def _split_ints(value: str) -> Set[int]:
    ints: Set[int] = set()
    for chunk in (value or "").replace(";", ",").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            ints.add(int(chunk))
        except ValueError:
            continue
    return ints


def _truthy(value: str) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _token_from_file(path: str) -> Optional[str]:
    """Read ``bot_token`` from the legacy TOML config file, if present."""

    config_path = Path(path)
    if not config_path.is_file():
        return None
    with config_path.open("rb") as handle:
        data = tomllib.load(handle)
    token = str(data.get("bot_token") or "").strip()
    return token or None


@dataclass(slots=True)
class LinkExpanderConfig:
    discord_token: str
    test_guild_ids: Set[int] = field(default_factory=set)
    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: float = 15.0
    log_level: str = "INFO"
    error_log_file: str = DEFAULT_ERROR_LOG_FILE
    wipe_commands: bool = False

    @classmethod
    def from_env(cls) -> "LinkExpanderConfig":
        token = os.getenv("DISCORD_TOKEN", "").strip()
        if not token:
            config_file = os.getenv("LINK_EXPANDER_CONFIG_FILE", "").strip() or DEFAULT_CONFIG_FILE
            token = _token_from_file(config_file) or ""
        if not token:
            raise RuntimeError(
                "DISCORD_TOKEN is required to run the bot (or bot_token in the config file)"
            )

        try:
            http_timeout = float(os.getenv("HTTP_TIMEOUT_SECONDS", "15"))
        except ValueError:
            http_timeout = 15.0
        if http_timeout <= 0:
            http_timeout = 15.0

        return cls(
            discord_token=token,
            test_guild_ids=_split_ints(os.getenv("TEST_GUILDS", "")),
            user_agent=os.getenv("HTTP_USER_AGENT", "").strip() or DEFAULT_USER_AGENT,
            http_timeout=http_timeout,
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
            error_log_file=os.getenv("ERROR_LOG_FILE", "").strip() or DEFAULT_ERROR_LOG_FILE,
            wipe_commands=_truthy(os.getenv("LINK_EXPANDER_WIPE_COMMANDS", "")),
        )


__all__ = ["LinkExpanderConfig"]

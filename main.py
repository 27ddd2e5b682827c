"""Root entry point for LinkExpanderBot."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def main() -> None:
    load_dotenv()
    from link_expander_bot.runner import run_link_expander_bot

    run_link_expander_bot()


if __name__ == "__main__":
    main()

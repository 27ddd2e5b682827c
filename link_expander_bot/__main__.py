"""
Module entry point for `python -m link_expander_bot`.
"""
from __future__ import annotations

from link_expander_bot.main import main


if __name__ == "__main__":
    main()

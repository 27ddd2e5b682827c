"""Discord bot that fixes Twitter links and expands Threads links."""

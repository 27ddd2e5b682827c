"""Link engine and the helpers the cogs build on."""

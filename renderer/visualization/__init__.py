"""Chart-level view contracts."""

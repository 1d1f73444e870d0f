"""Feature modules, one per file operation family."""

"""Feature modules for xec-send."""

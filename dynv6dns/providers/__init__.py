"""Remote store implementations."""

"""Net worth dashboard package."""

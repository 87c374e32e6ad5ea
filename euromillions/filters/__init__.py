"""Draw validity filters."""

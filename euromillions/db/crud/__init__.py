"""Module-level async CRUD functions."""

"""Historical data loading and the in-memory data store."""

"""Application services over the data store and the repository."""

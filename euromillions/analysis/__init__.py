"""Statistical tables and distributions over the draw history."""

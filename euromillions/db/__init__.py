"""Persistence layer: async engine, ORM models and CRUD."""

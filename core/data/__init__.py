"""Data layer - ORM models, repositories and unit of work."""

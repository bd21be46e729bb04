"""Application layer - DTOs, mappers and query services."""

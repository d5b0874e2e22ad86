"""Application layer - pattern registration and the catalog service."""

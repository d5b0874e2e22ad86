"""Infrastructure layer - registry, logging and rendering."""

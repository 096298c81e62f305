"""Infrastructure layer — template loading and rendering."""

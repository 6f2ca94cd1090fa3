"""Infrastructure reflection tests."""

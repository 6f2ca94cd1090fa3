"""Domain models reflection tests."""

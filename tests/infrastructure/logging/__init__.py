"""Infrastructure logging tests."""

"""Domain services tests."""

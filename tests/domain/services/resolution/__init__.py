"""Domain services resolution tests."""

"""Domain models tests."""

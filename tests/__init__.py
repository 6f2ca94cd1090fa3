"""Test suite for the overload activator.

Test Structure:
- domain/: Type model, compatibility rules and constructor resolution
- infrastructure/: Reflection providers and logging setup
- application/: Public construction entry points
- config/: Configuration loading
- test_main.py: Command line entry point

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run cross-layer tests only
"""

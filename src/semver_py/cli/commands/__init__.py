"""Command implementations for the semver-py CLI."""

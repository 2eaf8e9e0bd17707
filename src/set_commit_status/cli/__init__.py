"""Command line interface for set-commit-status."""

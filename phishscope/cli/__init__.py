"""Command line interface for PhishScope."""

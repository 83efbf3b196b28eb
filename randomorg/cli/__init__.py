"""CLI package for randomorg."""

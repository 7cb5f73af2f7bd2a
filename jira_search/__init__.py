"""Command-line client for searching Jira issues."""

__version__ = "0.1.0"

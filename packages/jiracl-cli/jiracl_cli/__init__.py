"""jiracl CLI - command line client for Jira."""

__version__ = "0.1.0"

"""CLI commands for TaskVault."""

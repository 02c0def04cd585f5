"""CLI commands for TaskFlow."""

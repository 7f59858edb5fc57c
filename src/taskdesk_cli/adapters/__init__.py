"""Storage adapters for TaskDesk CLI."""

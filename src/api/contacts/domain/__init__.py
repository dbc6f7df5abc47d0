"""Domain layer for the contacts bounded context."""

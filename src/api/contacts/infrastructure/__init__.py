"""Infrastructure layer for the contacts bounded context."""

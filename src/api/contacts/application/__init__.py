"""Application layer for the contacts bounded context."""

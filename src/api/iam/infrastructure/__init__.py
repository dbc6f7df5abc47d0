"""Infrastructure layer for IAM bounded context."""

"""Identity and Access Management (IAM) bounded context."""

"""Contacts bounded context: categories, contacts and their links."""

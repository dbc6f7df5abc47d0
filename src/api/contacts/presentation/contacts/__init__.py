"""Contact routes and models."""

from contacts.presentation.contacts.routes import router

__all__ = ["router"]

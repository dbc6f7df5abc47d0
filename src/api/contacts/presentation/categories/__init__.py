"""Category routes and models."""

from contacts.presentation.categories.routes import router

__all__ = ["router"]

"""HTTP primitives shared by every bounded context's presentation layer."""

from infrastructure.web.authorization import get_principal, require_role
from infrastructure.web.error_handlers import register_exception_handlers
from infrastructure.web.models import ApiModel, PageResponse
from infrastructure.web.pagination import get_page_request

__all__ = [
    "ApiModel",
    "PageResponse",
    "get_page_request",
    "get_principal",
    "require_role",
    "register_exception_handlers",
]

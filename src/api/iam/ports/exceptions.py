"""Domain exceptions for IAM bounded context.

These exceptions represent domain-level errors that can occur during
repository operations. They should be caught and handled by the
application layer.
"""

from shared_kernel.exceptions import ValidationError


class DuplicateUsernameError(ValidationError):
    """Raised when a username is already held by a different tenant.

    Usernames identify tenants at login, so they are unique across the
    whole system rather than per tenant.
    """

    def __init__(self, username: str):
        super().__init__(f"Username '{username}' is already taken")
        self.username = username

"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthenticatedError(DomainError):
    """Raised when an action requires a signed-in user and none is present."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to touch a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to access {resource} {resource_id}"
        )


class EngagementError(DomainError):
    """Raised when a like or bookmark toggle could not be completed.

    Callers use this to roll back optimistic UI state.
    """

    def __init__(self, action: str, post_id: str):
        self.action = action
        self.post_id = post_id
        super().__init__(f"Could not {action} post {post_id}, please try again")


class ValidationError(DomainError):
    """Domain validation error."""

    pass

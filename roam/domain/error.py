"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when the supplied arguments are insufficient for an operation."""

    def __init__(self, message: str):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they have no rights to."""

    def __init__(
        self, resource: str, resource_id: str, user_id: str, action: str = "edit"
    ):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.action = action
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyVotedError(DomainError):
    """Raised when a user upvotes a post they have already upvoted."""

    def __init__(self, post_id: str, user_id: str):
        self.post_id = post_id
        self.user_id = user_id
        super().__init__(f"User {user_id} has already upvoted post {post_id}")

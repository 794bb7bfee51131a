"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ParentNotFoundError(NotFoundError):
    """Raised when a reply references a parent comment that does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Parent comment", identifier)


class ForbiddenError(DomainError):
    """Raised when an identity attempts to modify content it does not own."""

    def __init__(self, resource: str, resource_id: str, actor: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{actor} is not allowed to modify {resource} {resource_id}")


class AdminRequiredError(ForbiddenError):
    """Raised when a non-admin attempts an admin-only action."""

    def __init__(self, action: str, actor: str):
        self.resource = "admin"
        self.resource_id = action
        DomainError.__init__(self, f"{actor} must be an admin to {action}")


class DuplicateVoteError(DomainError):
    """Raised when an identity repeats the vote it already holds."""

    def __init__(self, target: str, direction: str):
        super().__init__(f"Already voted {direction} on {target}")


class NoVoteFoundError(DomainError):
    """Raised when removing a vote the identity never cast."""

    def __init__(self, target: str):
        super().__init__(f"No vote found on {target}")


class StorageFailureError(DomainError):
    """Raised when the persistent store fails to apply a change."""

    pass

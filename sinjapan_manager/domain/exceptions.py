"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class BackendError(Exception):
    """Raised when the upstream REST backend answers with a non-2xx status.

    ``message`` carries the server-provided ``message`` or ``error`` field
    so it can be shown to the user unchanged.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[backend] {status_code}: {message}")


class PermissionDeniedError(Exception):
    """Raised when the current user's role does not allow an action."""

    def __init__(self, action: str, role: str | None):
        self.action = action
        self.role = role
        self.message = "権限がありません"
        super().__init__(f"Role '{role}' may not perform '{action}'")


class LeadImportError(Exception):
    """Raised when pasted CSV text cannot produce any lead."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AIProviderError(Exception):
    """Raised when an AI provider returns an error.

    Provider-agnostic: works for the upstream AI backend and OpenRouter.
    """

    def __init__(self, provider: str, status_code: int, message: str):
        self.provider = provider
        self.status_code = status_code
        self.message = message
        super().__init__(f"[{provider}] {status_code}: {message}")


class AttachmentTooLargeError(Exception):
    """Raised when an uploaded chat attachment exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        self.message = f"ファイルサイズが大きすぎます（上限 {limit // (1024 * 1024)}MB）"
        super().__init__(f"Attachment of {size} bytes exceeds limit of {limit} bytes")

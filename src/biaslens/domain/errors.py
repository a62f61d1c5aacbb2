"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidRecordError(DomainError):
    """Raised when a record would violate a domain invariant."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"Invalid {kind}: {reason}")
        self.kind = kind
        self.reason = reason


# ============================================================================
#                           Lookup errors
# ============================================================================


class RecordNotFoundError(DomainError):
    """Base class for errors raised when a referenced record does not exist."""

    def __init__(self, kind: str, key: object, message: str | None = None) -> None:
        if message is None:
            message = f"{kind} ({key}) not found"
        super().__init__(message)
        self.kind = kind
        self.key = key


class TestNotFoundError(RecordNotFoundError):
    """Raised when a test does not exist for the given owner."""

    __test__ = False  # not a pytest test class

    def __init__(self, test_id: int, user_id: str) -> None:
        super().__init__(
            "test", test_id, f"Test ({test_id}) not found for user {user_id}"
        )
        self.user_id = user_id


class TemplateNotFoundError(RecordNotFoundError):
    """Raised when a template id is not part of the catalog."""

    def __init__(self, template_id: int) -> None:
        super().__init__(
            "template", template_id, f"Template ({template_id}) not found in catalog"
        )


# ============================================================================
#                   Evaluation run and report errors
# ============================================================================


class NoActiveProtocolError(DomainError):
    """Raised when a result is recorded while no protocol is running."""

    def __init__(self) -> None:
        super().__init__("No protocol is active; start one before recording.")


class InvalidReportPayloadError(DomainError):
    """Raised when an inline report payload cannot be interpreted."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid report payload: {reason}")
        self.reason = reason


class EmptyResultsError(ValueError):
    """Raised when a score is requested for a run without any results."""

    def __init__(self) -> None:
        super().__init__("Cannot compute a score without any recorded results.")

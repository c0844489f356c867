"""Error Hierarchy — typed, categorized exceptions for resource model failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client-data errors (400-level) are recoverable; invariant breaches (500-level) are critical
    - ResourceValidationError.kind is one of exactly six ResourceErrorKind members
    - to_response() produces the REST envelope; no internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with JsonApiResourceError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ResourceErrorKind as IntEnum: callers match on members, numeric values stay stable for logs
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INVALID_DOCUMENT = "invalid_document"
    INTERNAL = "internal"


class ResourceErrorKind(IntEnum):
    """Resource validation failures. Values are only unique within this enum."""
    TYPE_REQUIRED = 1
    META_NOT_OBJECT = 2
    FIELD_GROUP_NOT_OBJECT = 3
    RESERVED_FIELD_NAME = 4
    FIELD_NAME_CONFLICT = 5
    RESERVED_COMPLEX_ATTRIBUTE_KEY = 6


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    field: str | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class JsonApiResourceError(Exception):
    """Base exception for all resource model errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Client Data Errors (400-level) ─────────────────────────────

class ResourceValidationError(JsonApiResourceError):
    """A resource field was assigned a value that breaks a structural invariant."""
    def __init__(
        self,
        message: str,
        kind: ResourceErrorKind,
        extra: dict[str, Any] | None = None,
        context: ErrorContext | None = None,
    ):
        self.kind = kind
        self.extra = dict(extra or {})
        self.field = self.extra.get("field")
        ctx = context or ErrorContext()
        if self.field is not None and ctx.field is None:
            ctx.field = self.field
        super().__init__(
            message, kind.name, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )

    def as_internal_error(self) -> "ResourceInvariantError":
        """Re-classify as an internal defect, e.g. when an adapter built the resource."""
        error = ResourceInvariantError(
            f"Invalid resource produced internally: {self.message}",
            context=ErrorContext(
                resource_type=self.context.resource_type,
                resource_id=self.context.resource_id,
                field=self.field,
                debug_info={"kind": self.kind.name, **self.extra},
            ),
        )
        error.__cause__ = self
        return error


class InvalidRelationshipError(JsonApiResourceError):
    """Relationship linkage data is not a resource identifier (or list of them)."""
    def __init__(self, message: str, path: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        if path is not None and ctx.field is None:
            ctx.field = path
        super().__init__(
            message, "INVALID_RELATIONSHIP", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.path = path


class InvalidResourceDocumentError(JsonApiResourceError):
    """A wire resource object failed schema validation."""
    def __init__(self, details: list[dict[str, Any]], context: ErrorContext | None = None):
        super().__init__(
            "Invalid resource object",
            "INVALID_RESOURCE_OBJECT", ErrorCategory.INVALID_DOCUMENT,
            ErrorSeverity.ERROR, context, 400,
        )
        self.details = details

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.details
        return response


# ─── Internal Errors (500-level) ────────────────────────────────

class ResourceInvariantError(JsonApiResourceError):
    """Server-side code produced or used a resource in an invalid state."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = ctx.user_message or "An unexpected error occurred"
        super().__init__(
            message, "RESOURCE_INVARIANT_VIOLATED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )

"""
Structured error types for calendar-jp.

Provides a small hierarchy of typed errors carrying a category and
structured context, so failures at the rule-table boundary can be logged
and reported without losing which rule or field was at fault.

Manifesto:
    - **Typed Error Hierarchy:** One error type per failure domain
    - **Rich Context:** Errors carry the rule name, field and source
    - **Error Chaining:** Preserve original exceptions while adding context
    - **Lookups never raise:** Only the mutation and loading paths use these

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                     CalendarError                         │
        │               (category, context, cause)                 │
        ├──────────────────────────────────────────────────────────┤
        │                                                          │
        │  RuleValidationError     RuleSourceError     ConfigError  │
        │  (VALIDATION)            (SOURCE)            (CONFIG)     │
        │       │                       │                           │
        │  DuplicateRuleError      RuleParseError                   │
        │                          (PARSE)                          │
        └──────────────────────────────────────────────────────────┘

Examples:
    Rejecting a malformed rule:

    >>> error = RuleValidationError("month must be between 1 and 12",
    ...                             field="month", value=13)
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> error.to_dict()["field"]
    'month'

    Adding context fluently:

    >>> error = RuleSourceError("Rule file not found")
    >>> error.with_context(source_name="json", path="/tmp/rules.json")
    RuleSourceError('Rule file not found', category=SOURCE)
    >>> error.context.source_name
    'json'

Guardrails:
    ❌ DON'T: Raise from get_holiday / get_holiday_map
    ✅ DO: Return None / {} on the lookup path

    ❌ DON'T: Swallow the original exception when wrapping
    ✅ DO: Pass it as cause= for error chaining

Tags:
    error-handling, exception-hierarchy, error-context, calendar-jp
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and reporting.

    Attributes:
        SOURCE: Rule document missing or unreadable
        PARSE: Rule document is not valid JSON or has the wrong shape
        VALIDATION: A rule violates the rule-table constraints
        CONFIG: Invalid settings
        INTERNAL: Bugs, unexpected state
    """

    SOURCE = "SOURCE"
    PARSE = "PARSE"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"

@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Typed fields cover the metadata calendar errors usually need; anything
    else goes into ``metadata``. ``to_dict()`` serializes non-None fields for
    logging.

    Attributes:
        rule_name: Name of the rule being added/updated/loaded
        rule_index: Position of the rule in the loaded document
        source_name: Rule source type (e.g. "packaged", "json")
        path: File path of the rule document
        metadata: Additional key-value pairs
    """

    rule_name: str | None = None
    rule_index: int | None = None
    source_name: str | None = None
    path: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["rule_name", "rule_index", "source_name", "path"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result

class CalendarError(Exception):
    """
    Base exception for all calendar-jp errors.

    Every instance carries a ``category`` (from the subclass's
    ``default_category`` unless overridden), an ``ErrorContext`` and an
    optional chained ``cause``.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> CalendarError:
        """
        Add context to this error (fluent API).

        Usage:
            raise RuleSourceError("Not found").with_context(
                source_name="json",
                path="rules.json",
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"

# =============================================================================
# VALIDATION ERRORS
# =============================================================================

class RuleValidationError(CalendarError):
    """
    A holiday rule violates the rule-table constraints.

    Raised by the rule validator at the CRUD boundary and while loading a
    rule document. The rule store is left unchanged.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        return result

class DuplicateRuleError(RuleValidationError):
    """A rule with the same name already exists in the store."""

    def __init__(self, name: str, **kwargs: Any):
        super().__init__(f"Rule already exists: {name}", field="name", value=name, **kwargs)
        self.context.rule_name = name

# =============================================================================
# SOURCE ERRORS
# =============================================================================

class RuleSourceError(CalendarError):
    """The rule document could not be located or read."""

    default_category = ErrorCategory.SOURCE

class RuleParseError(RuleSourceError):
    """The rule document is not valid JSON or does not have a ``rules`` list."""

    default_category = ErrorCategory.PARSE

# =============================================================================
# CONFIG ERRORS
# =============================================================================

class ConfigError(CalendarError):
    """Invalid calendar configuration."""

    default_category = ErrorCategory.CONFIG


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "CalendarError",
    "RuleValidationError",
    "DuplicateRuleError",
    "RuleSourceError",
    "RuleParseError",
    "ConfigError",
]

"""
Rule definition sources for the Japanese holiday domain.

A rule document is a JSON object::

    {
        "locale": "japan",
        "rules": [
            {"name": "元日", "title": "元日",
             "yearRange": {"begin": 1948, "end": 9999},
             "month": 1, "date": 1},
            ...
        ]
    }

Source types:
- packaged: the rule table shipped inside the package (default)
- json: a rule document on disk

Sources are resolved by type through a domain-local registry.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime
from importlib import resources
from pathlib import Path
from typing import Any

from calendar_jp.core.errors import RuleParseError, RuleSourceError, RuleValidationError
from calendar_jp.holidays.rules import HolidayRule, validate_rule
from calendar_jp.holidays.schema import LOCALE

PACKAGED_RULES = "holiday_rule_jp.json"


# =============================================================================
# PAYLOAD
# =============================================================================


@dataclass
class RuleSourceMetadata:
    """Metadata about a loaded rule document."""

    source_type: str
    source_name: str
    locale: str
    loaded_at: datetime


@dataclass
class RulePayload:
    """Parsed rules + metadata from any source."""

    rules: list[HolidayRule]
    metadata: RuleSourceMetadata


def parse_rule_document(content: Any, *, source_name: str = "<memory>") -> tuple[str, list[HolidayRule]]:
    """
    Parse and validate a rule document.

    Every rule is checked with ``validate_rule``; the first invalid rule
    aborts the load with its index and name in the error context.

    Returns:
        (locale, rules) in document order

    Raises:
        RuleParseError: document is not an object with a ``rules`` list
        RuleValidationError: a rule is malformed
    """
    if not isinstance(content, dict) or not isinstance(content.get("rules"), list):
        raise RuleParseError(
            "Rule document must be an object with a 'rules' list"
        ).with_context(source_name=source_name)

    rules = []
    for index, raw in enumerate(content["rules"]):
        try:
            rule = HolidayRule.from_dict(raw)
            validate_rule(rule)
        except RuleValidationError as e:
            e.context.rule_index = index
            e.context.source_name = source_name
            raise
        rules.append(rule)

    return content.get("locale", LOCALE), rules


# =============================================================================
# SOURCE ABSTRACTION
# =============================================================================


class RuleSource(ABC):
    """Abstract base for rule definition sources."""

    @property
    @abstractmethod
    def source_type(self) -> str:
        """Return source type identifier."""
        ...

    @abstractmethod
    def read_text(self) -> str:
        """Return the raw JSON text of the rule document."""
        ...

    @property
    def source_name(self) -> str:
        return self.source_type

    def load(self) -> RulePayload:
        """Read, parse and validate the rule document."""
        text = self.read_text()
        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise RuleParseError(
                f"Invalid JSON in rule document: {e.msg} (line {e.lineno})", cause=e
            ).with_context(source_name=self.source_name)

        locale, rules = parse_rule_document(content, source_name=self.source_name)
        return RulePayload(
            rules=rules,
            metadata=RuleSourceMetadata(
                source_type=self.source_type,
                source_name=self.source_name,
                locale=locale,
                loaded_at=datetime.now(UTC),
            ),
        )


# Source Registry (domain-local)
SOURCE_REGISTRY: dict[str, type[RuleSource]] = {}


def register_source(name: str):
    """Decorator to register a source type."""
    def decorator(cls: type[RuleSource]) -> type[RuleSource]:
        SOURCE_REGISTRY[name] = cls
        return cls
    return decorator


def resolve_source(source_type: str = "packaged", **kwargs) -> RuleSource:
    """Resolve source by type with parameters."""
    if source_type not in SOURCE_REGISTRY:
        available = ", ".join(SOURCE_REGISTRY.keys())
        raise RuleSourceError(f"Unknown source type: {source_type}. Available: {available}")
    return SOURCE_REGISTRY[source_type](**kwargs)


@register_source("packaged")
class PackagedRuleSource(RuleSource):
    """The rule table shipped as package data."""

    def __init__(self, resource: str = PACKAGED_RULES, **kwargs):
        self.resource = resource

    @property
    def source_type(self) -> str:
        return "packaged"

    @property
    def source_name(self) -> str:
        return f"packaged:{self.resource}"

    def read_text(self) -> str:
        try:
            return (
                resources.files("calendar_jp.holidays.data")
                .joinpath(self.resource)
                .read_text(encoding="utf-8")
            )
        except (OSError, UnicodeDecodeError) as e:
            raise RuleSourceError(
                f"Packaged rule table unreadable: {self.resource}", cause=e
            ).with_context(source_name=self.source_name)


@register_source("json")
class JsonFileRuleSource(RuleSource):
    """A rule document on disk."""

    def __init__(self, file_path: Path | str | None = None, **kwargs):
        if file_path is None:
            raise RuleSourceError("file_path is required for JsonFileRuleSource")
        self.file_path = Path(file_path)

    @property
    def source_type(self) -> str:
        return "json"

    @property
    def source_name(self) -> str:
        return str(self.file_path)

    def read_text(self) -> str:
        if not self.file_path.exists():
            raise RuleSourceError(f"Rule file not found: {self.file_path}").with_context(
                source_name=self.source_type, path=str(self.file_path)
            )
        try:
            return self.file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise RuleSourceError(
                f"Rule file is not UTF-8: {self.file_path}", cause=e
            ).with_context(source_name=self.source_type, path=str(self.file_path))
        except OSError as e:
            raise RuleSourceError(
                f"Could not read rule file: {self.file_path}", cause=e
            ).with_context(source_name=self.source_type, path=str(self.file_path))


def load_rules(path: Path | str | None = None) -> RulePayload:
    """Load the packaged rule table, or the document at ``path`` when given."""
    if path is None:
        return resolve_source("packaged").load()
    return resolve_source("json", file_path=path).load()

"""
Ordered, mutable holiday rule table.

Rule order is significant: the expander gives precedence to later rules.
Validation and name uniqueness are enforced here, at the mutation
boundary; the expander trusts whatever the store holds.

Contract:
- add: validate, reject a duplicate name, append
- remove: drop every rule with the name; never raises
- update: validate, replace the first rule with the name in place;
  no-op when the name is absent
- list: the live sequence (not copied)

A failed add/update leaves the store unchanged.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from calendar_jp.core.errors import DuplicateRuleError
from calendar_jp.holidays.rules import HolidayRule, coerce_rule, validate_rule


class RuleStore:
    """Holds the rule table for one calendar instance."""

    def __init__(self, rules: Iterable[HolidayRule] = ()):
        self._rules: list[HolidayRule] = list(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return any(rule.name == name for rule in self._rules)

    def add(self, rule: HolidayRule | Mapping[str, Any]) -> HolidayRule:
        """Validate and append a rule."""
        rule = coerce_rule(rule)
        validate_rule(rule)
        if rule.name in self:
            raise DuplicateRuleError(rule.name)
        self._rules.append(rule)
        return rule

    def remove(self, name: str) -> int:
        """Remove every rule named ``name``; returns how many were removed."""
        before = len(self._rules)
        self._rules[:] = [rule for rule in self._rules if rule.name != name]
        return before - len(self._rules)

    def update(self, rule: HolidayRule | Mapping[str, Any]) -> bool:
        """Replace the first rule with the same name; returns False when absent."""
        rule = coerce_rule(rule)
        validate_rule(rule)
        for index, existing in enumerate(self._rules):
            if existing.name == rule.name:
                self._rules[index] = rule
                return True
        return False

    def list(self) -> list[HolidayRule]:
        return self._rules

"""
Base class for all tag-category checks.

A check is a short, ordered list of rule rows. Each row pairs a predicate
with the verdict it produces: a tag status and, for failing rows, an issue,
a recommendation and a score penalty. The first row whose predicate matches
decides the outcome, so rows are written from worst to best.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Union

from config import PENALTIES
from errors import InvariantViolation
from models import Issue, Severity, TagRecord

Text = Union[str, Callable[[TagRecord], str]]


@dataclass(frozen=True)
class Rule:
    when: Callable[[TagRecord], bool]
    status: str
    code: Optional[str] = None
    severity: Optional[str] = None
    message: Text = ""
    recommendation: Text = ""

    @property
    def penalty(self) -> int:
        return PENALTIES.get(self.code, 0) if self.code else 0


@dataclass(frozen=True)
class CheckOutcome:
    category: str
    status: str
    issue: Optional[Issue] = None
    recommendation: Optional[str] = None
    penalty: int = 0


class BaseCheck(ABC):
    """All category checks inherit from this class."""

    category: str = "Uncategorized"

    @abstractmethod
    def rules(self) -> list[Rule]:
        """Rule rows for this category, worst first. The last row should always match."""
        ...

    def evaluate(self, tags: TagRecord) -> CheckOutcome:
        for rule in self.rules():
            if not rule.when(tags):
                continue
            if rule.code is None:
                return CheckOutcome(category=self.category, status=rule.status)
            return CheckOutcome(
                category=self.category,
                status=rule.status,
                issue=Issue(
                    severity=rule.severity,
                    message=_render(rule.message, tags),
                    code=rule.code,
                ),
                recommendation=_render(rule.recommendation, tags),
                penalty=rule.penalty,
            )
        raise InvariantViolation(f"No rule matched for category {self.category!r}")

    # ── Convenience factories ─────────────────────────────────────────────────

    @staticmethod
    def error(when, status, code, message, recommendation) -> Rule:
        return Rule(when, status, code, Severity.ERROR, message, recommendation)

    @staticmethod
    def warning(when, status, code, message, recommendation) -> Rule:
        return Rule(when, status, code, Severity.WARNING, message, recommendation)

    @staticmethod
    def passing(status) -> Rule:
        return Rule(lambda tags: True, status)


def _render(text: Text, tags: TagRecord) -> str:
    return text(tags) if callable(text) else text

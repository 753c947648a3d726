"""Pure-function access rules for lending.

Rules are stateless functions: (book, user) -> RuleResult.
No catalog, no side effects, no notifications. This makes them:
- Trivially testable (pure input/output)
- Composable (chain multiple rules)
- Auditable (deterministic, explainable)

The state machine consults these rules only when an available book is borrowed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from core.models.library import Book, User


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass
class RuleResult:
    """Outcome of a single rule evaluation."""

    passed: bool
    rule_name: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleSetResult:
    """Aggregate outcome of multiple rules."""

    all_passed: bool
    results: list[RuleResult]
    failed: list[RuleResult] = field(default_factory=list)

    def __post_init__(self):
        self.failed = [r for r in self.results if not r.passed]
        self.all_passed = len(self.failed) == 0


# ---------------------------------------------------------------------------
# Lending rules
# ---------------------------------------------------------------------------

def check_premium_access(book: Book, user: User) -> RuleResult:
    """Premium books may only be borrowed by premium users.

    Regular books pass for everyone.
    """
    passed = user.is_premium or not book.is_premium

    return RuleResult(
        passed=passed,
        rule_name="premium_access",
        message=(
            f"{user.name} may borrow '{book.title}'"
            if passed
            else f"'{book.title}' is a premium book and {user.name} is not a premium member"
        ),
        details={
            "book_is_premium": book.is_premium,
            "user_is_premium": user.is_premium,
        },
    )


def borrow_rules(book: Book, user: User, enforce_premium: bool = True) -> list[RuleResult]:
    """Evaluate every rule gating a borrow of an available book."""
    results = []
    if enforce_premium:
        results.append(check_premium_access(book, user))
    return results


# ---------------------------------------------------------------------------
# Rule composition
# ---------------------------------------------------------------------------

def evaluate_rules(*rules: RuleResult) -> RuleSetResult:
    """Compose multiple rule results into a single aggregate.

    Example::

        result = evaluate_rules(*borrow_rules(book, user))
        if not result.all_passed:
            print(result.failed[0].message)
    """
    return RuleSetResult(
        all_passed=all(r.passed for r in rules),
        results=list(rules),
    )

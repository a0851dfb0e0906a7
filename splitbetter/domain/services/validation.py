"""Domain validation helpers for expenses."""

from collections.abc import Iterable
from decimal import Decimal

from splitbetter.domain.constants import CUSTOM_AMOUNT_TOLERANCE, ZERO
from splitbetter.domain.models import CustomSplit, Expense, Split
from splitbetter.utils.decimal_utils import coerce_decimal, sum_decimals


class ExpenseValidationError(ValueError):
    """Raised when an expense is rejected before being written.

    Attributes:
        problems: Every problem found on the expense.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


def validate_new_expense(split: Split, expense: Expense) -> None:
    """Reject an expense that would break the split's balances.

    Args:
        split: Split the expense is written to.
        expense: Candidate expense.

    Raises:
        ExpenseValidationError: If any problem is found.
    """
    problems: list[str] = []
    amount = coerce_decimal(expense.amount)
    if amount <= 0:
        problems.append(f"Amount must be positive, got {amount}")
    if not split.has_participant(expense.paid_by):
        problems.append(f"Payer {expense.paid_by} is not in the split")

    if expense.participants is not None:
        if not expense.participants:
            problems.append("Expense must have at least one participant")
        unknown = [
            p for p in expense.participants if not split.has_participant(p)
        ]
        if unknown:
            problems.append(
                f"Participants not in the split: {', '.join(unknown)}"
            )
    if expense.is_settlement:
        if not expense.participants or len(expense.participants) != 2:
            problems.append(
                "Settlement must list exactly the payer and the recipient"
            )
        elif expense.paid_by not in expense.participants:
            problems.append("Settlement payer must be one of its participants")

    if isinstance(expense.rule, CustomSplit):
        problems.extend(_custom_amount_problems(split, expense))

    if problems:
        raise ExpenseValidationError(problems)


def find_integrity_issues(
    split: Split,
    expenses: Iterable[Expense],
) -> list[str]:
    """Return data-quality problems found in an expense history.

    Read paths tolerate these records; the messages only explain why the
    balances may not sum to zero.

    Args:
        split: Split owning the expenses.
        expenses: Expense history to inspect.

    Returns:
        list[str]: One message per problem.
    """
    issues: list[str] = []
    for expense in expenses:
        label = expense.expense_id or expense.title or "<unsaved>"
        if not split.has_participant(expense.paid_by):
            issues.append(
                f"Expense {label} paid by unknown participant "
                f"{expense.paid_by}"
            )
        if isinstance(expense.rule, CustomSplit):
            total = _custom_total(split, expense)
            amount = coerce_decimal(expense.amount)
            if abs(total - amount) > CUSTOM_AMOUNT_TOLERANCE:
                issues.append(
                    f"Expense {label} custom amounts sum to {total}, "
                    f"expected {amount}"
                )
    return issues


def warn_on_integrity_issues(
    split: Split,
    expenses: Iterable[Expense],
    logger,
) -> list[str]:
    """Log every integrity issue as a warning and return them."""
    issues = find_integrity_issues(split, expenses)
    for issue in issues:
        logger.warning(f"Split {split.split_id}: {issue}")
    return issues


def _custom_amount_problems(split: Split, expense: Expense) -> list[str]:
    problems: list[str] = []
    custom_amounts = expense.rule.custom_amounts
    if not custom_amounts:
        return ["Custom split requires custom amounts"]
    participants = expense.participants or split.participants
    missing = [p for p in participants if p not in custom_amounts]
    if missing:
        problems.append(
            f"Custom amounts missing for: {', '.join(missing)}"
        )
    negative = [
        p for p, value in custom_amounts.items() if coerce_decimal(value) < 0
    ]
    if negative:
        problems.append(
            f"Custom amounts must not be negative: {', '.join(negative)}"
        )
    total = _custom_total(split, expense)
    amount = coerce_decimal(expense.amount)
    if abs(total - amount) > CUSTOM_AMOUNT_TOLERANCE:
        problems.append(
            f"Custom amounts sum to {total}, expected {amount}"
        )
    return problems


def _custom_total(split: Split, expense: Expense) -> Decimal:
    participants = expense.participants or split.participants
    custom_amounts = expense.rule.custom_amounts
    return sum_decimals(custom_amounts.get(p, ZERO) for p in participants)


__all__ = [
    "ExpenseValidationError",
    "validate_new_expense",
    "find_integrity_issues",
    "warn_on_integrity_issues",
]

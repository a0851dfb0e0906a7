"""CLI adapter printing the balances and settlements of a split.

The split is selected with the SPLIT_ID environment variable; CURRENT_USER_ID
optionally adds a personal summary for one participant.
"""

from decimal import Decimal
import os

from splitbetter.domain.models import SplitBalancesView
from splitbetter.infrastructure.container import (
    build_get_split_balances_use_case,
)
from splitbetter.infrastructure.logging.logger import get_app_logger


def _format_amount(value: Decimal, currency_code: str) -> str:
    """Format an amount with two decimals and the currency code."""
    return f"{value:,.2f} {currency_code}"


def _format_signed(value: Decimal) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def render_balances(view: SplitBalancesView) -> list[str]:
    """Return the printable lines for a balances view.

    Args:
        view: Balances computed for a split.

    Returns:
        list[str]: Lines ready to be printed.
    """
    currency = view.split.currency
    summary = view.summary
    lines = [
        f"Split: {view.split.title} ({currency})",
        f"Total spend: {_format_amount(summary.total_spend, currency)}",
        f"Budget left: {_format_amount(summary.budget_left, currency)}",
        "Balances:",
    ]
    for position in view.positions:
        lines.append(
            f"  {position.participant}: {_format_signed(position.net)} "
            f"({position.status.value})"
        )
    lines.append("Settle up:")
    if view.is_settled:
        lines.append("  Everyone is settled up!")
    for instruction in view.settlements:
        lines.append(
            f"  {instruction.from_participant} -> "
            f"{instruction.to_participant}: "
            f"{_format_amount(instruction.amount, currency)}"
        )
    if view.user_summary is not None:
        user = view.user_summary
        lines.append(f"For {user.participant}:")
        if view.user_share is not None:
            lines.append(
                f"  Your share: {_format_amount(view.user_share, currency)}"
            )
        if user.total_owed_by_user > 0:
            lines.append(
                "  You owe "
                f"{_format_amount(user.total_owed_by_user, currency)}"
            )
        if user.total_owed_to_user > 0:
            lines.append(
                "  You are owed "
                f"{_format_amount(user.total_owed_to_user, currency)}"
            )
    return lines


def main() -> None:
    """Print balances for the split named by SPLIT_ID."""
    logger = get_app_logger()
    split_id = os.getenv("SPLIT_ID", "").strip()
    if not split_id:
        logger.warning("SPLIT_ID is required to compute balances.")
        return
    current_user_id = os.getenv("CURRENT_USER_ID", "").strip() or None

    use_case = build_get_split_balances_use_case()
    try:
        view = use_case.execute(split_id, current_user_id=current_user_id)
    except LookupError as exc:
        logger.error(str(exc))
        return

    for line in render_balances(view):
        print(line)


if __name__ == "__main__":  # pragma: no cover
    main()

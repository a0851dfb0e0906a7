"""Use case to compute balances and settlements for a split."""

from splitbetter.application.ports.expense_repository import (
    ExpenseRepositoryPort,
)
from splitbetter.application.ports.split_repository import SplitRepositoryPort
from splitbetter.domain.models import SplitBalancesView
from splitbetter.domain.services import (
    compute_net_balances,
    compute_participant_positions,
    compute_participant_share,
    compute_settlements,
    compute_split_summary,
    summarize_user_settlements,
    warn_on_integrity_issues,
)
from splitbetter.infrastructure.logging.logger import get_app_logger


class GetSplitBalancesUseCase:
    """Compute who owes whom from a split's full expense history.

    Every call works on a fresh snapshot fetched from the repositories; no
    state is kept between calls.
    """

    def __init__(
        self,
        split_repository: SplitRepositoryPort,
        expense_repository: ExpenseRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            split_repository: Port providing split records.
            expense_repository: Port providing expense histories.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._split_repository = split_repository
        self._expense_repository = expense_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        split_id: str,
        current_user_id: str | None = None,
    ) -> SplitBalancesView:
        """Return balances, settlements and summaries for the split.

        Args:
            split_id: Identifier of the split.
            current_user_id: Optional participant to build a personal
                settlement summary for.

        Returns:
            SplitBalancesView: Everything needed to render the balances.
        """
        split = self._split_repository.fetch_split(split_id)
        expenses = self._expense_repository.fetch_expenses(split_id)
        self._logger.info(
            f"Fetched {len(expenses)} expenses for split {split_id}"
        )
        warn_on_integrity_issues(split, expenses, self._logger)

        net_balances = compute_net_balances(split.participants, expenses)
        settlements = compute_settlements(net_balances)
        positions = compute_participant_positions(
            split.participants,
            net_balances,
        )
        summary = compute_split_summary(split, expenses)

        user_summary = None
        user_share = None
        if current_user_id is not None:
            user_summary = summarize_user_settlements(
                current_user_id,
                settlements,
            )
            user_share = compute_participant_share(
                current_user_id,
                split.participants,
                expenses,
            )

        self._logger.info(
            f"Balances computed for split {split_id}: "
            f"spend={summary.total_spend}, "
            f"settlements={len(settlements)}"
        )
        return SplitBalancesView(
            split=split,
            summary=summary,
            net_balances=net_balances,
            positions=positions,
            settlements=settlements,
            user_summary=user_summary,
            user_share=user_share,
        )


__all__ = ["GetSplitBalancesUseCase", "SplitBalancesView"]

"""Use case to record a settlement instruction as a settlement expense."""

from splitbetter.application.ports.expense_repository import (
    ExpenseRepositoryPort,
)
from splitbetter.application.ports.split_repository import SplitRepositoryPort
from splitbetter.domain.models import SettlementInstruction
from splitbetter.domain.services import (
    build_settlement_expense,
    validate_new_expense,
)
from splitbetter.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class RecordSettlementUseCase:
    """Persist a chosen transfer so the next recomputation reflects it."""

    def __init__(
        self,
        split_repository: SplitRepositoryPort,
        expense_repository: ExpenseRepositoryPort,
        logger=None,
        usage_logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            split_repository: Port providing split records.
            expense_repository: Port persisting expenses.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user-facing actions.
        """
        self._split_repository = split_repository
        self._expense_repository = expense_repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()

    def execute(
        self,
        split_id: str,
        instruction: SettlementInstruction,
        title: str | None = None,
    ) -> str:
        """Write the settlement expense and return its identifier.

        Args:
            split_id: Identifier of the split.
            instruction: Transfer to record.
            title: Optional description of the transfer.

        Returns:
            str: Identifier assigned by the repository.

        Raises:
            ExpenseValidationError: If the transfer does not fit the split.
        """
        split = self._split_repository.fetch_split(split_id)
        expense = build_settlement_expense(instruction, title=title)
        validate_new_expense(split, expense)
        expense_id = self._expense_repository.add_expense(split_id, expense)
        self._logger.info(
            f"Recorded settlement expense {expense_id} in split {split_id}"
        )
        self._usage_logger.info(
            f"Settlement {instruction.from_participant} -> "
            f"{instruction.to_participant} of {instruction.amount} "
            f"{split.currency} in split {split_id}"
        )
        return expense_id


__all__ = ["RecordSettlementUseCase"]

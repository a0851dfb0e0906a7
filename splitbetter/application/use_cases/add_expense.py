"""Use case to validate, convert and write a new expense."""

from dataclasses import replace

from splitbetter.application.ports.exchange_rates import ExchangeRatePort
from splitbetter.application.ports.expense_repository import (
    ExpenseRepositoryPort,
)
from splitbetter.application.ports.split_repository import SplitRepositoryPort
from splitbetter.domain.models import CustomSplit, Expense, Split
from splitbetter.domain.services import (
    normalize_currency_code,
    validate_new_expense,
)
from splitbetter.infrastructure.logging.logger import get_app_logger
from splitbetter.utils.decimal_utils import coerce_decimal


class AddExpenseUseCase:
    """Write an expense after converting and validating it.

    Amounts entered in another currency are converted into the split
    currency before validation, so the stored record already satisfies the
    balance engine's expectations.
    """

    def __init__(
        self,
        split_repository: SplitRepositoryPort,
        expense_repository: ExpenseRepositoryPort,
        exchange_rates: ExchangeRatePort | None = None,
        default_currency: str | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            split_repository: Port providing split records.
            expense_repository: Port persisting expenses.
            exchange_rates: Optional port providing conversion rates.
            default_currency: Currency assumed when an expense is entered
                without one. The split currency applies when unset.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._split_repository = split_repository
        self._expense_repository = expense_repository
        self._exchange_rates = exchange_rates
        self._default_currency = default_currency
        self._logger = logger or get_app_logger()

    def execute(
        self,
        split_id: str,
        expense: Expense,
        currency: str | None = None,
    ) -> str:
        """Write the expense and return its identifier.

        Args:
            split_id: Identifier of the split.
            expense: Expense as entered by the user.
            currency: Currency the amounts were entered in. Defaults to the
                configured default currency, then the split currency.

        Returns:
            str: Identifier assigned by the repository.

        Raises:
            ExpenseValidationError: If the expense would corrupt balances.
            RuntimeError: If a conversion is needed but no rate is known.
        """
        split = self._split_repository.fetch_split(split_id)
        prepared = self._convert(
            split,
            expense,
            currency or self._default_currency,
        )
        validate_new_expense(split, prepared)
        expense_id = self._expense_repository.add_expense(split_id, prepared)
        self._logger.info(
            f"Added {prepared.kind.value} expense {expense_id} "
            f"of {prepared.amount} {split.currency} to split {split_id}"
        )
        return expense_id

    def _convert(
        self,
        split: Split,
        expense: Expense,
        currency: str | None,
    ) -> Expense:
        """Return the expense expressed in the split currency.

        Args:
            split: Split owning the expense.
            expense: Expense as entered.
            currency: Currency of the entered amounts.

        Returns:
            Expense: The same expense when no conversion is needed, otherwise
            a copy with converted amounts and the original values recorded.
        """
        source = normalize_currency_code(currency)
        target = normalize_currency_code(split.currency)
        if source is None or source == target:
            return expense
        if self._exchange_rates is None:
            raise RuntimeError(
                f"No exchange rate provider to convert {source} to {target}"
            )
        rate = self._exchange_rates.fetch_rate(source, target)
        if rate is None:
            raise RuntimeError(f"Missing exchange rate for {source} to {target}")
        rate = coerce_decimal(rate)
        self._logger.info(f"Converting {source} to {target} at rate {rate}")

        rule = expense.rule
        if isinstance(rule, CustomSplit):
            rule = CustomSplit(
                custom_amounts={
                    participant: coerce_decimal(value) * rate
                    for participant, value in rule.custom_amounts.items()
                }
            )
        original_amount = coerce_decimal(expense.amount)
        return replace(
            expense,
            amount=original_amount * rate,
            rule=rule,
            original_amount=original_amount,
            original_currency=source,
            conversion_rate=rate,
        )


__all__ = ["AddExpenseUseCase"]

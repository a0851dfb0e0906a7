"""SQLAlchemy-backed repository for split expenses."""

from datetime import datetime, timezone
import json
import uuid

from sqlalchemy import text

from splitbetter.application.ports.database import DatabaseEnginePort
from splitbetter.application.ports.expense_repository import (
    ExpenseRepositoryPort,
)
from splitbetter.domain.models import (
    CustomSplit,
    Expense,
    parse_expense_kind,
    parse_split_rule,
)
from splitbetter.domain.services import normalize_participant_ids
from splitbetter.infrastructure.logging.logger import get_app_logger
from splitbetter.utils.decimal_utils import coerce_decimal

SELECT_EXPENSES_SQL = text(
    """
    SELECT id, title, amount, paid_by, participants, split_type,
           custom_amounts, kind, original_amount, original_currency,
           conversion_rate
    FROM expenses
    WHERE split_id = :split_id
    ORDER BY created_at, id
    """
)

INSERT_EXPENSE_SQL = text(
    """
    INSERT INTO expenses (
        id,
        split_id,
        title,
        amount,
        paid_by,
        participants,
        split_type,
        custom_amounts,
        kind,
        original_amount,
        original_currency,
        conversion_rate,
        created_at
    )
    VALUES (
        :id,
        :split_id,
        :title,
        :amount,
        :paid_by,
        :participants,
        :split_type,
        :custom_amounts,
        :kind,
        :original_amount,
        :original_currency,
        :conversion_rate,
        :created_at
    )
    """
)


class SqlAlchemyExpenseRepository(ExpenseRepositoryPort):
    """Repository backed by SQLAlchemy for expense records.

    Participants and custom amounts are stored as JSON text. Unreadable JSON
    is logged and read back as absent, so the balance engine falls back on the
    split participants or an equal split. Custom amounts that are not numbers
    are logged and dropped, leaving those participants owing nothing.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the database engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_expenses(self, split_id: str) -> list[Expense]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(
                SELECT_EXPENSES_SQL,
                {"split_id": split_id},
            ).all()
        return [self._row_to_expense(row) for row in rows]

    def add_expense(self, split_id: str, expense: Expense) -> str:
        expense_id = expense.expense_id or uuid.uuid4().hex
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_EXPENSE_SQL,
                self._expense_to_params(split_id, expense_id, expense),
            )
        return expense_id

    def _row_to_expense(self, row) -> Expense:
        """Build a domain expense from a database row.

        Args:
            row: Row returned by SELECT_EXPENSES_SQL.

        Returns:
            Expense: Typed expense record.
        """
        participants = self._load_json(row.participants, row.id, "participants")
        custom_amounts = self._load_custom_amounts(row.custom_amounts, row.id)
        return Expense(
            amount=coerce_decimal(row.amount),
            paid_by=str(row.paid_by),
            participants=normalize_participant_ids(
                participants if isinstance(participants, list) else None
            ),
            rule=parse_split_rule(row.split_type, custom_amounts),
            kind=parse_expense_kind(row.kind),
            expense_id=str(row.id),
            title=row.title or "",
            original_amount=self._optional_decimal(row.original_amount),
            original_currency=row.original_currency,
            conversion_rate=self._optional_decimal(row.conversion_rate),
        )

    def _load_json(self, raw: str | None, expense_id: str, column: str):
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            self._logger.warning(
                f"Ignoring unreadable {column} on expense {expense_id}"
            )
            return None

    def _load_custom_amounts(self, raw: str | None, expense_id: str):
        custom_amounts = self._load_json(raw, expense_id, "custom_amounts")
        if not isinstance(custom_amounts, dict):
            return custom_amounts
        parsed = {}
        for participant, value in custom_amounts.items():
            try:
                amount = coerce_decimal(value)
            except ValueError:
                amount = None
            if amount is None or not amount.is_finite():
                self._logger.warning(
                    f"Ignoring unreadable custom amount {value!r} for "
                    f"{participant} on expense {expense_id}"
                )
                continue
            parsed[participant] = amount
        return parsed

    @staticmethod
    def _expense_to_params(
        split_id: str,
        expense_id: str,
        expense: Expense,
    ) -> dict:
        custom_amounts = None
        if isinstance(expense.rule, CustomSplit):
            custom_amounts = json.dumps(
                {
                    participant: str(amount)
                    for participant, amount in expense.rule.custom_amounts.items()
                }
            )
        participants = None
        if expense.participants is not None:
            participants = json.dumps(list(expense.participants))
        return {
            "id": expense_id,
            "split_id": split_id,
            "title": expense.title,
            "amount": str(expense.amount),
            "paid_by": expense.paid_by,
            "participants": participants,
            "split_type": expense.rule.rule_type.value,
            "custom_amounts": custom_amounts,
            "kind": expense.kind.value,
            "original_amount": _optional_str(expense.original_amount),
            "original_currency": expense.original_currency,
            "conversion_rate": _optional_str(expense.conversion_rate),
            "created_at": datetime.now(timezone.utc).isoformat(),
        }

    @staticmethod
    def _optional_decimal(value):
        if value is None:
            return None
        return coerce_decimal(value)


def _optional_str(value) -> str | None:
    return None if value is None else str(value)


__all__ = ["SqlAlchemyExpenseRepository"]

"""Composition root for wiring infrastructure adapters."""

from splitbetter.application.ports.database import DatabaseEnginePort
from splitbetter.application.ports.exchange_rates import ExchangeRatePort
from splitbetter.application.ports.expense_repository import (
    ExpenseRepositoryPort,
)
from splitbetter.application.ports.split_repository import SplitRepositoryPort
from splitbetter.application.use_cases import (
    AddExpenseUseCase,
    GetSplitBalancesUseCase,
    RecordSettlementUseCase,
)
from splitbetter.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from splitbetter.infrastructure.exchange_rates import (
    CachedExchangeRateProvider,
    ExchangeRateCache,
    SqlAlchemyExchangeRateRepository,
)
from splitbetter.infrastructure.expense_repository import (
    SqlAlchemyExpenseRepository,
)
from splitbetter.infrastructure.logging.logger import get_app_logger
from splitbetter.infrastructure.settings import SplitBetterSettings
from splitbetter.infrastructure.split_repository import (
    SqlAlchemySplitRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_split_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SplitRepositoryPort:
    """Return the split repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySplitRepository(resolved_db)


def build_expense_repository(
    db_port: DatabaseEnginePort | None = None,
) -> ExpenseRepositoryPort:
    """Return the expense repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyExpenseRepository(resolved_db, logger=get_app_logger())


def build_exchange_rate_provider(
    db_port: DatabaseEnginePort | None = None,
    settings: SplitBetterSettings | None = None,
) -> ExchangeRatePort:
    """Return a cached exchange-rate provider using the configured TTL."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or SplitBetterSettings.from_env()
    return CachedExchangeRateProvider(
        SqlAlchemyExchangeRateRepository(resolved_db),
        ExchangeRateCache(resolved_settings.exchange_rate_ttl_seconds),
        logger=get_app_logger(),
    )


def build_get_split_balances_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetSplitBalancesUseCase:
    """Return the balances use case wired to SQL repositories."""
    resolved_db = db_port or build_database_adapter()
    return GetSplitBalancesUseCase(
        split_repository=build_split_repository(resolved_db),
        expense_repository=build_expense_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_add_expense_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: SplitBetterSettings | None = None,
) -> AddExpenseUseCase:
    """Return the add-expense use case with currency conversion."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or SplitBetterSettings.from_env()
    return AddExpenseUseCase(
        split_repository=build_split_repository(resolved_db),
        expense_repository=build_expense_repository(resolved_db),
        exchange_rates=build_exchange_rate_provider(
            resolved_db,
            settings=resolved_settings,
        ),
        default_currency=resolved_settings.default_currency,
        logger=get_app_logger(),
    )


def build_record_settlement_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> RecordSettlementUseCase:
    """Return the settlement-recording use case."""
    resolved_db = db_port or build_database_adapter()
    return RecordSettlementUseCase(
        split_repository=build_split_repository(resolved_db),
        expense_repository=build_expense_repository(resolved_db),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_split_repository",
    "build_expense_repository",
    "build_exchange_rate_provider",
    "build_get_split_balances_use_case",
    "build_add_expense_use_case",
    "build_record_settlement_use_case",
]

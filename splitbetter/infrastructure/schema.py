"""Table definitions for the SplitBetter store."""

from splitbetter.application.ports.database import DatabaseEnginePort

# Money columns hold Decimal strings so amounts round-trip exactly.
CREATE_SPLITS_SQL = """
CREATE TABLE IF NOT EXISTS splits (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    currency TEXT NOT NULL,
    budget TEXT NOT NULL DEFAULT '0'
)
"""

CREATE_SPLIT_PARTICIPANTS_SQL = """
CREATE TABLE IF NOT EXISTS split_participants (
    split_id TEXT NOT NULL,
    participant_id TEXT NOT NULL,
    position INTEGER NOT NULL,
    PRIMARY KEY (split_id, participant_id)
)
"""

CREATE_EXPENSES_SQL = """
CREATE TABLE IF NOT EXISTS expenses (
    id TEXT PRIMARY KEY,
    split_id TEXT NOT NULL,
    title TEXT,
    amount TEXT NOT NULL,
    paid_by TEXT NOT NULL,
    participants TEXT,
    split_type TEXT NOT NULL,
    custom_amounts TEXT,
    kind TEXT NOT NULL,
    original_amount TEXT,
    original_currency TEXT,
    conversion_rate TEXT,
    created_at TEXT NOT NULL
)
"""

CREATE_EXCHANGE_RATES_SQL = """
CREATE TABLE IF NOT EXISTS exchange_rates (
    from_currency TEXT NOT NULL,
    to_currency TEXT NOT NULL,
    rate TEXT NOT NULL,
    date DATE NOT NULL
)
"""

SCHEMA_STATEMENTS = (
    CREATE_SPLITS_SQL,
    CREATE_SPLIT_PARTICIPANTS_SQL,
    CREATE_EXPENSES_SQL,
    CREATE_EXCHANGE_RATES_SQL,
)


def ensure_schema(db_port: DatabaseEnginePort) -> None:
    """Create the SplitBetter tables if they do not exist.

    Args:
        db_port: Port providing access to the database engine.
    """
    engine = db_port.get_engine()
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = ["ensure_schema", "SCHEMA_STATEMENTS"]

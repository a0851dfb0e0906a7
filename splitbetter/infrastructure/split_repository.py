"""SQLAlchemy-backed repository for splits."""

from sqlalchemy import text

from splitbetter.application.ports.database import DatabaseEnginePort
from splitbetter.application.ports.split_repository import SplitRepositoryPort
from splitbetter.domain.models import Split
from splitbetter.utils.decimal_utils import coerce_decimal

SELECT_SPLIT_SQL = text(
    """
    SELECT id, title, currency, budget
    FROM splits
    WHERE id = :split_id
    """
)

SELECT_PARTICIPANTS_SQL = text(
    """
    SELECT participant_id
    FROM split_participants
    WHERE split_id = :split_id
    ORDER BY position
    """
)

INSERT_SPLIT_SQL = text(
    """
    INSERT INTO splits (id, title, currency, budget)
    VALUES (:id, :title, :currency, :budget)
    """
)

INSERT_PARTICIPANT_SQL = text(
    """
    INSERT INTO split_participants (split_id, participant_id, position)
    VALUES (:split_id, :participant_id, :position)
    """
)


class SqlAlchemySplitRepository(SplitRepositoryPort):
    """Repository backed by SQLAlchemy for split records."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the database engine.
        """
        self._db_port = db_port

    def fetch_split(self, split_id: str) -> Split:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(SELECT_SPLIT_SQL, {"split_id": split_id}).first()
            if row is None:
                raise LookupError(f"Unknown split: {split_id}")
            participant_rows = conn.execute(
                SELECT_PARTICIPANTS_SQL,
                {"split_id": split_id},
            ).all()
        return Split(
            split_id=str(row.id),
            title=row.title,
            currency=row.currency,
            budget=coerce_decimal(row.budget),
            participants=tuple(
                str(item.participant_id) for item in participant_rows
            ),
        )

    def save_split(self, split: Split) -> None:
        """Insert a split and its ordered participants.

        Args:
            split: Split to persist.

        Raises:
            ValueError: If the participant list contains duplicates.
        """
        if len(set(split.participants)) != len(split.participants):
            raise ValueError(
                f"Split {split.split_id} has duplicate participants"
            )
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                INSERT_SPLIT_SQL,
                {
                    "id": split.split_id,
                    "title": split.title,
                    "currency": split.currency,
                    "budget": str(split.budget),
                },
            )
            if split.participants:
                conn.execute(
                    INSERT_PARTICIPANT_SQL,
                    [
                        {
                            "split_id": split.split_id,
                            "participant_id": participant,
                            "position": position,
                        }
                        for position, participant in enumerate(
                            split.participants
                        )
                    ],
                )


__all__ = ["SqlAlchemySplitRepository"]

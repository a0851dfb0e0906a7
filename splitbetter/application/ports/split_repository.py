"""Port for reading splits."""

from typing import Protocol

from splitbetter.domain.models import Split


class SplitRepositoryPort(Protocol):
    """Port exposing read access to splits."""

    def fetch_split(self, split_id: str) -> Split:
        """Return the split.

        Raises:
            LookupError: If the split does not exist.
        """


__all__ = ["SplitRepositoryPort"]

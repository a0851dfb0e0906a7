"""Domain normalization helpers."""


def normalize_currency_code(currency: str | None) -> str | None:
    """Normalize currency code values.

    Args:
        currency: Raw currency code from a request or repository.

    Returns:
        str | None: Upper-cased code, or None when blank.
    """
    if not currency:
        return None
    cleaned = currency.strip()
    return cleaned.upper() if cleaned else None


def normalize_participant_ids(participants) -> tuple[str, ...] | None:
    """Normalize a raw participant list.

    Blank entries are dropped and duplicates collapsed, keeping the first
    occurrence.

    Args:
        participants: Raw iterable of identifiers, or None.

    Returns:
        tuple[str, ...] | None: Cleaned identifiers, or None when nothing
        usable remains.
    """
    if not participants:
        return None
    cleaned: list[str] = []
    for participant in participants:
        if participant is None:
            continue
        value = str(participant).strip()
        if value and value not in cleaned:
            cleaned.append(value)
    return tuple(cleaned) or None


__all__ = ["normalize_currency_code", "normalize_participant_ids"]

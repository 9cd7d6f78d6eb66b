"""Domain normalization helpers."""

from src.domain.constants import UNCATEGORIZED


def normalize_category(category: str | None) -> str:
    """Normalize transaction category labels.

    Args:
        category: Raw category value from a repository.

    Returns:
        str: Stripped category, or ``Uncategorized`` when empty.
    """
    if not category:
        return UNCATEGORIZED
    cleaned = category.strip()
    return cleaned if cleaned else UNCATEGORIZED


def normalize_merchant(merchant: str | None) -> str | None:
    """Normalize merchant labels.

    Args:
        merchant: Raw merchant value from a repository.

    Returns:
        str | None: Stripped merchant, or None when empty.
    """
    if not merchant:
        return None
    cleaned = merchant.strip()
    return cleaned if cleaned else None


def parse_category_list(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated category list.

    Args:
        raw: Stored value such as ``"Groceries,Dining"``.

    Returns:
        tuple[str, ...]: Non-empty, stripped category names.
    """
    if not raw:
        return ()
    parts = (part.strip() for part in raw.split(","))
    return tuple(part for part in parts if part)


__all__ = ["normalize_category", "normalize_merchant", "parse_category_list"]

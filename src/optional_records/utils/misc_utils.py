# src/optional_records/utils/misc_utils.py


def normalize_key(value: str) -> str:
    """Folds a lookup key so that comparisons ignore case."""
    return str(value).casefold()


def keys_match(left: str, right: str) -> bool:
    """Case-insensitive equality of two lookup keys."""
    return normalize_key(left) == normalize_key(right)

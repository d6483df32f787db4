from collections.abc import Mapping
from typing import TypeVar

K = TypeVar('K')
V = TypeVar('V')


def remove_null(data: Mapping[K, V | None]) -> dict[K, V]:
    """
    Get a copy of a mapping without the keys whose value is `None`.
    """

    return {key: value for key, value in data.items() if value is not None}


def remove_null_and_empty_string(data: Mapping[K, V | None]) -> dict[K, V]:
    """
    Get a copy of a mapping without the keys whose value is `None` or a string that is empty once
    stripped from its whitespaces. Useful to filter submitted form data.
    """

    return {
        key: value for key, value in remove_null(data).items()
        if not (isinstance(value, str) and value.strip() == '')
    }

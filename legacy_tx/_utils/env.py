"""
Helpers for reading configuration from environment variables, in the manner
of https://github.com/simpleenergy/env-excavator.
"""

import enum
import os
from typing import (
    Any,
    Type,
    TypeVar,
    Union,
)


class empty:
    """
    We use this sentinel object, instead of None, as None is a plausible value
    for a default in real Python code.
    """


def get_env_value(name: str, required: bool = False, default: Any = empty) -> str:
    """
    Core function for extracting the environment variable.

    Enforces mutual exclusivity between `required` and `default` keywords.

    The `empty` sentinal value is used as the default `default` value to allow
    other function to handle default/empty logic in the appropriate way.
    """
    if required and default is not empty:
        raise ValueError("Using `default` with `required=True` is invalid")
    elif required:
        try:
            value = os.environ[name]
        except KeyError:
            raise KeyError(f"Must set environment variable {name}")
    else:
        value = os.environ.get(name, default)
    return value


TEnum = TypeVar("TEnum", bound=enum.Enum)


def env_enum(
    name: str,
    enum_type: Type[TEnum],
    required: bool = False,
    default: Union[Type[empty], TEnum] = empty,
) -> TEnum:
    """
    Pulls an environment variable out of the environment and looks it up by
    value in ``enum_type``. Surrounding whitespace and letter case are ignored.
    If the name is not present in the environment and no default is specified
    then a ``ValueError`` will be raised, as it will be if the value names no
    member of ``enum_type``.

    :param name: The name of the environment variable be pulled
    :type name: str

    :param enum_type: The enumeration whose member values are accepted.
    :type enum_type: enum.Enum subclass

    :param required: Whether the environment variable is required. If ``True``
    and the variable is not present, a ``KeyError`` is raised.
    :type required: bool

    :param default: The member to return if the environment variable is not
    present. (Providing a default alongside setting ``required=True`` will raise
    a ``ValueError``)
    :type default: enum member
    """
    value = get_env_value(name, required=required, default=default)
    if value is empty:
        raise ValueError(
            "`env_enum` requires either a default value to be specified, or for "
            "the variable to be present in the environment"
        )
    elif isinstance(value, enum_type):
        return value

    normalized = value.strip().lower()
    for member in enum_type:
        if member.value == normalized:
            return member

    choices = ", ".join(str(member.value) for member in enum_type)
    raise ValueError(
        f"Environment variable {name} must be one of ({choices}). Got: {value!r}"
    )

"""
Naming utilities for scaffolded files and symbols.

Handles case conversion between the four naming styles supported in
file names, and the suffix bookkeeping used for class and interface names.
"""

import re
from enum import Enum


class NamingCase(Enum):
    """Naming case styles accepted by ``fileNameCase``."""

    PASCAL_CASE = "pascal"  # UserPayment
    CAMEL_CASE = "camel"  # userPayment
    KEBAB_CASE = "kebab"  # user-payment
    SNAKE_CASE = "snake"  # user_payment

    @classmethod
    def values(cls) -> list[str]:
        """Return the accepted string values, in declaration order."""
        return [case.value for case in cls]

    @classmethod
    def parse(cls, value) -> "NamingCase | None":
        """Return the matching case, or None when ``value`` is not a member."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except (ValueError, TypeError):
            return None


# Template variable that renders a name in each case
CASE_VARIABLES = {
    NamingCase.PASCAL_CASE: "pascalName",
    NamingCase.CAMEL_CASE: "camelName",
    NamingCase.KEBAB_CASE: "dashName",
    NamingCase.SNAKE_CASE: "snakeName",
}

_SEPARATOR_PATTERN = re.compile(r"[-_](\w)")
_CASE_BOUNDARY_PATTERN = re.compile(r"([a-z])([A-Z])")


def capitalize_first(value: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    return value[:1].upper() + value[1:]


def lowercase_first(value: str) -> str:
    """Lowercase the first character, leave the rest untouched."""
    return value[:1].lower() + value[1:]


def to_camel_case(value: str) -> str:
    """
    Convert to camelCase.

    Every hyphen or underscore is dropped and the character after it is
    uppercased; the first character is then forced to lowercase.
    """
    camel = _SEPARATOR_PATTERN.sub(lambda match: match.group(1).upper(), value)
    return lowercase_first(camel)


def to_pascal_case(value: str) -> str:
    """Convert to PascalCase."""
    return capitalize_first(to_camel_case(value))


def to_kebab_case(value: str) -> str:
    """Convert to kebab-case: ``UserPayment`` becomes ``user-payment``."""
    camel = to_camel_case(value)
    return _CASE_BOUNDARY_PATTERN.sub(r"\1-\2", camel).lower()


def to_snake_case(value: str) -> str:
    """Convert to snake_case: ``UserPayment`` becomes ``user_payment``."""
    return to_kebab_case(value).replace("-", "_")


_CONVERTERS = {
    NamingCase.PASCAL_CASE: to_pascal_case,
    NamingCase.CAMEL_CASE: to_camel_case,
    NamingCase.KEBAB_CASE: to_kebab_case,
    NamingCase.SNAKE_CASE: to_snake_case,
}


def convert_case(value: str, target_case: NamingCase) -> str:
    """
    Convert ``value`` to the given naming case.

    Args:
        value: Identifier in any supported case
        target_case: Desired case style

    Returns:
        Converted identifier
    """
    return _CONVERTERS[target_case](value)


def _last_word_start(value: str) -> int:
    for index in range(len(value) - 1, 0, -1):
        if value[index].isupper():
            return index
    return 0


def ensure_suffix(name: str, suffix: str) -> str:
    """
    Append ``suffix`` to ``name`` so that it appears exactly once.

    When the end of ``name`` already overlaps the start of ``suffix`` only
    the missing part is appended, so ``UserRepository`` with the suffix
    ``RepositoryPort`` becomes ``UserRepositoryPort`` rather than
    ``UserRepositoryRepositoryPort``.
    """
    if not suffix or name.endswith(suffix):
        return name

    # A name ending in the final word of a compound suffix drops that word
    # first: ``UserPort`` with ``RepositoryPort`` becomes ``UserRepositoryPort``
    last_word = suffix[_last_word_start(suffix):]
    if last_word != suffix and len(name) > len(last_word) and name.endswith(last_word):
        name = name[: -len(last_word)]

    # Only whole words of the suffix may overlap
    for overlap in range(len(suffix) - 1, 0, -1):
        if suffix[overlap].isupper() and name.endswith(suffix[:overlap]):
            return name + suffix[overlap:]

    return name + suffix


def strip_suffix(name: str, suffix: str) -> str:
    """Remove ``suffix`` from the end of ``name`` if present."""
    if suffix and name.endswith(suffix) and len(name) > len(suffix):
        return name[: -len(suffix)]
    return name

"""
Exception hierarchy for safe-enum.

Errors fall into four groups:

1.  **Construction** (`EnumDefinitionError` and subclasses): raised while a
    definition is validated. Construction is aborted; no container is returned.
2.  **Accessor** (`MissingFieldError`): raised by the `get_*_or_raise` accessors
    of a member when a field is absent or empty.
3.  **Lookup** (`EnumLookupError`): raised only by the explicit
    `from_*_or_raise` lookups. Plain lookups return `None` instead.
4.  **Immutability** (`ImmutableMutationError`): raised on any attempt to write
    to a frozen member or container.
"""


class SafeEnumError(Exception):
  """Base class for every error raised by safe-enum."""


class EnumDefinitionError(SafeEnumError, ValueError):
  """
  A definition could not be turned into an enum.

  Subclasses `ValueError` so callers treating bad input generically keep working.
  """


class EmptyKeyError(EnumDefinitionError):
  """A member key is the empty string."""


class EmptyValueError(EnumDefinitionError):
  """A member value is the empty string."""


class NegativeIndexError(EnumDefinitionError):
  """An explicit member index is below zero."""


class DuplicateIndexError(EnumDefinitionError):
  """Two members claim the same explicit index."""


class DuplicateValueError(EnumDefinitionError):
  """Two list entries are equal when compared case-insensitively."""


class DuplicateKeyError(EnumDefinitionError):
  """The same key is declared twice."""


class InvalidDefinitionError(EnumDefinitionError):
  """The definition has the wrong shape (e.g. a non-string value)."""


class MissingFieldError(SafeEnumError, ValueError):
  """A required member field is missing or empty."""


class EnumLookupError(SafeEnumError, LookupError):
  """An explicit `..._or_raise` lookup found no member."""


class ImmutableMutationError(SafeEnumError, AttributeError):
  """Attempted write to a frozen member or container."""

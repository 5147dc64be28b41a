"""
Definition Validator.

Turns a normalized definition into a list of fully indexed entries, or raises
one of the `EnumDefinitionError` subclasses. Validation is a pure function of
its input; nothing is built until every entry has passed.

Checks, per entry in declaration order:
1.  Empty key.
2.  Empty value.
3.  Negative explicit index.
4.  Repeated key.
5.  Explicit index already claimed by an earlier entry.

List-mode input is additionally scanned for case-insensitive duplicate values
before any of the above. Map-mode input may repeat values freely.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from safe_enum.core.allocator import allocate_indices
from safe_enum.core.schema import EnumEntry, ResolvedEntry
from safe_enum.errors import (
  DuplicateIndexError,
  DuplicateKeyError,
  DuplicateValueError,
  EmptyKeyError,
  EmptyValueError,
  InvalidDefinitionError,
  NegativeIndexError,
)


def validate_definition(entries: Sequence[Tuple[str, EnumEntry]]) -> List[ResolvedEntry]:
  """
  Validates entries and resolves missing indices.

  Args:
      entries (Sequence[Tuple[str, EnumEntry]]): Output of `normalize_map`.

  Returns:
      List[ResolvedEntry]: Entries with their final indices, in declaration order.

  Raises:
      EmptyKeyError: A key is ``""``.
      EmptyValueError: A value is ``""``.
      NegativeIndexError: An explicit index is below zero.
      DuplicateKeyError: A key appears twice.
      DuplicateIndexError: Two entries declare the same explicit index.
  """
  seen_keys = set()
  index_owner: Dict[int, str] = {}

  for key, entry in entries:
    if key == "":
      raise EmptyKeyError(f"[SafeEnum] Key cannot be empty (value: '{entry.value}')")
    if entry.value == "":
      raise EmptyValueError(f"Enum value cannot be an empty string for key: {key}")
    if entry.index is not None and entry.index < 0:
      raise NegativeIndexError(f"Enum index cannot be less than zero for key: {key}")
    if key in seen_keys:
      raise DuplicateKeyError(f"Duplicate key '{key}' in enum map")
    seen_keys.add(key)

    if entry.index is not None:
      if entry.index in index_owner:
        raise DuplicateIndexError(
          f"Duplicate index {entry.index} in enum map: '{key}' conflicts with '{index_owner[entry.index]}'"
        )
      index_owner[entry.index] = key

  explicit: List[Optional[int]] = [entry.index for _, entry in entries]
  indices = allocate_indices(explicit)

  return [ResolvedEntry(key, entry.value, idx) for (key, entry), idx in zip(entries, indices)]


def validate_values(values: Sequence[str]) -> List[str]:
  """
  Checks a list-mode definition for case-insensitive duplicates.

  The whole list is scanned before any per-entry validation, so ``["", ""]``
  reports a duplicate rather than an empty key.

  Args:
      values (Sequence[str]): Raw list-mode values.

  Returns:
      List[str]: The values, unchanged, as a list.

  Raises:
      InvalidDefinitionError: An element is not a string, or the input is a bare string.
      DuplicateValueError: Two values are equal ignoring case. The message
          reports the later occurrence as written.
  """
  if isinstance(values, (str, bytes)):
    raise InvalidDefinitionError("List-mode definitions must be a sequence of strings, not a single string")

  folded = set()
  result: List[str] = []
  for value in values:
    if not isinstance(value, str):
      raise InvalidDefinitionError(f"List-mode values must be strings, got {type(value).__name__}: {value!r}")
    marker = value.upper()
    if marker in folded:
      raise DuplicateValueError(
        f"Duplicate value '{value}' in enum array. Values must be unique (case-insensitive)."
      )
    folded.add(marker)
    result.append(value)

  return result

"""
Pydantic schema for enum definitions.

Map-mode definitions are declared as ``{"KEY": {"value": "...", "index": 0}}``.
Each entry is normalized into an `EnumEntry` before validation so that
malformed shapes (missing value, wrong types, unknown fields) are rejected
up-front with a single error type.
"""

from typing import Any, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from safe_enum.errors import InvalidDefinitionError


class EnumEntry(BaseModel):
  """
  One declared member, before its index is resolved.
  """

  model_config = ConfigDict(frozen=True, extra="forbid")

  value: StrictStr = Field(..., description="The string value of the member (e.g. 'pending').")
  index: Optional[StrictInt] = Field(None, description="Explicit index. Auto-assigned when omitted.")


class ResolvedEntry(NamedTuple):
  """A validated member description with its final index."""

  key: str
  value: str
  index: int


EntryLike = Union[EnumEntry, Mapping[str, Any]]
MapDefinition = Union[Mapping[str, EntryLike], Iterable[Tuple[str, EntryLike]]]


def _coerce_entry(key: str, entry: Any) -> EnumEntry:
  if isinstance(entry, EnumEntry):
    return entry
  if not isinstance(entry, Mapping):
    raise InvalidDefinitionError(
      f"Invalid entry for key '{key}': expected a mapping with 'value' and optional 'index', "
      f"got {type(entry).__name__}"
    )
  try:
    return EnumEntry.model_validate(dict(entry))
  except ValidationError as e:
    raise InvalidDefinitionError(f"Invalid entry for key '{key}': {e}")


def normalize_map(definition: MapDefinition) -> List[Tuple[str, EnumEntry]]:
  """
  Converts a map-mode definition into an ordered list of ``(key, EnumEntry)``.

  Accepts either a mapping or an iterable of pairs. Only the pair form can
  express a repeated key; the repetition is preserved here and rejected by
  the validator.

  Args:
      definition (MapDefinition): The raw definition.

  Returns:
      List[Tuple[str, EnumEntry]]: Entries in declaration order.

  Raises:
      InvalidDefinitionError: If the definition or one of its entries is malformed.
  """
  if isinstance(definition, Mapping):
    items = list(definition.items())
  elif isinstance(definition, (str, bytes)):
    raise InvalidDefinitionError("Enum definition must be a mapping or a sequence of (key, entry) pairs")
  else:
    try:
      items = [tuple(pair) for pair in definition]
    except TypeError:
      raise InvalidDefinitionError("Enum definition must be a mapping or a sequence of (key, entry) pairs")

  normalized: List[Tuple[str, EnumEntry]] = []
  for pair in items:
    if len(pair) != 2:
      raise InvalidDefinitionError(f"Expected a (key, entry) pair, got {pair!r}")
    key, entry = pair
    if not isinstance(key, str):
      raise InvalidDefinitionError(f"Enum keys must be strings, got {type(key).__name__}: {key!r}")
    normalized.append((key, _coerce_entry(key, entry)))

  return normalized

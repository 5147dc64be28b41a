"""
The Safe Enum container.

`SafeEnum` is the object handed back by the factories. It owns the members,
the lookup tables and the family type tag, and it is frozen from the moment
`__init__` returns.

Members are exposed as attributes (``Status.PENDING``) and by subscription
(``Status["PENDING"]``). A key that names a container attribute, such as
``"keys"``, ``"values"``, ``"mode"`` or ``"type_tag"``, is only reachable by
subscription or `from_key`: ``Status.keys`` stays the method. Lookups by key,
value or index return ``None`` on a miss and report the valid options through a
warning log; the ``..._or_raise`` variants raise `EnumLookupError` with the same
text instead.
"""

import json
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from rich.table import Table

from safe_enum.config import SafeEnumConfig
from safe_enum.core.lookup import LookupIndex
from safe_enum.core.member import EnumMember
from safe_enum.core.messages import build_lookup_message
from safe_enum.enums import DefinitionMode, LookupKind
from safe_enum.errors import EnumLookupError, ImmutableMutationError
from safe_enum.utils.console import log_warning, plain
from safe_enum.utils.table import EnumTable

_MISSING = object()


def _is_index(candidate: Any) -> bool:
  return isinstance(candidate, int) and not isinstance(candidate, bool)


class SafeEnum:
  """
  Frozen, closed set of `EnumMember` objects sharing one type tag.

  Iteration yields members in declaration order; each call to `iter()` starts
  a fresh pass.
  """

  __slots__ = ("_type_tag", "_lookup", "_config", "_mode")

  def __init__(
    self,
    type_tag: str,
    members: Sequence[EnumMember],
    config: Optional[SafeEnumConfig] = None,
    mode: DefinitionMode = DefinitionMode.MAP,
  ):
    """
    Wraps already-validated members. Use `create_from_map` or
    `create_from_list` rather than calling this directly.

    Args:
        type_tag (str): Family tag shared by every member.
        members (Sequence[EnumMember]): Members in declaration order.
        config (Optional[SafeEnumConfig]): Diagnostic settings.
        mode (DefinitionMode): Input shape the members came from.
    """
    object.__setattr__(self, "_type_tag", type_tag)
    object.__setattr__(self, "_lookup", LookupIndex(members))
    object.__setattr__(self, "_config", config or SafeEnumConfig())
    object.__setattr__(self, "_mode", DefinitionMode(mode))

  # --- Immutability ---

  def __setattr__(self, name: str, value: Any) -> None:
    raise ImmutableMutationError(f"Cannot set '{name}' on enum {self._type_tag}: enums are immutable")

  def __delattr__(self, name: str) -> None:
    raise ImmutableMutationError(f"Cannot delete '{name}' on enum {self._type_tag}: enums are immutable")

  def __copy__(self) -> "SafeEnum":
    return self

  def __deepcopy__(self, memo: Dict[int, Any]) -> "SafeEnum":
    return self

  # --- Member access ---

  def __getattr__(self, name: str) -> EnumMember:
    # Only reached when normal attribute lookup fails, so container attributes
    # shadow members of the same name.
    if name.startswith("_"):
      raise AttributeError(name)
    member = self._lookup.by_key.get(name)
    if member is None:
      raise AttributeError(f"'{self._type_tag}' has no member '{name}'")
    return member

  def __getitem__(self, key: str) -> EnumMember:
    member = self._lookup.find(LookupKind.KEY, key)
    if member is None:
      raise KeyError(key)
    return member

  def __dir__(self) -> List[str]:
    return sorted(set(super().__dir__()) | set(self._lookup.by_key))

  def __iter__(self) -> Iterator[EnumMember]:
    return iter(self._lookup.members)

  def __len__(self) -> int:
    return len(self._lookup.members)

  def __contains__(self, candidate: Any) -> bool:
    return self.is_enum_value(candidate)

  def __repr__(self) -> str:
    return f"<SafeEnum {self._type_tag}: {', '.join(self.keys())}>"

  def __rich__(self) -> Table:
    return EnumTable(self).build()

  @property
  def type_tag(self) -> str:
    return self._type_tag

  @property
  def mode(self) -> DefinitionMode:
    return self._mode

  @property
  def config(self) -> SafeEnumConfig:
    return self._config

  # --- Collections ---

  def keys(self) -> List[str]:
    return [m.key for m in self._lookup.members]

  def values(self) -> List[str]:
    return [m.value for m in self._lookup.members]

  def indexes(self) -> List[int]:
    return [m.index for m in self._lookup.members]

  def entries(self) -> List[Tuple[str, EnumMember]]:
    """Ordered ``(key, member)`` pairs."""
    return [(m.key, m) for m in self._lookup.members]

  def all_members(self) -> List[EnumMember]:
    return list(self._lookup.members)

  get_keys = keys
  get_values = values
  get_indexes = indexes
  get_entries = entries

  # --- Lookups ---

  def _find(self, kind: LookupKind, attempted: Any) -> Optional[EnumMember]:
    member = self._lookup.find(kind, attempted)
    if member is None and self._config.log_lookup_misses:
      message = build_lookup_message(kind, attempted, self._lookup)
      log_warning(plain(f"{self._config.diagnostic_prefix} {message}"))
    return member

  def _find_or_raise(self, kind: LookupKind, attempted: Any) -> EnumMember:
    member = self._lookup.find(kind, attempted)
    if member is None:
      raise EnumLookupError(f"{self._config.diagnostic_prefix} {build_lookup_message(kind, attempted, self._lookup)}")
    return member

  def from_key(self, key: str) -> Optional[EnumMember]:
    """
    Finds the member declared under ``key``.

    Args:
        key (str): Member key (case-sensitive).

    Returns:
        Optional[EnumMember]: The member, or None (a warning lists the valid keys).
    """
    return self._find(LookupKind.KEY, key)

  def from_value(self, value: str) -> Optional[EnumMember]:
    """
    Finds the member holding ``value``.

    If several members share the value, the last declared one is returned.

    Args:
        value (str): Member value (case-sensitive).

    Returns:
        Optional[EnumMember]: The member, or None (a warning lists the valid values).
    """
    return self._find(LookupKind.VALUE, value)

  def from_index(self, index: int) -> Optional[EnumMember]:
    """
    Finds the member at ``index``.

    Args:
        index (int): Member index.

    Returns:
        Optional[EnumMember]: The member, or None (a warning lists the valid indices).
    """
    return self._find(LookupKind.INDEX, index)

  def from_key_or_raise(self, key: str) -> EnumMember:
    return self._find_or_raise(LookupKind.KEY, key)

  def from_value_or_raise(self, value: str) -> EnumMember:
    return self._find_or_raise(LookupKind.VALUE, value)

  def from_index_or_raise(self, index: int) -> EnumMember:
    return self._find_or_raise(LookupKind.INDEX, index)

  def has_key(self, key: str) -> bool:
    return self._lookup.contains(LookupKind.KEY, key)

  def has_value(self, value: str) -> bool:
    return self._lookup.contains(LookupKind.VALUE, value)

  def has_index(self, index: int) -> bool:
    return self._lookup.contains(LookupKind.INDEX, index)

  # --- Guards & comparison ---

  def is_enum_value(self, candidate: Any) -> bool:
    """
    Checks that ``candidate`` is a member of this enum.

    Structural checks (string key and value, integer index) come first, then
    the type tag must match this family and the key/value/index triple must
    equal the member registered under that key. Look-alike objects built
    elsewhere only pass if they agree on all four fields.

    Args:
        candidate (Any): Object to test.

    Returns:
        bool: True if ``candidate`` denotes a member of this enum.
    """
    if candidate is None:
      return False

    key = getattr(candidate, "key", _MISSING)
    value = getattr(candidate, "value", _MISSING)
    index = getattr(candidate, "index", _MISSING)

    if not isinstance(key, str) or not isinstance(value, str) or not _is_index(index):
      return False
    if getattr(candidate, "type_tag", _MISSING) != self._type_tag:
      return False

    registered = self._lookup.by_key.get(key)
    return registered is not None and registered.value == value and registered.index == index

  def is_equal(self, values: Any) -> bool:
    """
    Checks that every element carries the same ``value`` as the first one.

    Unlike `EnumMember.is_equal`, only the ``value`` field is compared; keys,
    indices and type tags are ignored.

    Args:
        values (Any): A list/tuple of members, or a single member.

    Returns:
        bool: False for None or an empty list.
    """
    if values is None:
      return False
    items = list(values) if isinstance(values, (list, tuple)) else [values]
    if not items:
      return False

    reference = getattr(items[0], "value", _MISSING)
    if reference is _MISSING:
      return False
    return all(getattr(item, "value", _MISSING) == reference for item in items)

  # --- Serialization ---

  def to_json(self) -> Dict[str, Any]:
    """
    Serializable form of the whole enum.

    Enums built with `create_from_list` serialize the same way as map-built
    ones; the shape does not record which factory was used.

    Returns:
        Dict[str, Any]: ``{"typeName": <type tag>, "values": [<member json>, ...]}``.
    """
    return {"typeName": self._type_tag, "values": [m.to_json() for m in self._lookup.members]}

  def to_json_string(self, indent: Optional[int] = None) -> str:
    """
    JSON text of `to_json`.

    Args:
        indent (Optional[int]): Pretty-print indentation. Compact when None.

    Returns:
        str: The encoded enum.
    """
    if indent is None:
      return json.dumps(self.to_json(), separators=(",", ":"))
    return json.dumps(self.to_json(), indent=indent)

"""
Reverse lookup tables.

Three dictionaries (key, value and index to member) are filled once, in
declaration order, and then sealed behind read-only mapping proxies. When a
later member repeats an earlier value, the later member takes the value slot;
both remain reachable by key.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from safe_enum.core.member import EnumMember
from safe_enum.enums import LookupKind
from safe_enum.errors import ImmutableMutationError


class LookupIndex:
  """
  O(1) lookup of members by key, value or index.

  Attributes:
      by_key (Mapping[str, EnumMember]): Key table.
      by_value (Mapping[str, EnumMember]): Value table (last declared wins).
      by_index (Mapping[int, EnumMember]): Index table.
  """

  __slots__ = ("_members", "by_key", "by_value", "by_index")

  def __init__(self, members: Iterable[EnumMember]):
    """
    Builds the tables.

    Args:
        members (Iterable[EnumMember]): Members in declaration order.
    """
    ordered: List[EnumMember] = []
    by_key: Dict[str, EnumMember] = {}
    by_value: Dict[str, EnumMember] = {}
    by_index: Dict[int, EnumMember] = {}

    for member in members:
      ordered.append(member)
      by_key[member.key] = member
      by_value[member.value] = member
      by_index[member.index] = member

    object.__setattr__(self, "_members", tuple(ordered))
    object.__setattr__(self, "by_key", MappingProxyType(by_key))
    object.__setattr__(self, "by_value", MappingProxyType(by_value))
    object.__setattr__(self, "by_index", MappingProxyType(by_index))

  def __setattr__(self, name: str, value: Any) -> None:
    raise ImmutableMutationError(f"Cannot set '{name}': lookup tables are immutable")

  def __delattr__(self, name: str) -> None:
    raise ImmutableMutationError(f"Cannot delete '{name}': lookup tables are immutable")

  @property
  def members(self) -> Tuple[EnumMember, ...]:
    """All members in declaration order, including those shadowed in the value table."""
    return self._members

  def table(self, kind: LookupKind) -> Mapping[Any, EnumMember]:
    kind = LookupKind(kind)
    if kind is LookupKind.KEY:
      return self.by_key
    if kind is LookupKind.VALUE:
      return self.by_value
    return self.by_index

  def find(self, kind: LookupKind, attempted: Any) -> Optional[EnumMember]:
    """
    Looks up a member. Never raises.

    Unhashable probes, and non-integer probes of the index table, are misses.

    Args:
        kind (LookupKind): Which table to query.
        attempted (Any): The key, value or index.

    Returns:
        Optional[EnumMember]: The member, or None.
    """
    kind = LookupKind(kind)
    if kind is LookupKind.INDEX and (isinstance(attempted, bool) or not isinstance(attempted, int)):
      return None
    try:
      return self.table(kind).get(attempted)
    except TypeError:
      return None

  def contains(self, kind: LookupKind, attempted: Any) -> bool:
    return self.find(kind, attempted) is not None

"""
Diagnostic text for failed lookups.

The builder is a pure function of the lookup kind, the attempted value and
the tables it was looked up in. It enumerates every valid option so the caller
can see at a glance what would have matched.
"""

from typing import TYPE_CHECKING, Any, List

from safe_enum.enums import LookupKind

if TYPE_CHECKING:
  from safe_enum.core.lookup import LookupIndex


def _quoted(items: List[Any]) -> str:
  return ", ".join(f"'{item}'" for item in items)


def build_lookup_message(kind: LookupKind, attempted: Any, lookup: "LookupIndex") -> str:
  """
  Formats the message describing a lookup miss.

  Args:
      kind (LookupKind): Which table was queried.
      attempted (Any): The key, value or index that was not found.
      lookup (LookupIndex): The tables of the enum being queried.

  Returns:
      str: e.g. ``No enum value with key 'X'. Valid keys are: 'A', 'B'``.
  """
  kind = LookupKind(kind)
  members = lookup.members

  if kind is LookupKind.KEY:
    valid = _quoted([m.key for m in members])
    return f"No enum value with key '{attempted}'. Valid keys are: {valid}"

  if kind is LookupKind.VALUE:
    # Collided values are listed once, in first-declared position.
    seen = list(dict.fromkeys(m.value for m in members))
    return f"No enum value with value '{attempted}'. Valid values are: {_quoted(seen)}"

  pairs = ", ".join(f"'{m.key}': {m.index}" for m in members)
  return f"No enum value with index {attempted}. Valid indices are: {pairs}"

"""
Index allocation for members declared without an explicit index.
"""

from typing import List, Optional, Sequence


def allocate_indices(explicit: Sequence[Optional[int]]) -> List[int]:
  """
  Resolves the final index of every member.

  Explicit indices are returned unchanged. Each missing index receives the
  lowest non-negative integer not already taken, scanning with a single cursor
  that only moves forward. Members are processed in declaration order, so for
  ``[10, None, 20]`` the result is ``[10, 0, 20]``.

  Collisions between explicit indices are the validator's concern and are
  assumed to have been rejected already.

  Args:
      explicit (Sequence[Optional[int]]): One entry per member, ``None`` where
          the index should be assigned.

  Returns:
      List[int]: The resolved indices, same length and order as the input.
  """
  used = {idx for idx in explicit if idx is not None}
  cursor = 0
  resolved: List[int] = []

  for idx in explicit:
    if idx is not None:
      resolved.append(idx)
      continue

    while cursor in used:
      cursor += 1
    resolved.append(cursor)
    used.add(cursor)
    cursor += 1

  return resolved

"""
Enum Member objects.

A member is a frozen pydantic model carrying ``key``, ``value``, ``index`` and
the ``type_tag`` of the family it belongs to. The tag is excluded from
serialization but takes part in every equality check, so two families that
happen to declare identical members never compare equal.
"""

from typing import Any, Dict, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from safe_enum.errors import ImmutableMutationError, MissingFieldError

_MISSING = object()


def _is_index(candidate: Any) -> bool:
  return isinstance(candidate, int) and not isinstance(candidate, bool)


class EnumMember(BaseModel):
  """
  One immutable constant of a safe enum.

  Attributes:
      key (str): Identifier, conventionally UPPER_SNAKE_CASE.
      value (str): The string value.
      index (int): Non-negative position, unique within the family.
      type_tag (str): Family discriminator. Not serialized.
  """

  model_config = ConfigDict(frozen=True, extra="forbid")

  key: StrictStr
  value: StrictStr
  index: StrictInt
  type_tag: StrictStr = Field(..., exclude=True, repr=False)

  def __setattr__(self, name: str, value: Any) -> None:
    raise ImmutableMutationError(
      f"Cannot set '{name}' on enum member {self.type_tag}.{self.key}: members are immutable"
    )

  def __delattr__(self, name: str) -> None:
    raise ImmutableMutationError(
      f"Cannot delete '{name}' on enum member {self.type_tag}.{self.key}: members are immutable"
    )

  def __str__(self) -> str:
    return f"{self.key}: {self.value}, index: {self.index}"

  def __repr__(self) -> str:
    return f"<{self.type_tag}.{self.key}: {self.value!r} (index {self.index})>"

  def has_value(self, value: str) -> bool:
    return self.value == value

  def has_key(self, key: str) -> bool:
    return self.key == key

  def has_index(self, index: int) -> bool:
    return _is_index(index) and self.index == index

  def _matches(self, item: Any) -> bool:
    if item is None:
      return False
    index = getattr(item, "index", _MISSING)
    return (
      getattr(item, "type_tag", _MISSING) == self.type_tag
      and getattr(item, "key", _MISSING) == self.key
      and getattr(item, "value", _MISSING) == self.value
      and _is_index(index)
      and index == self.index
    )

  def is_equal(self, other: Union["EnumMember", Sequence[Any], None]) -> bool:
    """
    Full identity comparison against one member or a list of members.

    Every element must match this member's type tag, key, value and index.
    ``None`` and an empty list never match.

    Args:
        other: A member, or a list/tuple of members.

    Returns:
        bool: True if all elements are this member.
    """
    if other is None:
      return False
    others = list(other) if isinstance(other, (list, tuple)) else [other]
    if not others:
      return False
    return all(self._matches(item) for item in others)

  def get_key_or_raise(self) -> str:
    """
    Returns the key, raising if it is absent.

    Raises:
        MissingFieldError: If the key is ``None`` or empty.
    """
    if self.key is None or self.key == "":
      raise MissingFieldError(f"Key is undefined for enum value: {self.value}")
    return self.key

  def get_value_or_raise(self) -> str:
    """
    Returns the value, raising if it is absent.

    Raises:
        MissingFieldError: If the value is ``None`` or empty.
    """
    if self.value is None or self.value == "":
      raise MissingFieldError(f"Value is undefined for enum key: {self.key}")
    return self.value

  def get_index_or_raise(self) -> int:
    """
    Returns the index, raising if it is absent. ``0`` is a valid index.

    Raises:
        MissingFieldError: If the index is ``None``.
    """
    if self.index is None:
      raise MissingFieldError(f"Index is undefined for enum key: {self.key}")
    return self.index

  def to_json(self) -> Dict[str, Any]:
    """
    Serializable form, without the type tag.

    Returns:
        Dict[str, Any]: ``{"key": ..., "value": ..., "index": ...}``.
    """
    return self.model_dump()

  def to_json_string(self) -> str:
    """
    Compact JSON text of `to_json`.

    Returns:
        str: e.g. ``{"key":"GET","value":"get","index":0}``.
    """
    return self.model_dump_json()


def make_member(key: str, value: str, index: int, type_tag: str) -> EnumMember:
  """
  Builds one frozen member from validated fields.

  Args:
      key (str): Member key.
      value (str): Member value.
      index (int): Resolved index.
      type_tag (str): Family tag shared by all members of the container.

  Returns:
      EnumMember: The immutable member.
  """
  return EnumMember(key=key, value=value, index=index, type_tag=type_tag)

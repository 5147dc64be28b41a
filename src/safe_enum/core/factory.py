"""
Enum factories.

The two public entry points. Both run the full pipeline synchronously:

1.  Normalize the definition (map mode) or check for duplicate values (list mode).
2.  Validate every entry and resolve missing indices.
3.  Build one frozen member per entry.
4.  Wrap the members in a frozen `SafeEnum`.

Any failure raises before step 3, so a partially built enum is never returned.
"""

from typing import Optional, Sequence

from safe_enum.config import SafeEnumConfig
from safe_enum.core.container import SafeEnum
from safe_enum.core.member import make_member
from safe_enum.core.schema import EnumEntry, MapDefinition, normalize_map
from safe_enum.core.validator import validate_definition, validate_values
from safe_enum.enums import DefinitionMode
from safe_enum.errors import InvalidDefinitionError


def _check_type_tag(type_tag: str) -> str:
  if not isinstance(type_tag, str) or not type_tag:
    raise InvalidDefinitionError(f"Enum type tag must be a non-empty string, got {type_tag!r}")
  return type_tag


def create_from_map(
  definition: MapDefinition,
  type_tag: str,
  config: Optional[SafeEnumConfig] = None,
) -> SafeEnum:
  """
  Creates a safe enum from a key -> ``{value, index?}`` definition.

  .. code-block:: python

      Status = create_from_map(
        {
          "PENDING": {"value": "pending", "index": 0},
          "APPROVED": {"value": "approved"},
        },
        "Status",
      )
      Status.APPROVED.index  # 1

  Duplicate values are allowed; `SafeEnum.from_value` returns the last member
  declared with that value.

  Args:
      definition (MapDefinition): Ordered mapping, or iterable of ``(key, entry)`` pairs.
      type_tag (str): Family name carried by every member.
      config (Optional[SafeEnumConfig]): Diagnostic settings. Defaults apply when None.

  Returns:
      SafeEnum: The frozen enum.

  Raises:
      EnumDefinitionError: If the definition is invalid (see `validate_definition`).
  """
  _check_type_tag(type_tag)
  resolved = validate_definition(normalize_map(definition))
  members = [make_member(entry.key, entry.value, entry.index, type_tag) for entry in resolved]
  return SafeEnum(type_tag, members, config=config, mode=DefinitionMode.MAP)


def create_from_list(
  values: Sequence[str],
  type_tag: str,
  config: Optional[SafeEnumConfig] = None,
) -> SafeEnum:
  """
  Creates a safe enum from a list of strings.

  Each string becomes a member with ``key = value.upper()`` and
  ``index = position``.

  .. code-block:: python

      Role = create_from_list(["admin", "user", "guest"], "Role")
      Role.USER.value  # "user"

  Args:
      values (Sequence[str]): Member values in declaration order.
      type_tag (str): Family name carried by every member.
      config (Optional[SafeEnumConfig]): Diagnostic settings. Defaults apply when None.

  Returns:
      SafeEnum: The frozen enum.

  Raises:
      DuplicateValueError: If two values are equal ignoring case.
      EnumDefinitionError: For any other invalid entry (e.g. an empty string).
  """
  _check_type_tag(type_tag)
  checked = validate_values(values)
  entries = [(value.upper(), EnumEntry(value=value, index=position)) for position, value in enumerate(checked)]
  resolved = validate_definition(entries)
  members = [make_member(entry.key, entry.value, entry.index, type_tag) for entry in resolved]
  return SafeEnum(type_tag, members, config=config, mode=DefinitionMode.LIST)

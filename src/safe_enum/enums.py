"""
Enumerations for safe-enum.

Yes, an enum library has a (native) enum of its own. These are internal
discriminators, not user-facing safe enums.
"""

from enum import Enum


class LookupKind(str, Enum):
  """
  The three reverse lookup tables held by every container.

  Used to route lookups and to select the wording of miss diagnostics.
  """

  KEY = "key"
  VALUE = "value"
  INDEX = "index"


class DefinitionMode(str, Enum):
  """
  Input shape a container was built from.
  """

  MAP = "map"  # key -> {value, index?}
  LIST = "list"  # [value, ...], key = value.upper()

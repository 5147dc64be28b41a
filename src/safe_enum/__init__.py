"""
safe-enum Package.

Closed, immutable enum sets built from a declarative definition. Every member
carries a unique key, a string value, a non-negative integer index and the
type tag of its family, and every enum offers O(1) reverse lookups.

Usage
-----

Map Definition
^^^^^^^^^^^^^^

.. code-block:: python

    import safe_enum

    HttpMethod = safe_enum.create_from_map(
      {
        "GET": {"value": "get", "index": 0},
        "POST": {"value": "post"},
      },
      "HttpMethod",
    )
    HttpMethod.POST.index                   # 1
    HttpMethod.from_value("get")            # <HttpMethod.GET: 'get' (index 0)>
    HttpMethod.from_value("patch")          # None, with a warning listing valid values

List Definition
^^^^^^^^^^^^^^^

.. code-block:: python

    Role = safe_enum.create_from_list(["admin", "user"], "Role")
    Role.ADMIN.value                        # "admin"
    Role.is_enum_value(HttpMethod.GET)      # False, different family
"""

from safe_enum.config import SafeEnumConfig
from safe_enum.core.container import SafeEnum
from safe_enum.core.factory import create_from_list, create_from_map
from safe_enum.core.member import EnumMember
from safe_enum.core.schema import EnumEntry
from safe_enum.errors import (
  DuplicateIndexError,
  DuplicateKeyError,
  DuplicateValueError,
  EmptyKeyError,
  EmptyValueError,
  EnumDefinitionError,
  EnumLookupError,
  ImmutableMutationError,
  InvalidDefinitionError,
  MissingFieldError,
  NegativeIndexError,
  SafeEnumError,
)

__version__ = "0.1.0"

__all__ = [
  "create_from_map",
  "create_from_list",
  "SafeEnum",
  "EnumMember",
  "EnumEntry",
  "SafeEnumConfig",
  "SafeEnumError",
  "EnumDefinitionError",
  "EmptyKeyError",
  "EmptyValueError",
  "NegativeIndexError",
  "DuplicateIndexError",
  "DuplicateValueError",
  "DuplicateKeyError",
  "InvalidDefinitionError",
  "MissingFieldError",
  "EnumLookupError",
  "ImmutableMutationError",
  "__version__",
]

"""
Tests for Lookup Tables and Miss Diagnostics.

Verifies:
1. O(1) tables are filled in declaration order with last-write-wins on values.
2. Lookups never raise, even for unhashable probes.
3. The message builder lists every valid option.
"""

import pytest

from safe_enum.core.lookup import LookupIndex
from safe_enum.core.member import make_member
from safe_enum.core.messages import build_lookup_message
from safe_enum.enums import LookupKind
from safe_enum.errors import ImmutableMutationError


@pytest.fixture
def lookup():
  return LookupIndex(
    [
      make_member("FOO", "foo", 0, "T"),
      make_member("BAR", "bar", 1, "T"),
      make_member("BAZ", "baz", 2, "T"),
    ]
  )


def test_find_each_kind(lookup):
  assert lookup.find(LookupKind.KEY, "BAR").key == "BAR"
  assert lookup.find(LookupKind.VALUE, "baz").key == "BAZ"
  assert lookup.find(LookupKind.INDEX, 0).key == "FOO"


def test_find_accepts_kind_strings(lookup):
  assert lookup.find("value", "foo").key == "FOO"


def test_misses_return_none(lookup):
  assert lookup.find(LookupKind.KEY, "NOPE") is None
  assert lookup.find(LookupKind.VALUE, "FOO") is None
  assert lookup.find(LookupKind.INDEX, 99) is None


def test_unhashable_probe_is_a_miss(lookup):
  assert lookup.find(LookupKind.KEY, ["FOO"]) is None


def test_index_probe_must_be_integer(lookup):
  assert lookup.find(LookupKind.INDEX, True) is None
  assert lookup.find(LookupKind.INDEX, 1.0) is None
  assert lookup.find(LookupKind.INDEX, "1") is None


def test_value_collision_last_write_wins():
  first = make_member("A", "x", 0, "T")
  second = make_member("B", "x", 1, "T")
  tables = LookupIndex([first, second])

  assert tables.by_value["x"] is second
  assert tables.by_key["A"] is first
  assert tables.members == (first, second)


def test_tables_are_read_only(lookup):
  with pytest.raises(TypeError):
    lookup.by_key["NEW"] = None
  with pytest.raises(ImmutableMutationError):
    lookup.by_key = {}


def test_message_for_key(lookup):
  message = build_lookup_message(LookupKind.KEY, "INVALID", lookup)
  assert message == "No enum value with key 'INVALID'. Valid keys are: 'FOO', 'BAR', 'BAZ'"


def test_message_for_value(lookup):
  message = build_lookup_message(LookupKind.VALUE, "invalid", lookup)
  assert message == "No enum value with value 'invalid'. Valid values are: 'foo', 'bar', 'baz'"


def test_message_for_index(lookup):
  message = build_lookup_message(LookupKind.INDEX, 999, lookup)
  assert message == "No enum value with index 999. Valid indices are: 'FOO': 0, 'BAR': 1, 'BAZ': 2"


def test_message_lists_collided_value_once():
  tables = LookupIndex([make_member("A", "x", 0, "T"), make_member("B", "x", 1, "T")])
  message = build_lookup_message(LookupKind.VALUE, "y", tables)
  assert message.endswith("Valid values are: 'x'")


def test_message_for_empty_enum():
  message = build_lookup_message(LookupKind.KEY, "A", LookupIndex([]))
  assert message == "No enum value with key 'A'. Valid keys are: "

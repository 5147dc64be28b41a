"""
Tests for Enum Member behaviour.

Verifies:
1. Field predicates and full-identity equality (including type tag).
2. `get_*_or_raise` accessors, with index 0 treated as present.
3. String and JSON renderings.
4. Immutability.
"""

import json
from types import SimpleNamespace

import pytest

from safe_enum import create_from_map
from safe_enum.core.member import EnumMember, make_member
from safe_enum.errors import ImmutableMutationError, MissingFieldError


def test_predicates(status_enum):
  foo = status_enum.FOO
  assert foo.has_value("foo")
  assert not foo.has_value("FOO")
  assert foo.has_key("FOO")
  assert not foo.has_key("foo")
  assert foo.has_index(0)
  assert not foo.has_index(1)


def test_is_equal_self(status_enum):
  assert status_enum.FOO.is_equal(status_enum.FOO)
  assert status_enum.FOO.is_equal([status_enum.FOO, status_enum.FOO])


def test_is_equal_rejects_others(status_enum):
  assert not status_enum.FOO.is_equal(status_enum.BAR)
  assert not status_enum.FOO.is_equal([status_enum.FOO, status_enum.BAR])
  assert not status_enum.FOO.is_equal(None)
  assert not status_enum.FOO.is_equal([None])


def test_is_equal_empty_list_is_false(status_enum):
  assert not status_enum.FOO.is_equal([])


def test_is_equal_across_families():
  """
  Scenario: Two families declare identical members.
  Expectation: Members never compare equal, the type tag differs.
  """
  first = create_from_map({"A": {"value": "a", "index": 0}}, "First")
  second = create_from_map({"A": {"value": "a", "index": 0}}, "Second")

  assert not first.A.is_equal(second.A)
  assert first.A != second.A


def test_is_equal_accepts_matching_look_alike(status_enum):
  twin = SimpleNamespace(key="FOO", value="foo", index=0, type_tag="TestEnum")
  assert status_enum.FOO.is_equal(twin)

  untagged = SimpleNamespace(key="FOO", value="foo", index=0)
  assert not status_enum.FOO.is_equal(untagged)


def test_get_or_raise_returns_fields(status_enum):
  foo = status_enum.FOO
  assert foo.get_key_or_raise() == "FOO"
  assert foo.get_value_or_raise() == "foo"
  assert foo.get_index_or_raise() == 0


def test_get_or_raise_missing_fields():
  broken = EnumMember.model_construct(key="", value="", index=None, type_tag="Broken")

  with pytest.raises(MissingFieldError):
    broken.get_key_or_raise()
  with pytest.raises(MissingFieldError):
    broken.get_value_or_raise()
  with pytest.raises(MissingFieldError):
    broken.get_index_or_raise()


def test_str_rendering(status_enum):
  assert str(status_enum.FOO) == "FOO: foo, index: 0"
  assert str(status_enum.BAZ) == "BAZ: baz, index: 2"


def test_repr_names_family(status_enum):
  assert repr(status_enum.BAR) == "<TestEnum.BAR: 'bar' (index 1)>"


def test_to_json_excludes_type_tag(status_enum):
  assert status_enum.FOO.to_json() == {"key": "FOO", "value": "foo", "index": 0}
  assert json.loads(status_enum.BAR.to_json_string()) == {"key": "BAR", "value": "bar", "index": 1}


def test_json_dumps_nested(status_enum):
  payload = json.dumps({"status": status_enum.FOO.to_json()})
  assert json.loads(payload) == {"status": {"key": "FOO", "value": "foo", "index": 0}}


@pytest.mark.parametrize("field", ["key", "value", "index", "type_tag", "extra"])
def test_members_reject_assignment(status_enum, field):
  with pytest.raises(ImmutableMutationError):
    setattr(status_enum.FOO, field, "changed")

  assert status_enum.FOO.key == "FOO"
  assert status_enum.FOO.value == "foo"


def test_members_reject_deletion(status_enum):
  with pytest.raises(ImmutableMutationError):
    del status_enum.FOO.value


def test_immutable_mutation_is_attribute_error(status_enum):
  with pytest.raises(AttributeError):
    status_enum.FOO.index = 5


def test_members_are_hashable(status_enum):
  lookup = {status_enum.FOO: "first", status_enum.BAR: "second"}
  assert lookup[status_enum.FOO] == "first"


def test_make_member():
  member = make_member("GET", "get", 0, "Http")
  assert (member.key, member.value, member.index, member.type_tag) == ("GET", "get", 0, "Http")

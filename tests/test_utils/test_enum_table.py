"""
Tests for Rich table rendering of enums.
"""

from rich.console import Console
from rich.table import Table

from safe_enum import create_from_list, create_from_map
from safe_enum.utils.table import EnumTable


def test_rows_in_declaration_order(http_protocol):
  rows = EnumTable(http_protocol).rows()
  assert rows[0] == ["GET", "GET", "0"]
  assert rows[-1] == ["DELETE", "DELETE", "3"]


def test_build_returns_titled_table(roles):
  table = EnumTable(roles).build()

  assert isinstance(table, Table)
  assert table.title == "Roles (3 members)"
  assert [c.header for c in table.columns] == ["Key", "Value", "Index"]
  assert table.row_count == 3


def test_container_renders_via_rich_protocol(roles):
  capture = Console(record=True, width=120)
  capture.print(roles)
  output = capture.export_text()

  assert "ADMIN" in output
  assert "guest" in output
  assert "Roles (3 members)" in output


def test_brackets_are_rendered_literally():
  odd = create_from_map({"TAG": {"value": "[bold]"}}, "Odd")
  capture = Console(record=True, width=120)
  capture.print(odd)

  assert "[bold]" in capture.export_text()


def test_empty_enum_table():
  table = EnumTable(create_from_list([], "Nothing")).build()
  assert table.row_count == 0

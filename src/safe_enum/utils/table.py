"""
Rich table rendering for enums.

Presents the members of a `SafeEnum` as a three column table
(Key / Value / Index). Containers use this for their ``__rich__`` hook, so
``console.print(Status)`` shows the table directly.
"""

from typing import TYPE_CHECKING, List

from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
  from safe_enum.core.container import SafeEnum


class EnumTable:
  """
  Builds the tabular view of one enum.
  """

  def __init__(self, enum: "SafeEnum"):
    """
    Args:
        enum (SafeEnum): The enum to render.
    """
    self.enum = enum

  def rows(self) -> List[List[str]]:
    """
    Row data in declaration order, as strings.

    Returns:
        List[List[str]]: ``[key, value, index]`` per member.
    """
    return [[m.key, m.value, str(m.index)] for m in self.enum]

  def build(self) -> Table:
    """
    Creates the Rich Table.

    Cells are wrapped in `Text` so brackets in keys or values are not parsed
    as markup.

    Returns:
        Table: Renderable table titled with the type tag.
    """
    table = Table(title=f"{self.enum.type_tag} ({len(self.enum)} members)")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")
    table.add_column("Index", justify="right")

    for row in self.rows():
      table.add_row(*(Text(cell) for cell in row))

    return table

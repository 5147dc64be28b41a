"""
Command handlers for the safe-enum CLI.

Definition files are JSON. An object is read as a map definition
(``{"KEY": {"value": "...", "index": 0}}``), an array as a list definition
(``["pending", "done"]``).
"""

import json
from pathlib import Path
from typing import Optional

from safe_enum.config import SafeEnumConfig
from safe_enum.core.container import SafeEnum
from safe_enum.core.factory import create_from_list, create_from_map
from safe_enum.errors import EnumDefinitionError, InvalidDefinitionError
from safe_enum.utils.console import console, log_error, log_info, log_success, plain


def load_definition(path: Path, type_tag: Optional[str] = None, config: Optional[SafeEnumConfig] = None) -> SafeEnum:
  """
  Reads a JSON definition file and builds the enum it describes.

  Args:
      path (Path): JSON file.
      type_tag (Optional[str]): Family tag. Defaults to the file stem.
      config (Optional[SafeEnumConfig]): Diagnostic settings for the built enum.

  Returns:
      SafeEnum: The constructed enum.

  Raises:
      OSError: If the file cannot be read.
      json.JSONDecodeError: If the file is not valid JSON.
      EnumDefinitionError: If the definition is rejected.
  """
  data = json.loads(path.read_text(encoding="utf-8"))
  tag = type_tag or path.stem

  if isinstance(data, dict):
    return create_from_map(data, tag, config=config)
  if isinstance(data, list):
    return create_from_list(data, tag, config=config)

  raise InvalidDefinitionError(f"Definition file must contain a JSON object or array, got {type(data).__name__}")


def _build(path: Path, type_tag: Optional[str]) -> Optional[SafeEnum]:
  if not path.exists():
    log_error(f"File not found: {plain(path)}")
    return None

  try:
    return load_definition(path, type_tag, config=SafeEnumConfig.load(search_path=path.parent))
  except (OSError, json.JSONDecodeError) as e:
    log_error(f"Could not read {plain(path)}: {plain(e)}")
  except EnumDefinitionError as e:
    log_error(f"Invalid definition in {plain(path)}: {plain(e)}")
  except ValueError as e:
    log_error(plain(e))
  return None


def handle_check(path: Path, type_tag: Optional[str] = None) -> int:
  """
  Validates a definition file.

  Args:
      path (Path): JSON definition file.
      type_tag (Optional[str]): Family tag override.

  Returns:
      int: 0 if the definition builds, 1 otherwise.
  """
  enum = _build(path, type_tag)
  if enum is None:
    return 1

  log_success(f"{plain(enum.type_tag)}: {len(enum)} members ({enum.mode.value} definition)")
  return 0


def handle_show(path: Path, type_tag: Optional[str] = None, as_json: bool = False) -> int:
  """
  Prints the members of a definition file.

  Args:
      path (Path): JSON definition file.
      type_tag (Optional[str]): Family tag override.
      as_json (bool): Emit the enum JSON instead of a table.

  Returns:
      int: 0 on success, 1 if the definition could not be built.
  """
  enum = _build(path, type_tag)
  if enum is None:
    return 1

  if as_json:
    console.print_json(enum.to_json_string())
    return 0

  if len(enum) == 0:
    log_info(f"{plain(enum.type_tag)} has no members.")
  console.print(enum)
  return 0

"""
Runtime Configuration Store.

Settings only affect diagnostics. They never change which definitions are
accepted or what a lookup returns.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class SafeEnumConfig(BaseModel):
  """
  Configuration container for enum factories.
  """

  model_config = ConfigDict(frozen=True, extra="forbid")

  log_lookup_misses: bool = Field(True, description="If True, failed lookups emit a warning log with valid options.")
  diagnostic_prefix: str = Field("[SafeEnum]", description="Text prepended to every lookup-miss diagnostic.")

  @classmethod
  def load(
    cls,
    log_lookup_misses: Optional[bool] = None,
    diagnostic_prefix: Optional[str] = None,
    search_path: Optional[Path] = None,
  ) -> "SafeEnumConfig":
    """
    Loads configuration from pyproject.toml and overrides with explicit arguments.

    Args:
        log_lookup_misses (Optional[bool]): Override for miss logging.
        diagnostic_prefix (Optional[str]): Override for the diagnostic prefix.
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        SafeEnumConfig: The fully resolved configuration object.

    Raises:
        ValueError: If the merged settings fail validation.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = dict(toml_config)
    if log_lookup_misses is not None:
      merged["log_lookup_misses"] = log_lookup_misses
    if diagnostic_prefix is not None:
      merged["diagnostic_prefix"] = diagnostic_prefix

    try:
      return cls.model_validate(merged)
    except ValidationError as e:
      raise ValueError(f"safe-enum configuration validation failed: {e}")


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Recursively searches parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory definition was found in.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("safe_enum", {}), parent

  return {}, None

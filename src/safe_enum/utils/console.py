"""
Diagnostics output for safe-enum.

Lookup misses and CLI messages go through the ``safe_enum`` logger, never
the root logger, so a host application keeps control over filtering and
routing. Importing the package installs no handler and changes no level.

Rich formatting is opt-in: `set_console` (or `enable_console_logging`, which
the CLI calls) attaches a `RichHandler` to the ``safe_enum`` logger that
writes to the chosen Console.

Attributes:
    logger (logging.Logger): The package logger.
    console (_ConsoleProxy): Stable reference to the active Rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.theme import Theme

logger = logging.getLogger("safe_enum")

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme({"logging.level.success": "green"})


class _ConsoleProxy:
  """
  Holds the Console used for tables, JSON and (once attached) log records.

  Modules import the proxy once; the Console behind it can be swapped later.

  Attributes:
      _backend (Console): The active Rich Console instance.
      _handler (Optional[RichHandler]): Handler attached to `logger`, if any.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._handler = None

  def set_backend(self, new_console: Console) -> None:
    """
    Swaps the Console and routes package log records to it.

    Args:
        new_console (Console): The Rich Console to write to.
    """
    self._backend = new_console
    self.attach_handler()

  def reset(self) -> None:
    """Detaches the handler and starts over with a stdout Console."""
    self.detach_handler()
    self._backend = Console(theme=_THEME)

  @property
  def backend(self) -> Console:
    return self._backend

  def attach_handler(self) -> None:
    """
    Attaches a `RichHandler` for the current Console to the package logger.

    Any handler attached earlier is replaced. The package logger is set to
    INFO so CLI success and info lines are shown.
    """
    self.detach_handler()
    self._handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )
    logger.addHandler(self._handler)
    logger.setLevel(logging.INFO)

  def detach_handler(self) -> None:
    if self._handler is not None:
      logger.removeHandler(self._handler)
      self._handler = None
    logger.setLevel(logging.NOTSET)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def print_json(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print_json(*args, **kwargs)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Sends package output and package log records to `new_console`.

  Args:
      new_console (Console): The configured Rich console.
  """
  console.set_backend(new_console)


def enable_console_logging() -> None:
  """Routes package log records to the current Console (used by the CLI)."""
  console.attach_handler()


def reset_console() -> None:
  """Removes the package handler and restores a stdout Console."""
  console.reset()


def get_console() -> Console:
  """
  Retrieves the currently active console backend.

  Returns:
      Console: The active Rich Console.
  """
  return console.backend


def log_info(msg: str) -> None:
  """
  Logs an informational line on the package logger.

  Args:
      msg (str): Message text, may contain rich markup.
  """
  logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  """
  Logs a warning on the package logger. Lookup misses use this.

  Args:
      msg (str): Message text, may contain rich markup.
  """
  logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  logger.error(f"❌ {msg}", extra={"markup": True})


def plain(text: Any) -> str:
  """
  Escapes user-supplied text so rich does not interpret brackets as markup.

  Enum keys and values are arbitrary strings; a value such as ``"[bold]"``
  must be logged literally.

  Args:
      text (Any): Value to render.

  Returns:
      str: Markup-safe string.
  """
  return escape(str(text))

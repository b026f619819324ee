"""Debug logging utility.

Lines go to the debug log file only: stderr carries the interactive
frames while a prompt is running.
"""

from datetime import datetime

from selectprompt.utils.config import Config, get_selectprompt_dir

_config = None


def _get_config() -> Config:
    """Get cached config instance."""
    global _config
    if _config is None:
        _config = Config(get_selectprompt_dir())
    return _config


def reload_config():
    """Reload config (call after debug mode changes)."""
    global _config
    _config = None


def _log_to_file(line: str):
    """Append line to debug log file."""
    try:
        log_path = get_selectprompt_dir() / "debug.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a") as f:
            f.write(line + "\n")
    except OSError:
        pass


def _timestamp() -> str:
    return datetime.now().strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def debug(category: str, message: str, **kwargs):
    """Log debug message if debug mode is enabled.

    Args:
        category: Category like 'state', 'render', 'keys'
        message: Debug message
        **kwargs: Additional key=value pairs to log
    """
    config = _get_config()
    if not config.debug:
        return

    extras = " ".join(f"{k}={v}" for k, v in kwargs.items()) if kwargs else ""
    line = f"[selectprompt:{category}] {_timestamp()} {message}"
    if extras:
        line += f" | {extras}"

    _log_to_file(line)


def debug_state(message: str, **kwargs):
    """Log state machine debug message."""
    debug("state", message, **kwargs)


def debug_render(message: str, **kwargs):
    """Log render-related debug message."""
    debug("render", message, **kwargs)


def debug_keys(message: str, **kwargs):
    """Log key decoding debug message."""
    debug("keys", message, **kwargs)


def log_error(category: str, message: str, exc: Exception = None):
    """Log error message ALWAYS (even if debug mode is off).

    Args:
        category: Category like 'cli', 'prompt'
        message: Error message
        exc: Optional exception to include traceback
    """
    import traceback

    line = f"[selectprompt:{category}] {_timestamp()} ERROR: {message}"

    if exc:
        tb = traceback.format_exception(type(exc), exc, exc.__traceback__)
        line += "\n" + "".join(tb)

    _log_to_file(line)

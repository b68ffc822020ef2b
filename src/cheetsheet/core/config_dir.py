"""Config-directory resolution.

The cheatsheet directory is chosen in strict priority order:

1. an explicit override (``--config-dir``), returned verbatim;
2. ``$XDG_CONFIG_HOME/cheetsheet`` when the variable is set and non-empty;
3. ``~/.config/cheetsheet``.

This is the only module that reads the process environment.  Nothing
here touches the filesystem: a directory that does not exist yet is
still a valid answer, and missing sheets are reported by the store.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from cheetsheet.exceptions import ConfigDirUnavailableError

logger = logging.getLogger(__name__)

APP_DIR_NAME: str = "cheetsheet"
XDG_CONFIG_HOME_VAR: str = "XDG_CONFIG_HOME"


def resolve_config_dir(
    override: str | os.PathLike[str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the directory to search for cheatsheets.

    Parameters
    ----------
    override:
        Explicit directory.  Used as-is when non-empty.
    environ:
        Environment mapping to consult.  Defaults to :data:`os.environ`.

    Raises
    ------
    ConfigDirUnavailableError
        If neither an override nor ``XDG_CONFIG_HOME`` is available and
        the home directory cannot be determined.
    """
    if override is not None and os.fspath(override):
        logger.debug("Using config dir override: %s", override)
        return Path(override)

    env = os.environ if environ is None else environ

    xdg = env.get(XDG_CONFIG_HOME_VAR)
    if xdg:
        logger.debug("Using %s: %s", XDG_CONFIG_HOME_VAR, xdg)
        return Path(xdg) / APP_DIR_NAME

    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise ConfigDirUnavailableError(
            f"Cannot determine the cheatsheet directory: {exc}",
            hint=f"Pass --config-dir or set {XDG_CONFIG_HOME_VAR}.",
        ) from exc

    logger.debug("Using default config dir under home: %s", home)
    return home / ".config" / APP_DIR_NAME

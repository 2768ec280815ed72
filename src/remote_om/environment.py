"""Environment helpers for locating the OpenModelica installation."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

OPENMODELICAHOME = "OPENMODELICAHOME"
DEFAULT_OPENMODELICA_HOME = "/usr/"


def default_openmodelica_home() -> str:
    """Return the current `OPENMODELICAHOME`, or the default when unset."""
    return os.environ.get(OPENMODELICAHOME) or DEFAULT_OPENMODELICA_HOME


def configure_environment(home: str | None = None) -> str:
    """Set `OPENMODELICAHOME` to `home`, or to `/usr/` when not given.

    OMPython reads this variable to find the `omc` executable and the system
    libraries when a session is started. Returns the value that was set.
    """
    value = DEFAULT_OPENMODELICA_HOME if home is None else home
    logger.info("Setting environment for OpenModelica: %s=%s", OPENMODELICAHOME, value)
    os.environ[OPENMODELICAHOME] = value
    return value

"""
Application Identifier Resolution

Works out which application is running so loggers created without an
explicit subsystem are still attributed to it.
"""

from __future__ import annotations

import functools
import sys
from pathlib import Path

FALLBACK_SUBSYSTEM = "com.systemlogger.default"
DEFAULT_CATEGORY = "default"

# argv[0] values that do not name a script
_NON_SCRIPT_ARGV = {"", "-", "-c", "-m"}


def detect_application_identifier() -> str | None:
    """
    Inspect the running process for an application identifier.

    Checks, in order:
    1. The top-level package of the ``__main__`` module's import spec
       (``python -m myapp.server`` -> ``myapp``)
    2. The stem of ``sys.argv[0]`` when it names a script
       (``/usr/local/bin/myapp`` -> ``myapp``)

    Returns:
        The identifier, or None if neither source yields one
    """
    main_module = sys.modules.get("__main__")
    spec = getattr(main_module, "__spec__", None)
    spec_name = getattr(spec, "name", None)
    if spec_name:
        package = spec_name.partition(".")[0]
        if package and package != "__main__":
            return package

    argv = getattr(sys, "argv", None) or [""]
    script = argv[0]
    if script not in _NON_SCRIPT_ARGV:
        stem = Path(script).stem
        if stem:
            return stem

    return None


@functools.lru_cache(maxsize=1)
def application_identifier() -> str | None:
    """Cached detect_application_identifier(); resolved once per process."""
    return detect_application_identifier()


def resolve_subsystem(subsystem: str | None = None) -> str:
    """
    Pick the subsystem for a new logger.

    Args:
        subsystem: Explicit subsystem; None or empty means "not given"

    Returns:
        The explicit subsystem, else the application identifier,
        else FALLBACK_SUBSYSTEM
    """
    if subsystem:
        return subsystem
    return application_identifier() or FALLBACK_SUBSYSTEM

"""Self-deleting shell scripts used to start desktop entry commands."""

from __future__ import annotations

import os
import tempfile

from deskscan.core.logger import get_logger

_log = get_logger("run_script")


def run_script(command: str) -> str:
    """Write a temporary /bin/sh script that removes itself and execs *command*.

    Returns the path of the executable script.
    """
    fd, path = tempfile.mkstemp(prefix="run-")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write("#!/bin/sh\n")
            f.write(f"rm {path}\n")
            f.write(f"exec {command}\n")
        os.chmod(path, 0o744)
    except OSError:
        try:
            os.unlink(path)
        except OSError:
            pass
        raise

    _log.debug("Run script %s: %s", path, command)
    return path

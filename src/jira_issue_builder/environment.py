"""Describe the host the process runs on, for the issue environment field."""

from __future__ import annotations

import getpass
import os
import platform
import socket
import sys


def _user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "unknown"


def describe_server() -> str:
    """Return a short multi-line description of the current host and process."""

    lines = [
        f"Working directory: {os.getcwd()}",
        f"Host: {socket.gethostname()}",
        f"User: {_user()}",
        f"Platform: {platform.platform()}",
        f"Python: {platform.python_implementation()} {platform.python_version()}",
        f"Executable: {sys.executable}",
        f"Process id: {os.getpid()}",
    ]
    return "\n".join(lines)

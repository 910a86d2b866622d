"""Execution guard: the generator only runs as a command-line batch job."""

import sys
from typing import Optional


class BrowserEnvironmentError(RuntimeError):
    """Raised when the generator is loaded inside a browser-hosted interpreter."""
    pass


# Modules that only exist when Python runs inside a web page (Pyodide / PyScript)
_BROWSER_MODULES = ("pyodide", "js", "pyscript")


def detect_browser_environment() -> Optional[str]:
    """Return a short description of the browser host, or None for a normal CLI."""
    if sys.platform == "emscripten":
        return "emscripten"
    for name in _BROWSER_MODULES:
        if name in sys.modules:
            return name
    return None


def ensure_cli_environment() -> None:
    """
    Refuse to run in a browser-like environment.

    Raises:
        BrowserEnvironmentError: If a browser host is detected
    """
    host = detect_browser_environment()
    if host is not None:
        raise BrowserEnvironmentError(
            f"This tool is CLI-only. Do not load it in a browser (detected: {host})."
        )

"""System clipboard access through platform copy tools.

Copying is the one operation that can fail at the boundary (no tool installed,
no display, permission denied). Failures are logged and reported as ``False``.
"""

import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)

# Candidate commands in lookup order: macOS, Windows, Wayland, X11
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["clip"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
]


def detect_clipboard_command() -> list[str] | None:
    """Return the first available copy command with its absolute path, or None."""
    for command in CLIPBOARD_COMMANDS:
        found = shutil.which(command[0])
        if found:
            return [found, *command[1:]]
    return None


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Returns:
        True if the copy tool accepted the text, False otherwise.
    """
    command = detect_clipboard_command()
    if command is None:
        logger.warning("No clipboard tool found (tried pbcopy, clip, wl-copy, xclip, xsel)")
        return False

    try:
        result = subprocess.run(
            command,
            input=text.encode("utf-8"),
            capture_output=True,
            timeout=10,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning("Clipboard copy failed: %s", e)
        return False

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        logger.warning("Clipboard copy failed (%s): %s", command[0], stderr)
        return False

    logger.debug("Copied %d characters to clipboard", len(text))
    return True

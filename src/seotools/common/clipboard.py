"""Best-effort copy to the system clipboard via the platform's clipboard command."""
from __future__ import annotations
import logging
import shutil
import subprocess

LOGGER = logging.getLogger("seotools.clipboard")

CANDIDATES: tuple[list[str], ...] = (
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
)

def copy_to_clipboard(text: str) -> bool:
    """Copy text; returns False (and logs) instead of raising on failure."""
    for cmd in CANDIDATES:
        if shutil.which(cmd[0]) is None:
            continue
        try:
            subprocess.run(cmd, input=text.encode("utf-8"), check=True, timeout=5)
            return True
        except (OSError, subprocess.SubprocessError) as e:
            LOGGER.warning("Failed to copy with %s: %s", cmd[0], e)
            return False
    LOGGER.warning("Failed to copy: no clipboard command found")
    return False

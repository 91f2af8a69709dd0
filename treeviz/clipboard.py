"""Best-effort system clipboard copy."""

from __future__ import annotations

import logging

import pyperclip

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> bool:
    """Copy ``text`` to the clipboard; log and return ``False`` on failure."""
    try:
        pyperclip.copy(text)
    except (pyperclip.PyperclipException, UnicodeError) as exc:
        logger.warning("Could not copy to clipboard: %s", exc)
        return False
    return True

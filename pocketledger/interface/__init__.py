"""Mini README: Terminal interface for PocketLedger.

Exposes ``MenuSession``, the interactive menu that owns a ledger for the
duration of one session, and the text formatting helpers it renders with.
"""

from .menu import MenuSession

__all__ = ["MenuSession"]

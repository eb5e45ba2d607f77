"""Calling-convention adapters for embedding hosts."""

from .host import MODULE_NAME, chdir, open_module

__all__ = ["MODULE_NAME", "chdir", "open_module"]

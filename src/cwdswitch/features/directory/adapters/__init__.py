"""Adapters satisfying directory feature ports."""

from .os_gateway import LocalWorkingDirectoryGateway

__all__ = ["LocalWorkingDirectoryGateway"]

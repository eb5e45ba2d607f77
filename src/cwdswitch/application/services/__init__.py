"""Application services."""

from .directory_service import PROCESS_DIRECTORY_LOCK, DirectoryService

__all__ = ["DirectoryService", "PROCESS_DIRECTORY_LOCK"]

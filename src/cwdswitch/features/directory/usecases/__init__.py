# Where: cwdswitch.features.directory.usecases.__init__
# What: Re-export the changer, its port, and the scoped helpers.
# Why: Keep adapter and application imports short.

from .change_directory import DirectoryChanger
from .ports import WorkingDirectoryGateway
from .scope import run_in_directory, switched_directory

__all__ = ["DirectoryChanger", "WorkingDirectoryGateway", "run_in_directory", "switched_directory"]

"""Mini README: Export subsystem writing files for later build stages."""

from .path_files import MAP_PATHS_FILENAME, PACKAGE_PATH_FILENAME, PathFileEmitter

__all__ = ["MAP_PATHS_FILENAME", "PACKAGE_PATH_FILENAME", "PathFileEmitter"]

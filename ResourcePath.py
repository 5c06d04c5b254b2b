import os
import sys


def get_executable_dir() -> str:
    """Get the directory holding the script or frozen executable"""
    if getattr(sys, 'frozen', False):
        # Running as compiled executable
        return os.path.dirname(sys.executable)
    else:
        # Running as script
        return os.path.dirname(os.path.abspath(__file__))


def resource_path(relative_path: str) -> str:
    """ Resolve a data directory next to the tool; absolute paths pass through """
    if os.path.isabs(relative_path):
        return relative_path
    return os.path.join(get_executable_dir(), relative_path)

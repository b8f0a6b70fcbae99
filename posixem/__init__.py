"""Portable helpers modelled on Unix calls: an atomic counter, directory reading, host names and glob."""

__version__ = "0.1.0"
__all__ = ["atomic", "dirent", "hostname", "globtypes", "globbing"]
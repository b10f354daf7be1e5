"""tmexclude - exclude dependency directories from Time Machine backups."""

__version__ = "0.1.0"

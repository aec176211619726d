from __future__ import annotations


class ConfigurationError(ValueError):
    """A repository reference cannot be handled with the given setup

    Raised when no VCS backend matches a reference, or an unknown
    repository kind was requested. Nothing is attempted before this
    error is raised.
    """


class FilesystemError(OSError):
    """A filesystem precondition for a VCS operation could not be met

    Typically, the parent directory of a working copy could not be created.
    ``errno`` and ``filename`` are set like for any ``OSError``.
    """

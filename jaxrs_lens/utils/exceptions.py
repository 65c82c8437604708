"""
jaxrs_lens/utils/exceptions.py

Custom exceptions for the project.
"""


class JaxRsLensError(Exception):
    """
    Base class for errors raised by jaxrs_lens.
    """
    pass


class ModelAccessError(JaxRsLensError):
    """
    Exception raised when the source model cannot be introspected,
    e.g. a handle that went stale after its compilation unit was edited.
    """
    pass


class UnsupportedLanguageError(JaxRsLensError, ValueError):
    """
    Exception raised when no analyzer exists for the requested language.
    """
    pass

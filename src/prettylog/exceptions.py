"""
Exceptions raised by prettylog
"""


class PrettyLogError(Exception):
    """Base class for prettylog errors"""


class AlreadyInitializedError(PrettyLogError):
    """Raised when a handler has already been installed for this process"""

    def __init__(self, message: str = "a prettylog handler is already installed"):
        super().__init__(message)


class TimeSourceError(PrettyLogError, OSError):
    """Raised when a time source cannot read its clock"""

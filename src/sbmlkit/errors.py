"""
Exceptions raised by the SBML object model.

Mutators validate their input before touching any state, so an object that
raised one of these is left exactly as it was.
"""


class SBMLError(Exception):
    """Base class for every error raised by sbmlkit."""


class SBMLConstructorError(SBMLError, ValueError):
    """Raised when an element is built for an unsupported level/version."""


class InvalidAttributeValueError(SBMLError, ValueError):
    """Raised when a value does not match the attribute's syntax."""


class UnexpectedAttributeError(SBMLError):
    """Raised when an attribute does not exist in the element's level/version."""


class LevelMismatchError(SBMLError):
    pass


class VersionMismatchError(SBMLError):
    pass


class DuplicateIdError(SBMLError, ValueError):
    pass


class InvalidObjectError(SBMLError):
    """Raised when an element is incomplete for the requested operation."""


__all__ = [
    "SBMLError",
    "SBMLConstructorError",
    "InvalidAttributeValueError",
    "UnexpectedAttributeError",
    "LevelMismatchError",
    "VersionMismatchError",
    "DuplicateIdError",
    "InvalidObjectError",
]

"""
Exceptions raised by the descriptor family.

Classes:
    DescriptorError: Root of every descriptor exception.
    NotComputedError: ``extract`` was called before a successful ``compute``.
    InvalidInputError: A collaborator returned malformed pose or command data.
"""

from __future__ import annotations


class DescriptorError(Exception):
    """Base class for all descriptor errors."""


class NotComputedError(DescriptorError, RuntimeError):
    """Raised when features are requested before any successful ``compute``."""


class InvalidInputError(DescriptorError, ValueError):
    """Raised when the simulation or robot handle yields unusable data."""

"""Exceptions shared across layers"""


class CheckersError(Exception):
    """Top-level exception for anything raised by this package."""


class InvalidRequestError(CheckersError):
    """A request (click, move, payload) cannot be interpreted."""


class RemoteServiceError(CheckersError):
    """The remote game service could not be reached, or answered with something we cannot parse."""


class RepositoryError(CheckersError):
    """Storage of finished games failed."""

"""Defines all exceptions in the package."""


class GCBaseException(Exception):
    """Base class for all exceptions in the package"""


class GCInvalidArgument(GCBaseException):
    """Raised if an argument has an invalid type or value."""

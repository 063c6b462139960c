import importlib.metadata as metadata

from loguru import logger

logger.disable("geocoords")

__version__ = metadata.metadata("geocoords")["Version"]

from .coordinates import Coordinates
from .exceptions import GCBaseException, GCInvalidArgument

__all__ = (
    "Coordinates",
    "GCBaseException",
    "GCInvalidArgument",
)

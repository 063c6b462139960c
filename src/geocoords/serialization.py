"""Type-tagged serialization of geocoords models."""

import importlib
from typing import Any, Type

from pydantic import ValidationError

from geocoords.exceptions import GCInvalidArgument
from geocoords.models import GeoCoordsBaseModel

TYPE_METADATA = "__metadata__"


class SerializedTypeMetadata(GeoCoordsBaseModel):
    """Serializes information about a type so that it can be de-serialized."""

    module: str
    type: str


def serialize_value(obj: GeoCoordsBaseModel, *args, **kwargs) -> dict[str, Any]:
    """Serialize a geocoords object to a dictionary."""
    cls = type(obj)
    data = obj.model_dump(*args, mode="json", **kwargs)
    data[TYPE_METADATA] = SerializedTypeMetadata(
        module=cls.__module__,
        type=cls.__name__,
    ).model_dump()
    return data


def deserialize_type(metadata: SerializedTypeMetadata) -> Type:
    """Dynamically import the type and return it.

    Raises
    ------
    GCInvalidArgument
        Raised if the module cannot be imported or does not define the type.
    """
    try:
        mod = importlib.import_module(metadata.module)
        return getattr(mod, metadata.type)
    except (ImportError, AttributeError) as exc:
        msg = f"Cannot load serialized type {metadata.module}.{metadata.type}"
        raise GCInvalidArgument(msg) from exc


def deserialize_value(data: dict[str, Any]) -> Any:
    """Deserialize the value from a dictionary produced by :func:`serialize_value`."""
    fields = dict(data)
    raw_metadata = fields.pop(TYPE_METADATA, None)
    if raw_metadata is None:
        msg = f"Serialized data does not contain {TYPE_METADATA}"
        raise GCInvalidArgument(msg)

    try:
        metadata = SerializedTypeMetadata.model_validate(raw_metadata)
    except ValidationError as exc:
        msg = f"Malformed {TYPE_METADATA}: {raw_metadata!r}"
        raise GCInvalidArgument(msg) from exc

    ctype = deserialize_type(metadata)
    if not (isinstance(ctype, type) and issubclass(ctype, GeoCoordsBaseModel)):
        msg = f"{metadata.module}.{metadata.type} is not a geocoords model"
        raise GCInvalidArgument(msg)
    return ctype.model_validate(fields)

"""Base models for the package"""

from typing import Any

from pydantic import BaseModel, ConfigDict


def make_model_config(**kwargs: Any) -> ConfigDict:
    """Return a Pydantic config"""
    return ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        validate_default=True,
        extra="forbid",
        **kwargs,  # type: ignore
    )


class GeoCoordsBaseModel(BaseModel):
    """Base class for all geocoords models"""

    model_config = make_model_config()

    @classmethod
    def example(cls) -> "GeoCoordsBaseModel":
        """Return an example instance of the model.

        Raises
        ------
        NotImplementedError
            Raised if the model does not implement this method.
        """
        msg = f"{cls.__name__} does not implement example()"
        raise NotImplementedError(msg)

"""SOAP client value objects."""

from .params import Params, serialize_params, serialize_value

__all__ = [
    "Params",
    "serialize_params",
    "serialize_value",
]

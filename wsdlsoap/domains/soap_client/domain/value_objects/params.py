# ============================================================================
# SCOPE: DOMAIN LAYER (SOAP Client)
# Description: Call parameter serialization.
# ============================================================================
"""Call Parameters.

On the wire every parameter is a string. Callers may still pass typed
structures (pydantic models, dataclasses); they are flattened into a
``Params`` mapping at the protocol boundary.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

Params = dict[str, str]


def serialize_value(value: Any) -> str:
    """Serialize a scalar parameter value to its wire text.

    Args:
        value: Parameter value.

    Returns:
        String form; booleans are lowercased.

    Raises:
        TypeError: If the value is a container.
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (Mapping, list, tuple, set)):
        raise TypeError(f"Parameter values must be scalars, got {type(value).__name__}")
    return str(value)


def serialize_params(params: Any) -> Params:
    """Flatten a typed parameter structure into a ``Params`` mapping.

    Accepts a mapping, a pydantic model instance or a dataclass
    instance. ``None`` values are dropped; pydantic aliases are used as
    element names.

    Args:
        params: Parameter structure, or None for no parameters.

    Returns:
        Mapping of parameter name to wire text.

    Raises:
        TypeError: If the structure or one of its values is unsupported.
    """
    if params is None:
        return {}

    if isinstance(params, BaseModel):
        raw = params.model_dump(by_alias=True, exclude_none=True)
    elif dataclasses.is_dataclass(params) and not isinstance(params, type):
        raw = dataclasses.asdict(params)
    elif isinstance(params, Mapping):
        raw = dict(params)
    else:
        raise TypeError(f"Unsupported parameter structure: {type(params).__name__}")

    return {str(key): serialize_value(value) for key, value in raw.items() if value is not None}

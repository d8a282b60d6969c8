"""Structural serialization of DTOs.

Flat and nested dicts, JSON text, a stable human-readable dump, and an
opaque byte form that round-trips an instance without re-running
construction or validation.
"""

import gzip
import json
import pickle
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...config.settings import get_settings
from ..exceptions import DeserializationError, SerializationError
from .accessors import AccessorResolver
from .catalog import get_catalog

GZIP_PREFIX = b"GZIP:"


def _is_dto(value: Any) -> bool:
    from .base import Dto

    return isinstance(value, Dto)


def to_flat_dict(dto: Any) -> Dict[str, Any]:
    """Map every property name, in catalog order, to its stored value.

    Access control is bypassed and nested DTOs are left as objects.
    """
    resolver = AccessorResolver(get_catalog(type(dto)))
    return {
        descriptor.name: resolver.read_raw(dto, descriptor)
        for descriptor in resolver.catalog
    }


def _unwrap(value: Any) -> Any:
    if _is_dto(value):
        return to_nested_dict(value)
    if isinstance(value, dict):
        return {key: _unwrap(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_unwrap(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_unwrap(item) for item in value)
    return value


def to_nested_dict(dto: Any) -> Dict[str, Any]:
    """Like ``to_flat_dict`` but with nested DTOs replaced by their nested dicts."""
    return {name: _unwrap(value) for name, value in to_flat_dict(dto).items()}


class DtoJSONEncoder(json.JSONEncoder):
    """JSON encoder for DTOs and the value types they commonly carry."""

    def default(self, obj: Any) -> Any:
        if _is_dto(obj):
            return to_flat_dict(obj)
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, (datetime, date, time)):
            return obj.isoformat()
        if isinstance(obj, (UUID, Decimal)):
            return str(obj)
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        return super().default(obj)


def to_json(dto: Any, **kwargs: Any) -> str:
    """Encode a DTO's flat dict as compact JSON text."""
    options = {
        "cls": DtoJSONEncoder,
        "ensure_ascii": get_settings().json_ensure_ascii,
        "separators": (",", ":"),
    }
    options.update(kwargs)
    return json.dumps(to_flat_dict(dto), **options)


def _render(dto: Any, depth: int) -> List[str]:
    indent = "    " * (depth + 1)
    lines = [f"{type(dto).__name__} {{"]
    for name, value in to_flat_dict(dto).items():
        if _is_dto(value):
            nested = _render(value, depth + 1)
            lines.append(f"{indent}{name} => {nested[0]}")
            lines.extend(nested[1:])
        else:
            lines.append(f"{indent}{name} => {value!r}")
    lines.append("    " * depth + "}")
    return lines


def to_string(dto: Any) -> str:
    """Render a deterministic dump with one ``name => value`` line per property."""
    return "\n".join(_render(dto, 0))


class DtoSerializer:
    """Opaque byte serializer for DTO instances.

    Uses pickle, so instances come back exactly as stored: the constructor
    and property validators are not run again. Only deserialize data from
    trusted sources.
    """

    def __init__(
        self,
        protocol: Optional[int] = None,
        use_compression: Optional[bool] = None,
        compression_level: int = 6,
        compression_threshold: Optional[int] = None,
    ):
        settings = get_settings()
        if protocol is None or protocol < 0 or protocol > pickle.HIGHEST_PROTOCOL:
            protocol = settings.pickle_protocol

        self._protocol = protocol
        self._use_compression = (
            settings.serializer_compression if use_compression is None else use_compression
        )
        self._compression_level = max(1, min(9, compression_level))
        self._compression_threshold = max(0, (
            settings.serializer_compression_threshold
            if compression_threshold is None else compression_threshold
        ))

    def serialize(self, value: Any) -> bytes:
        """Serialize a DTO to bytes."""
        try:
            pickle_bytes = pickle.dumps(value, protocol=self._protocol)
        except (pickle.PickleError, TypeError, AttributeError) as e:
            raise SerializationError(
                f"Pickle serialization failed: {str(e)}",
                original_error=e,
                value_type=type(value).__name__,
            ) from e

        if self._use_compression and len(pickle_bytes) >= self._compression_threshold:
            compressed = GZIP_PREFIX + gzip.compress(pickle_bytes, compresslevel=self._compression_level)
            # Only use compression if it actually reduces size
            if len(compressed) < len(pickle_bytes):
                return compressed
        return pickle_bytes

    def deserialize(self, data: bytes) -> Any:
        """Deserialize bytes produced by ``serialize``."""
        try:
            if data.startswith(GZIP_PREFIX):
                pickle_bytes = gzip.decompress(data[len(GZIP_PREFIX):])
            else:
                pickle_bytes = data
            return pickle.loads(pickle_bytes)
        except (pickle.PickleError, EOFError, AttributeError, ImportError,
                IndexError, ValueError, gzip.BadGzipFile) as e:
            raise DeserializationError(
                f"Pickle deserialization failed: {str(e)}",
                original_error=e,
                data_size=len(data),
            ) from e

    def get_configuration(self) -> Dict[str, Any]:
        """Get current configuration."""
        return {
            "protocol": self._protocol,
            "use_compression": self._use_compression,
            "compression_level": self._compression_level,
            "compression_threshold": self._compression_threshold,
        }

"""Tests for DTO structural serialization and the byte serializer."""

import json
import pickle
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional
from uuid import UUID

import pytest

from ddd_commons.config import get_settings
from ddd_commons.core.dto import (
    Dto,
    DtoJSONEncoder,
    DtoSerializer,
    Property,
    to_flat_dict,
    to_nested_dict,
    to_string,
)
from ddd_commons.core.dto.serialization import GZIP_PREFIX
from ddd_commons.core.exceptions import DeserializationError, SerializationError


class Color(Enum):
    RED = "red"


class LineDto(Dto):
    sku = Property(str)
    quantity = Property(int, default=1)


class OrderDto(Dto):
    number = Property(str)
    lines = Property(Optional[List[Any]])
    primary = Property(Any)
    meta = Property(Any)


class TestStructuralConversion:
    """Test cases for dict and string conversion."""

    def test_flat_dict_keeps_nested_objects(self):
        line = LineDto({"sku": "A-1"})
        order = OrderDto({"number": "42", "primary": line})

        assert to_flat_dict(order)["primary"] is line

    def test_nested_dict_recurses_into_containers(self):
        first = LineDto({"sku": "A-1", "quantity": 2})
        second = LineDto({"sku": "B-2"})
        order = OrderDto({
            "number": "42",
            "lines": [first, second],
            "primary": first,
            "meta": {"pair": (second,), "plain": 1},
        })

        assert to_nested_dict(order) == {
            "number": "42",
            "lines": [
                {"sku": "A-1", "quantity": 2},
                {"sku": "B-2", "quantity": 1},
            ],
            "primary": {"sku": "A-1", "quantity": 2},
            "meta": {"pair": ({"sku": "B-2", "quantity": 1},), "plain": 1},
        }

    def test_to_string_nested(self):
        order = OrderDto({"number": "42", "primary": LineDto({"sku": "A-1"})})

        assert to_string(order) == (
            "OrderDto {\n"
            "    number => '42'\n"
            "    lines => None\n"
            "    primary => LineDto {\n"
            "        sku => 'A-1'\n"
            "        quantity => 1\n"
            "    }\n"
            "    meta => None\n"
            "}"
        )


class TestJsonEncoding:
    """Test cases for JSON output."""

    def test_encoder_handles_common_value_types(self):
        payload = {
            "color": Color.RED,
            "when": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
            "day": date(2024, 1, 2),
            "id": UUID("12345678-1234-5678-1234-567812345678"),
            "amount": Decimal("1.50"),
            "tags": {"only"},
        }

        decoded = json.loads(json.dumps(payload, cls=DtoJSONEncoder))

        assert decoded == {
            "color": "red",
            "when": "2024-01-02T03:04:05+00:00",
            "day": "2024-01-02",
            "id": "12345678-1234-5678-1234-567812345678",
            "amount": "1.50",
            "tags": ["only"],
        }

    def test_nested_dto_encoded_as_object(self):
        order = OrderDto({"number": "42", "primary": LineDto({"sku": "A-1"})})

        assert json.loads(order.to_json())["primary"] == {"sku": "A-1", "quantity": 1}

    def test_unknown_type_rejected(self):
        with pytest.raises(TypeError):
            json.dumps({"value": object()}, cls=DtoJSONEncoder)

    def test_unicode_kept_by_default(self):
        assert LineDto({"sku": "Ærø"}).to_json() == '{"sku":"Ærø","quantity":1}'

    def test_ensure_ascii_from_settings(self, monkeypatch):
        monkeypatch.setenv("DDD_COMMONS_JSON_ENSURE_ASCII", "true")
        get_settings.cache_clear()

        assert LineDto({"sku": "Ærø"}).to_json() == '{"sku":"\\u00c6r\\u00f8","quantity":1}'

    def test_keyword_overrides(self):
        text = LineDto({"sku": "A-1"}).to_json(indent=2, separators=(",", ": "))

        assert text == '{\n  "sku": "A-1",\n  "quantity": 1\n}'


class TestDtoSerializer:
    """Test cases for the opaque byte serializer."""

    def test_round_trip(self):
        serializer = DtoSerializer()
        order = OrderDto({"number": "42", "lines": [LineDto({"sku": "A-1"})]})

        restored = serializer.deserialize(serializer.serialize(order))

        assert restored == order
        assert restored.lines[0] == order.lines[0]

    def test_compression_used_when_smaller(self):
        serializer = DtoSerializer(use_compression=True, compression_threshold=0)
        order = OrderDto({"number": "x" * 5000})

        data = serializer.serialize(order)

        assert data.startswith(GZIP_PREFIX)
        assert serializer.deserialize(data) == order

    def test_small_payload_not_compressed(self):
        serializer = DtoSerializer(use_compression=True, compression_threshold=10_000)

        data = serializer.serialize(LineDto({"sku": "A-1"}))

        assert not data.startswith(GZIP_PREFIX)

    def test_compression_from_settings(self, monkeypatch):
        monkeypatch.setenv("DDD_COMMONS_SERIALIZER_COMPRESSION", "true")
        get_settings.cache_clear()

        assert DtoSerializer().get_configuration()["use_compression"] is True

    def test_configuration_defaults(self):
        config = DtoSerializer(protocol=99, compression_level=20).get_configuration()

        assert config == {
            "protocol": pickle.HIGHEST_PROTOCOL,
            "use_compression": False,
            "compression_level": 9,
            "compression_threshold": 1024,
        }

    def test_serialization_error(self):
        order = OrderDto({"number": "42", "meta": lambda: None})

        with pytest.raises(SerializationError) as exc_info:
            DtoSerializer().serialize(order)

        assert exc_info.value.details["value_type"] == "OrderDto"
        assert exc_info.value.original_error is exc_info.value.__cause__

    def test_deserialization_error(self):
        with pytest.raises(DeserializationError):
            DtoSerializer().deserialize(b"not a pickle")

    def test_corrupt_compressed_payload(self):
        with pytest.raises(DeserializationError):
            DtoSerializer().deserialize(GZIP_PREFIX + b"garbage")

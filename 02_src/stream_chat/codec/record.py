"""Extensible record codec.

An extensible record is a pydantic model with a fixed set of known fields plus
the extra keys pydantic keeps in ``model_extra`` (exposed as ``extra_data``).
Encoding flattens both parts into one JSON object; decoding splits such an
object back into the two parts.

Known fields always win: extra entries whose key is a known wire name never
reach the encoded document, and on decode every known wire name is consumed by
the schema whether or not it carried a value.
"""

import json
import re
from datetime import datetime
from typing import Annotated, Any, ClassVar, Mapping, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationError,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ..errors import InvalidArgument, MalformedDocument

R = TypeVar("R", bound="ExtensibleRecord")

# Servers emit up to nanosecond precision; datetime keeps microseconds.
_SUBMICRO = re.compile(r"(\.\d{6})\d+")


def _trim_fraction(value: Any) -> Any:
    if isinstance(value, str):
        return _SUBMICRO.sub(r"\1", value, count=1)
    return value


Timestamp = Annotated[datetime, BeforeValidator(_trim_fraction)]


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, bool, int, float)):
        return not value
    return False


class ExtensibleRecord(BaseModel):
    """Base for wire records with a fixed schema and free-form extra keys."""

    model_config = ConfigDict(
        extra="allow",
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    # Known fields the server fills in; not accepted by the constructor.
    server_fields: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, /, extra_data: Mapping[str, Any] | None = None, **data: Any):
        rejected = data.keys() & self.server_fields
        if rejected:
            raise TypeError(f"{', '.join(sorted(rejected))} is set by the server")
        super().__init__(**data)
        if extra_data:
            reserved = self.known_wire_names()
            self.__pydantic_extra__.update(
                (key, value) for key, value in extra_data.items() if key not in reserved
            )

    @property
    def extra_data(self) -> dict[str, Any]:
        """Wire keys outside the fixed schema."""
        return self.__pydantic_extra__

    @classmethod
    def known_wire_names(cls) -> frozenset[str]:
        """Wire names reserved by the fixed schema."""
        return frozenset(info.alias or name for name, info in cls.model_fields.items())

    @model_validator(mode="before")
    @classmethod
    def _null_is_zero_value(cls, data: Any) -> Any:
        # Wire null for a known field means its zero value.
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, info in cls.model_fields.items():
            key = info.alias or name
            if key in data and data[key] is None:
                if info.is_required():
                    data[key] = ""
                else:
                    del data[key]
        return data

    @model_serializer(mode="wrap")
    def _flatten(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        document = handler(self)
        extra = self.__pydantic_extra__ or {}
        for name, info in type(self).model_fields.items():
            key = info.alias or name
            if key in extra:
                # A colliding extra entry overwrote the field in the dump.
                document[key] = to_jsonable_python(getattr(self, name), by_alias=True)
            if not info.is_required() and _is_empty(document.get(key)):
                document.pop(key, None)
        return document

    def to_dict(self) -> dict[str, Any]:
        return encode(self)

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(encode(self), **kwargs)

    @classmethod
    def from_dict(cls: type[R], document: Mapping[str, Any]) -> R:
        return decode(cls, document)

    @classmethod
    def from_json(cls: type[R], data: str | bytes) -> R:
        return decode(cls, data)


def encode(record: ExtensibleRecord) -> dict[str, Any]:
    """Flatten a record's known fields and extra data into one JSON object."""
    if not isinstance(record, ExtensibleRecord):
        raise TypeError(f"{type(record).__name__} is not an extensible record")
    try:
        return record.model_dump(mode="json", by_alias=True)
    except PydanticSerializationError as e:
        raise InvalidArgument(f"{type(record).__name__} cannot be encoded: {e}") from e


def load_document(document: Any) -> dict[str, Any]:
    """Parse wire data into a flat mapping or raise MalformedDocument."""
    if isinstance(document, (str, bytes, bytearray)):
        try:
            document = json.loads(document)
        except ValueError as e:
            raise MalformedDocument(f"invalid JSON document: {e}") from e
    if not isinstance(document, Mapping):
        raise MalformedDocument(
            f"expected a JSON object, got {type(document).__name__}"
        )
    return dict(document)


def decode(cls: type[R], document: Any) -> R:
    """Split a wire document into the known fields of ``cls`` and extra data."""
    if not (isinstance(cls, type) and issubclass(cls, ExtensibleRecord)):
        raise TypeError(f"{cls!r} is not an extensible record")

    data = load_document(document)
    try:
        # Attribute names that differ from their wire name stay extra keys.
        return cls.model_validate(data, by_alias=True, by_name=False)
    except ValidationError as e:
        raise MalformedDocument(f"{cls.__name__}: {e}") from e

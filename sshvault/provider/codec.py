"""
Record codec — converts between Items and Bitwarden wire records.

Field data travels only through the ``notes`` key: the ordered field list is
serialized as JSON and base64-encoded. On creation the whole wire record is
base64-encoded once more and passed to ``bw create`` as a single argument.

List output is decoded in summary form (id and name only); only a single
record's notes are ever decoded into field values.
"""

from __future__ import annotations

import base64
import binascii

from pydantic import TypeAdapter, ValidationError

from sshvault.provider.errors import DecodeFailedError
from sshvault.provider.models import (
    LOGIN_TYPE,
    BitwardenItemIn,
    BitwardenItemOut,
    Field,
    Item,
)

ERR_PARSE_LIST = "cannot parse list"
ERR_PARSE_OUTPUT = "cannot parse output"
ERR_PARSE_NOTES = "cannot parse notes of item {name!r}"

_fields_adapter: TypeAdapter[list[Field] | None] = TypeAdapter(list[Field] | None)
_records_adapter: TypeAdapter[list[BitwardenItemOut]] = TypeAdapter(list[BitwardenItemOut])


def _first_error(e: ValidationError) -> str:
    errors = e.errors()
    return errors[0]["msg"] if errors else str(e)


# ─── Encode (write side) ─────────────────────────────────────────────────


def encode_values(values: tuple[Field, ...] | list[Field]) -> str:
    """Base64 of the compact JSON array of ``{"name", "value"}`` objects."""
    raw = _fields_adapter.dump_json(list(values))
    return base64.b64encode(raw).decode("ascii")


def build_item_record(item: Item, folder_id: str | None) -> BitwardenItemIn:
    # login carries the name so the entry is recognisable in the vault UI
    return BitwardenItemIn(
        id=None,
        type=LOGIN_TYPE,
        name=item.name,
        notes=encode_values(item.values),
        login=item.name,
        folderId=folder_id,
    )


def encode_item(item: Item, folder_id: str | None) -> str:
    """Payload for ``bw create item``."""
    return build_item_record(item, folder_id).encode()


def encode_folder(name: str) -> str:
    """Payload for ``bw create folder``: name only, no notes/login/folderId."""
    return BitwardenItemIn(name=name).encode()


# ─── Decode (read side) ──────────────────────────────────────────────────


def decode_wire_record(stdout: bytes | str) -> BitwardenItemOut:
    """Parse a single wire record as printed by ``bw get`` or ``bw create``."""
    try:
        return BitwardenItemOut.model_validate_json(stdout)
    except ValidationError as e:
        raise DecodeFailedError(ERR_PARSE_OUTPUT, _first_error(e)) from e


def decode_wire_records(stdout: bytes | str) -> list[BitwardenItemOut]:
    """Parse the JSON array printed by ``bw list``.

    A plain-text answer such as ``Not found.`` is a decode error, never an
    empty list.
    """
    try:
        return _records_adapter.validate_json(stdout)
    except ValidationError as e:
        raise DecodeFailedError(ERR_PARSE_LIST, _first_error(e)) from e


def decode_values(notes: str | None, name: str | None = None) -> list[Field]:
    """Decode a base64 notes payload into its ordered field list."""
    if not notes:
        return []

    stage = ERR_PARSE_NOTES.format(name=name or "")
    try:
        raw = base64.b64decode("".join(notes.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeFailedError(stage, str(e), name=name) from e

    try:
        values = _fields_adapter.validate_json(raw)
    except ValidationError as e:
        raise DecodeFailedError(stage, _first_error(e), name=name) from e
    return values or []


def decode_item(data: bytes | str | BitwardenItemOut) -> Item:
    """Full decode of one record: id, name and field values."""
    record = data if isinstance(data, BitwardenItemOut) else decode_wire_record(data)
    return Item(
        id=record.id,
        name=record.name,
        values=decode_values(record.notes, record.name),
    )


def summarize(record: BitwardenItemOut) -> Item:
    """Summary form of a record: values are left empty."""
    return Item(id=record.id, name=record.name)


def decode_items(stdout: bytes | str) -> list[Item]:
    """Decode ``bw list`` output into summary Items, keeping vault order."""
    return [summarize(record) for record in decode_wire_records(stdout)]

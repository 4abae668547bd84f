"""Provider data models: internal items and the Bitwarden wire records."""

from __future__ import annotations

import base64

from pydantic import BaseModel, ConfigDict

# Bitwarden object types passed to `bw get/list/create`.
FOLDER_OBJECT_TYPE = "folder"
ITEM_OBJECT_TYPE = "item"
ITEM_OBJECT_TYPE_PLURAL = "items"

# Bitwarden item type codes (the `type` key of a wire record).
FOLDER_TYPE = 0
LOGIN_TYPE = 1


class Field(BaseModel):
    """One named secret component of an item, e.g. ``private_key``."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class Bucket(BaseModel):
    """Reference to a grouping container an item belongs to."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str


class Item(BaseModel):
    """A managed secret (an SSH key pair) with an ordered list of fields.

    ``id`` stays None until the vault assigns one on creation.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str
    values: tuple[Field, ...] = ()
    bucket: Bucket | None = None

    def get_value(self, name: str) -> str | None:
        """Return the value of the first field called ``name``, or None."""
        for f in self.values:
            if f.name == name:
                return f.value
        return None


class GetOptions(BaseModel):
    name: str


class ListOptions(BaseModel):
    pass


class BitwardenItemIn(BaseModel):
    """Write-side wire record handed to ``bw create``.

    Key names and order mirror what the CLI expects; the JSON is emitted
    compact and in declaration order.
    """

    id: str | None = None
    type: int = FOLDER_TYPE
    name: str
    notes: str = ""
    login: str = ""
    folderId: str | None = None

    def encode(self) -> str:
        """Serialize to JSON and base64 the result, as ``bw create`` expects."""
        return base64.b64encode(self.model_dump_json().encode("utf-8")).decode("ascii")


class BitwardenItemOut(BaseModel):
    """Read-side wire record from ``bw get``/``bw list``. Extra keys are ignored."""

    id: str | None = None
    name: str
    notes: str | None = None

"""
Bitwarden provider — stores SSH keys as items of the Bitwarden CLI (``bw``).

Every public operation starts with a sync: ``bw sync`` refreshes the CLI's
local cache, then the well-known folder is looked up (and created on first
use). Its id is memoized on the instance and scopes all item commands.

The CLI must already be unlocked (``BW_SESSION`` in the environment).
"""

from __future__ import annotations

import logging

from sshvault.provider import codec
from sshvault.provider.base import Provider
from sshvault.provider.commander import Commander
from sshvault.provider.errors import (
    AlreadyExistsError,
    DecodeFailedError,
    ExecutionFailedError,
    NotFoundError,
)
from sshvault.provider.models import (
    FOLDER_OBJECT_TYPE,
    ITEM_OBJECT_TYPE,
    ITEM_OBJECT_TYPE_PLURAL,
    BitwardenItemOut,
    GetOptions,
    Item,
    ListOptions,
)

logger = logging.getLogger(__name__)

BITWARDEN_COMMAND = "bw"
BITWARDEN_FOLDER_NAME = "ssh-agent"

_NOT_FOUND_MARKER = "not found"
ERR_PARSE_CREATE_F = 'cannot parse output of create object "{object_type}" with name "{name}"'


def _is_not_found(text: str) -> bool:
    return text.strip().lower().startswith(_NOT_FOUND_MARKER)


class BitwardenProvider(Provider):
    """Provider backed by the Bitwarden CLI.

    Not safe for concurrent use: ``folder_id`` is set by every sync and
    ``add`` checks for duplicates before creating without any locking.
    """

    def __init__(
        self,
        commander: Commander | None = None,
        command: str = BITWARDEN_COMMAND,
        folder_name: str = BITWARDEN_FOLDER_NAME,
    ):
        self.commander = commander or Commander()
        self.command = command
        self.folder_name = folder_name
        self.folder_id: str | None = None

    @property
    def name(self) -> str:
        return BITWARDEN_COMMAND

    # ── Public operations ──────────────────────────────────────────────

    def list(self, options: ListOptions | None = None) -> list[Item]:
        """List key items in the folder. Values are not decoded."""
        self.sync()

        output = self.bw("list", ITEM_OBJECT_TYPE, "--folderid", self._folder_id())
        return codec.decode_items(output)

    def get(self, options: GetOptions) -> Item:
        """Find an item by exact, case-sensitive name and decode its fields.

        If the folder holds duplicates, the first one in list order wins.
        """
        return codec.decode_item(self._find_record(options.name))

    def add(self, item: Item) -> None:
        """Create ``item`` in the folder unless an item of that name exists.

        The existence check and the creation are separate CLI calls.
        """
        try:
            self._find_record(item.name)
        except NotFoundError:
            logger.debug("Item %r not in vault yet, creating it.", item.name)
        else:
            raise AlreadyExistsError(item.name)

        self.bw("create", ITEM_OBJECT_TYPE, codec.encode_item(item, self.folder_id))
        logger.info("Stored item %r in folder %r.", item.name, self.folder_name)

    def _find_record(self, name: str) -> BitwardenItemOut:
        """Sync, then return the first wire record called ``name`` without decoding its notes."""
        self.sync()

        output = self.bw("list", ITEM_OBJECT_TYPE_PLURAL, "--folderid", self._folder_id())
        for record in codec.decode_wire_records(output):
            if record.name == name:
                return record

        raise NotFoundError(ITEM_OBJECT_TYPE, name, self.folder_name)

    # ── Sync and folder handling ───────────────────────────────────────

    def sync(self) -> None:
        """Sync the vault and make sure the key folder exists."""
        self.bw("sync")
        logger.debug("Synced Bitwarden vault.")

        self.folder_id = self.ensure_folder(self.folder_name)

    def ensure_folder(self, name: str) -> str | None:
        """Return the id of folder ``name``, creating the folder if missing."""
        try:
            folder_id = self.get_folder(name)
        except NotFoundError:
            logger.debug("Folder %r must be created.", name)
        else:
            logger.debug("Folder %r already exists.", name)
            return folder_id

        output = self.bw("create", FOLDER_OBJECT_TYPE, codec.encode_folder(name))
        try:
            out = codec.decode_wire_record(output)
        except DecodeFailedError as e:
            raise DecodeFailedError(
                ERR_PARSE_CREATE_F.format(object_type=FOLDER_OBJECT_TYPE, name=name),
                e.detail,
                name=name,
            ) from e

        logger.info("Created Bitwarden folder %r.", name)
        return out.id

    def get_folder(self, name: str) -> str | None:
        """Look up a folder id by exact name.

        Raises NotFoundError when the CLI reports the folder as missing,
        either on stdout or through a failed exit with "Not found." on stderr.
        """
        try:
            output = self.bw("get", FOLDER_OBJECT_TYPE, name)
        except ExecutionFailedError as e:
            if _is_not_found(e.stderr):
                raise NotFoundError(FOLDER_OBJECT_TYPE, name, name) from e
            raise

        if _is_not_found(output.decode("utf-8", errors="replace")):
            raise NotFoundError(FOLDER_OBJECT_TYPE, name, name)

        return codec.decode_wire_record(output).id

    # ── Command plumbing ───────────────────────────────────────────────

    def bw(self, *args: str) -> bytes:
        """Run a ``bw`` subcommand through the commander."""
        return self.commander.run(self.command, *args)

    def _folder_id(self) -> str:
        # sync() always sets it; an id-less folder record is a vault bug
        if self.folder_id is None:
            raise DecodeFailedError(
                f'cannot resolve folder "{self.folder_name}"',
                "folder record has no id",
                name=self.folder_name,
            )
        return self.folder_id

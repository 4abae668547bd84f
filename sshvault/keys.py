"""SSH key files ↔ vault items, plus loading keys into ssh-agent."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from sshvault.provider.commander import Commander
from sshvault.provider.errors import InvalidKeyNameError, KeyFileExistsError, MissingFieldError
from sshvault.provider.models import Field, Item

logger = logging.getLogger(__name__)

PRIVATE_KEY_FIELD = "private_key"
PUBLIC_KEY_FIELD = "public_key"


def item_from_key_files(
    name: str,
    private_key: Path | str,
    public_key: Path | str | None = None,
) -> Item:
    """Build an Item from key files on disk.

    Without an explicit public key, ``<private_key>.pub`` is used when it exists.
    """
    private_path = Path(private_key).expanduser()
    values = [Field(name=PRIVATE_KEY_FIELD, value=private_path.read_text())]

    if public_key is None:
        candidate = private_path.with_name(private_path.name + ".pub")
        public_path = candidate if candidate.exists() else None
    else:
        public_path = Path(public_key).expanduser()

    if public_path is not None:
        values.append(Field(name=PUBLIC_KEY_FIELD, value=public_path.read_text()))

    return Item(name=name, values=values)


def _check_key_name(name: str) -> None:
    """Item names become file names directly under the ssh directory."""
    if not name or name in (".", "..") or Path(name).name != name:
        raise InvalidKeyNameError(name)


def write_key_files(item: Item, ssh_dir: Path | str, force: bool = False) -> list[Path]:
    """Write the item's keys to ``ssh_dir/<name>`` and ``ssh_dir/<name>.pub``.

    The private key file is created with mode 600. Existing files are left
    alone and KeyFileExistsError is raised unless ``force`` is set. Returns
    the written paths, private key first.
    """
    _check_key_name(item.name)
    private = item.get_value(PRIVATE_KEY_FIELD)
    if private is None:
        raise MissingFieldError(item.name, PRIVATE_KEY_FIELD)
    public = item.get_value(PUBLIC_KEY_FIELD)

    ssh_dir = Path(ssh_dir).expanduser()
    private_path = ssh_dir / item.name
    public_path = ssh_dir / f"{item.name}.pub"
    if not force:
        targets = [private_path] if public is None else [private_path, public_path]
        for path in targets:
            if path.exists():
                raise KeyFileExistsError(path)

    ssh_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
    private_path.touch(mode=stat.S_IRUSR | stat.S_IWUSR, exist_ok=True)
    private_path.chmod(stat.S_IRUSR | stat.S_IWUSR)  # 600, before any key bytes land
    private_path.write_text(private)
    written = [private_path]

    if public is not None:
        public_path.write_text(public)
        written.append(public_path)

    logger.debug("Wrote %d key file(s) for %r to %s", len(written), item.name, ssh_dir)
    return written


def add_to_agent(
    private_key: Path | str,
    commander: Commander | None = None,
    command: str = "ssh-add",
) -> None:
    """Load a private key file into the running ssh-agent."""
    (commander or Commander()).run(command, str(private_key))
    logger.info("Added %s to ssh-agent.", private_key)

"""
sshvault CLI — entry point for all operations.

Usage:
    sshvault list --provider bw                       # List stored SSH keys
    sshvault get --provider bw --name work            # Show one key
    sshvault get --name work --write --add-to-agent   # Restore it to ~/.ssh and ssh-agent
    sshvault add --name work --private-key ~/.ssh/id_ed25519
    sshvault providers                                # Supported providers
    sshvault version                                  # Show version
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    from sshvault.config import get_config

    cfg = get_config()

    parser = argparse.ArgumentParser(
        prog="sshvault",
        description="sshvault — keep SSH keys in your password vault.",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command")

    # list
    list_parser = subparsers.add_parser("list", help="List SSH keys from given provider")
    list_parser.add_argument("--provider", default=cfg.provider, help="Provider")

    # get
    get_parser = subparsers.add_parser("get", help="Get an SSH key from given provider")
    get_parser.add_argument("--provider", default=cfg.provider, help="Provider")
    get_parser.add_argument("--name", required=True, help="Name of the SSH key")
    get_parser.add_argument(
        "--write", action="store_true", help=f"Write key files to {cfg.ssh_dir}"
    )
    get_parser.add_argument(
        "--add-to-agent", action="store_true", help="Load the key into ssh-agent (implies --write)"
    )
    get_parser.add_argument(
        "--force", action="store_true", help="Overwrite existing key files when writing"
    )

    # add
    add_parser = subparsers.add_parser("add", help="Add an SSH key to given provider")
    add_parser.add_argument("--provider", default=cfg.provider, help="Provider")
    add_parser.add_argument("--name", required=True, help="Name of the SSH key")
    add_parser.add_argument("--private-key", required=True, help="Path of the private key file")
    add_parser.add_argument(
        "--public-key", help="Path of the public key file (default: <private-key>.pub)"
    )

    # providers
    subparsers.add_parser("providers", help="List supported providers")

    # version
    subparsers.add_parser("version", help="Show version")

    args = parser.parse_args(argv)

    from sshvault.log import setup_logging

    setup_logging("DEBUG" if args.verbose else cfg.log_level)

    if args.version or args.command == "version":
        from sshvault import __version__

        print(f"sshvault {__version__}")
        return 0

    from sshvault.provider.errors import ProviderError

    try:
        if args.command == "list":
            return _cmd_list(args)
        elif args.command == "get":
            return _cmd_get(args)
        elif args.command == "add":
            return _cmd_add(args)
        elif args.command == "providers":
            return _cmd_providers()
        else:
            parser.print_help()
            return 0
    except (ProviderError, OSError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}")
        return 1


def _cmd_list(args: argparse.Namespace) -> int:
    from sshvault.provider import get_provider

    prv = get_provider(args.provider)
    items = prv.list()

    logger.info("SSH Keys are fetched.")

    for item in items:
        print(item.name)
    return 0


def _cmd_get(args: argparse.Namespace) -> int:
    from sshvault.config import get_config
    from sshvault.keys import add_to_agent, write_key_files
    from sshvault.provider import GetOptions, get_provider

    cfg = get_config()
    prv = get_provider(args.provider)
    item = prv.get(GetOptions(name=args.name))

    if not (args.write or args.add_to_agent):
        print(f"  Name:  {item.name}")
        print(f"  ID:    {item.id or '-'}")
        for f in item.values:
            print(f"  --- {f.name} ---")
            print(f.value.rstrip("\n"))
        return 0

    paths = write_key_files(item, cfg.ssh_dir, force=args.force)
    for path in paths:
        print(f"  Wrote {path}")

    if args.add_to_agent:
        add_to_agent(paths[0], command=cfg.ssh_add_command)
        print(f"  Added {paths[0]} to ssh-agent")
    return 0


def _cmd_add(args: argparse.Namespace) -> int:
    from sshvault.keys import item_from_key_files
    from sshvault.provider import get_provider

    item = item_from_key_files(args.name, args.private_key, args.public_key)
    prv = get_provider(args.provider)
    prv.add(item)

    print(f"SSH key {item.name} added to {prv.name}.")
    return 0


def _cmd_providers() -> int:
    from sshvault.provider import list_providers

    for name in list_providers():
        print(name)
    return 0

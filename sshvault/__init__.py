"""sshvault — keep SSH keys in a password vault instead of plaintext files."""

__version__ = "0.1.0"

"""Exceptions raised by vault providers."""

from __future__ import annotations


class ProviderError(Exception):
    pass


class ExecutionFailedError(ProviderError):
    """An external command exited non-zero or could not be launched.

    ``stdout`` holds whatever the command printed before failing and
    ``stderr`` its captured error output.
    """

    def __init__(self, command: str, message: str, stdout: bytes = b"", stderr: str = ""):
        self.command = command
        self.message = message
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(f"'{command}': Execution failed: {message}")


class DecodeFailedError(ProviderError):
    """Vault output could not be parsed as the expected JSON or base64 payload."""

    def __init__(self, stage: str, detail: str = "", name: str | None = None):
        self.stage = stage
        self.detail = detail
        self.name = name
        super().__init__(f"{stage}: {detail}" if detail else stage)


class NotFoundError(ProviderError):
    def __init__(self, object_type: str, name: str, namespace: str):
        self.object_type = object_type
        self.name = name
        self.namespace = namespace
        super().__init__(f'object "{object_type}" with name "{name}" not found in "{namespace}"')


class AlreadyExistsError(ProviderError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"item {name} already exists")


class UnsupportedProviderError(ProviderError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"provider {name!r} is not supported")


class MissingFieldError(ProviderError, KeyError):
    """An item lacks a field required by the caller (e.g. ``private_key``)."""

    def __init__(self, item_name: str, field_name: str):
        self.item_name = item_name
        self.field_name = field_name
        super().__init__(f"item {item_name} has no field {field_name}")

    def __str__(self) -> str:
        return f"item {self.item_name} has no field {self.field_name}"


class InvalidKeyNameError(ProviderError):
    """An item name cannot be used as a key file name inside the ssh directory."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"item name {name!r} is not a valid key file name")


class KeyFileExistsError(ProviderError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"key file {path} already exists")

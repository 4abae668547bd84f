"""
Shared fixtures for provider tests.

- make_commander: scripted commander that expects an exact sequence of
  command lines and answers each with canned stdout (or a failure)
- memory_vault: stateful in-memory stand-in for the ``bw`` CLI
- load_fixture: raw bytes of a file under fixtures/
"""

from __future__ import annotations

import base64
import json
import uuid
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from sshvault.provider.errors import ExecutionFailedError

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@dataclass
class FakeCommand:
    command: str
    stdout: bytes = b""
    stderr: bytes = b""


class ScriptedCommander:
    """Answers an expected sequence of command lines, failing on any deviation."""

    def __init__(self, expected: list[FakeCommand]):
        self.expected = list(expected)
        self.calls: list[str] = []

    def run(self, command: str, *args: str) -> bytes:
        line = " ".join([command, *args])
        index = len(self.calls)
        self.calls.append(line)

        assert index < len(self.expected), f"unexpected command #{index}: {line}"
        want = self.expected[index]
        assert line == want.command, f"command #{index}: got {line!r}, want {want.command!r}"

        if want.stderr:
            stderr = want.stderr.decode()
            raise ExecutionFailedError(
                line, f"exit status 1: {stderr}", stdout=want.stdout, stderr=stderr
            )
        return want.stdout

    @property
    def remaining(self) -> list[FakeCommand]:
        return self.expected[len(self.calls):]


@dataclass
class MemoryVault:
    """In-memory ``bw`` CLI: folders, items, and a log of every call."""

    folders: dict[str, str] = field(default_factory=dict)  # name -> id
    items: list[dict] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)

    def creations(self, object_type: str) -> list[str]:
        return [c for c in self.calls if c.startswith(f"bw create {object_type} ")]

    def run(self, command: str, *args: str) -> bytes:
        line = " ".join([command, *args])
        self.calls.append(line)
        sub, rest = args[0], list(args[1:])

        if sub == "sync":
            return b""

        if sub == "get" and rest[0] == "folder":
            folder_id = self.folders.get(rest[1])
            if folder_id is None:
                raise ExecutionFailedError(
                    line, "exit status 1: Not found.", stderr="Not found."
                )
            return json.dumps({"object": "folder", "id": folder_id, "name": rest[1]}).encode()

        if sub == "create":
            record = json.loads(base64.b64decode(rest[1]))
            record["id"] = str(uuid.uuid4())
            if rest[0] == "folder":
                self.folders[record["name"]] = record["id"]
            else:
                self.items.append(record)
            return json.dumps(record).encode()

        if sub == "list" and rest[1] == "--folderid":
            in_folder = [
                {"id": i["id"], "name": i["name"], "notes": i["notes"]}
                for i in self.items
                if i["folderId"] == rest[2]
            ]
            return json.dumps(in_folder).encode()

        raise ExecutionFailedError(line, f"exit status 1: Invalid command: {sub}", stderr="")


@pytest.fixture
def load_fixture():
    def _load(name: str) -> bytes:
        return (FIXTURES_DIR / name).read_bytes()

    return _load


@pytest.fixture
def make_commander():
    return ScriptedCommander


@pytest.fixture
def fake_command():
    return FakeCommand


@pytest.fixture
def memory_vault() -> MemoryVault:
    return MemoryVault()

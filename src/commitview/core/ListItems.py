# commitview/core/ListItems.py
"""ListItems.py
========================
The items shown by list panels.

Every list panel (commits, files, stash, branches) exposes its selection as a
`ListItem`: something with a stable identity string and a human-readable
description. The variants are a closed set of frozen dataclasses; they are
produced by the data source and only referenced by the panels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union


class ListItem(Protocol):
    """Identity and description shared by all selectable items."""

    @property
    def id(self) -> str:
        """A sha for a commit, a path for a file, 'stash@{4}' for a stash entry,
        the branch name for a branch."""
        ...

    @property
    def description(self) -> str:
        """What we would show in a message, e.g. '123as14 push blah' for a commit."""
        ...


@dataclass(frozen=True)
class Commit:
    sha: str
    name: str = ""

    @property
    def id(self) -> str:
        return self.sha

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def description(self) -> str:
        return f"{self.short_sha} {self.name}"


@dataclass(frozen=True)
class File:
    name: str

    @property
    def id(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return self.name


@dataclass(frozen=True)
class StashEntry:
    index: int
    name: str = ""

    @property
    def ref_name(self) -> str:
        return f"stash@{{{self.index}}}"

    @property
    def id(self) -> str:
        return self.ref_name

    @property
    def description(self) -> str:
        return f"{self.ref_name}: {self.name}"


@dataclass(frozen=True)
class Branch:
    name: str

    @property
    def id(self) -> str:
        return self.name

    @property
    def description(self) -> str:
        return self.name


AnyListItem = Union[Commit, File, StashEntry, Branch]

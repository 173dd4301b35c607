"""
Group Registry

Maps suite names to Group instances so callers and configuration can select
a suite by name.

Usage:
    registry = GroupRegistry()
    registry.register(Ed25519Group(), description="Ed25519 via libsodium")

    group = registry.get("ed25519")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sigcore.schemas.errors import UnknownGroupException

from .base import Group


@dataclass
class GroupEntry:
    """
    Entry in the group registry.
    """
    group: Group
    description: str = ""
    production: bool = True

    @property
    def name(self) -> str:
        return self.group.name

    def to_dict(self) -> dict[str, object]:
        return {
            "name": self.name,
            "description": self.description,
            "production": self.production,
            "point_size": self.group.point_size,
            "scalar_size": self.group.scalar_size,
            "signature_size": self.group.point_size + self.group.scalar_size,
            "hash": self.group.hash_name,
        }


class GroupRegistry:
    """
    Registry for group suites.
    """

    def __init__(self) -> None:
        self._entries: dict[str, GroupEntry] = {}

    def register(
        self,
        group: Group,
        *,
        description: str = "",
        production: bool = True,
        replace: bool = False,
    ) -> None:
        """
        Register a group suite.

        Raises:
            ValueError: If the name is taken and replace is False
        """
        if group.name in self._entries and not replace:
            raise ValueError(f"Group already registered: {group.name}")
        self._entries[group.name] = GroupEntry(
            group=group,
            description=description,
            production=production,
        )

    def unregister(self, name: str) -> bool:
        """Remove a suite. Returns True if it was registered."""
        return self._entries.pop(name, None) is not None

    def get(self, name: str) -> Group:
        """
        Look up a suite by name.

        Raises:
            UnknownGroupException: If no suite has that name
        """
        entry = self._entries.get(name)
        if entry is None:
            raise UnknownGroupException(
                f"Unknown group: {name!r}. Available: {sorted(self._entries)}",
                name=name,
            )
        return entry.group

    def get_entry(self, name: str) -> Optional[GroupEntry]:
        return self._entries.get(name)

    def list_entries(self) -> list[GroupEntry]:
        return [self._entries[name] for name in sorted(self._entries)]

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

"""
Document models for the documentation corpus.

Defines entries, the immutable document store built from a parsed corpus,
and the per-query result records produced by the query engine.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Entry:
    """One named documentation unit.

    Attributes:
        key: Normalized (trimmed, lowercased) heading name, unique in a store
        body: Trimmed entry text including the original heading line
    """

    key: str
    body: str

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("Entry key must not be empty")
        if not self.body:
            raise ValueError(f"Entry {self.key!r} has an empty body")


@dataclass(frozen=True)
class QueryResult:
    """A single ranked search hit.

    Attributes:
        key: Entry key
        body: Entry body
        score: Relevance score (non-negative, higher is better)
    """

    key: str
    body: str
    score: int

    def to_dict(self) -> dict[str, Any]:
        """Convert result to a JSON-ready dictionary."""
        return {"key": self.key, "body": self.body, "score": self.score}


@dataclass(frozen=True)
class DocumentStore:
    """Immutable result of parsing a corpus.

    Entries and the term index come from the same parse pass and are
    exposed as read-only mappings, so a single store can be shared by any
    number of readers without locking.

    Attributes:
        entries: Entry key -> Entry
        index: Token -> keys of entries containing it. A key repeats once
            per occurrence; only membership is meaningful.
        duplicates: Keys whose heading appeared more than once in the corpus

    Examples:
        ```python
        store = DocumentStore.build(
            [Entry("button", "### Button\\nClick me")],
            {"button": ["button"]},
        )
        store.entries["button"].body
        ```
    """

    entries: Mapping[str, Entry] = field(default_factory=lambda: MappingProxyType({}))
    index: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    duplicates: tuple[str, ...] = ()

    @classmethod
    def build(
        cls,
        entries: Iterable[Entry],
        index: Mapping[str, Iterable[str]],
        duplicates: Iterable[str] = (),
    ) -> "DocumentStore":
        """Freeze parsed entries and index into a store.

        Args:
            entries: Finalized entries; keys must be unique.
            index: Token -> entry keys, in insertion order.
            duplicates: Keys that were seen more than once while parsing.

        Returns:
            DocumentStore with read-only mappings and tuple values.

        Raises:
            ValueError: If two entries share a key or the index refers to
                an unknown key.
        """
        by_key: dict[str, Entry] = {}
        for entry in entries:
            if entry.key in by_key:
                raise ValueError(f"Duplicate entry key: {entry.key!r}")
            by_key[entry.key] = entry

        frozen_index: dict[str, tuple[str, ...]] = {}
        for token, keys in index.items():
            keys = tuple(keys)
            unknown = set(keys) - by_key.keys()
            if unknown:
                raise ValueError(f"Index token {token!r} refers to unknown keys: {sorted(unknown)}")
            frozen_index[token] = keys

        return cls(
            entries=MappingProxyType(by_key),
            index=MappingProxyType(frozen_index),
            duplicates=tuple(duplicates),
        )

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def keys(self) -> list[str]:
        """Return all entry keys in ascending order."""
        return sorted(self.entries)

    def indexed(self, token: str, key: str) -> bool:
        """Check whether ``token`` is indexed for entry ``key``."""
        return key in self.index.get(token, ())

"""Immutable JSON-LD nodes and documents.

Builders pass optional properties as ``None``; a node drops every absent
value (None, empty string, empty list, empty mapping) when it is built, so
documents never carry placeholder properties. ``False`` and ``0`` are real
values and are kept.
"""

import json
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any

SCHEMA_CONTEXT = "https://schema.org"


def _is_absent(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | tuple | Mapping):
        return len(value) == 0
    return False


def _freeze(value: Any) -> Any:
    """Prune absent entries and make containers read-only."""
    if isinstance(value, GraphNode):
        return value
    if isinstance(value, Mapping):
        pruned = {key: _freeze(item) for key, item in value.items()}
        return MappingProxyType({k: v for k, v in pruned.items() if not _is_absent(v)})
    if isinstance(value, list | tuple):
        frozen = (_freeze(item) for item in value)
        return tuple(item for item in frozen if not _is_absent(item))
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, GraphNode):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class GraphNode(Mapping[str, Any]):
    """One typed entity in the graph: ``{"@type", "@id"?, ...properties}``."""

    __slots__ = ("_data",)

    def __init__(self, node_type: str, node_id: str | None = None, **properties: Any):
        data: dict[str, Any] = {"@type": node_type}
        if node_id:
            data["@id"] = node_id
        data.update(properties)
        self._data = _freeze(data)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GraphNode":
        properties = {k: v for k, v in data.items() if k not in ("@type", "@id")}
        return cls(str(data.get("@type", "Thing")), data.get("@id"), **properties)

    @property
    def type(self) -> str:
        return self._data["@type"]

    @property
    def id(self) -> str | None:
        return self._data.get("@id")

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GraphNode):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_json())

    def __repr__(self) -> str:
        return f"GraphNode({self.type!r}, {self.id!r})"

    def to_dict(self) -> dict[str, Any]:
        return _thaw(self._data)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


def ref(node_id: str) -> dict[str, str]:
    """Reference another node by id."""
    return {"@id": node_id}


def iso_datetime(value: datetime | None) -> str | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


@dataclass(frozen=True)
class JsonLdDocument:
    """``{"@context": "https://schema.org", "@graph": [...]}``."""

    nodes: tuple[GraphNode, ...]

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def types(self) -> list[str]:
        return [node.type for node in self.nodes]

    def find(self, node_type: str) -> GraphNode | None:
        """First node of the given type."""
        return next((node for node in self.nodes if node.type == node_type), None)

    def node_ids(self) -> list[str]:
        return [node.id for node in self.nodes if node.id]

    def to_dict(self) -> dict[str, Any]:
        return {
            "@context": SCHEMA_CONTEXT,
            "@graph": [node.to_dict() for node in self.nodes],
        }

    def to_json(self) -> str:
        """Compact serialization for embedding and caching."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def to_json_pretty(self) -> str:
        """Indented serialization for previews."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "JsonLdDocument":
        graph = data.get("@graph")
        nodes = graph if isinstance(graph, list) else []
        return cls(tuple(GraphNode.from_dict(n) for n in nodes if isinstance(n, Mapping)))


@dataclass(frozen=True)
class GraphCacheEntry:
    """Compact document plus the time it was generated, as stored by callers."""

    json_ld: str
    generated_at: datetime

    @classmethod
    def from_document(
        cls, document: JsonLdDocument, generated_at: datetime | None = None
    ) -> "GraphCacheEntry":
        when = generated_at or datetime.now(UTC)
        if when.tzinfo is None:
            when = when.replace(tzinfo=UTC)
        return cls(json_ld=document.to_json(), generated_at=when.astimezone(UTC))

    def to_dict(self) -> dict[str, str]:
        return {
            "json_ld": self.json_ld,
            "generated_at": self.generated_at.isoformat(),
        }

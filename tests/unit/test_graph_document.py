"""Tests for GraphNode, JsonLdDocument and the cache entry."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from engine.graph.document import GraphCacheEntry, GraphNode, JsonLdDocument, iso_datetime, ref


class TestGraphNode:
    """Tests for GraphNode."""

    def test_absent_values_pruned(self) -> None:
        """None, blank strings and empty containers are dropped."""
        node = GraphNode(
            "Thing",
            "https://example.com/#thing",
            name="Name",
            description=None,
            alternateName="  ",
            sameAs=[],
            about={},
            nested={"name": None, "url": "https://example.com"},
        )
        assert node.to_dict() == {
            "@type": "Thing",
            "@id": "https://example.com/#thing",
            "name": "Name",
            "nested": {"url": "https://example.com"},
        }

    def test_false_and_zero_kept(self) -> None:
        """False and 0 are real values."""
        node = GraphNode("Article", isAccessibleForFree=False, wordCount=0)
        assert node["isAccessibleForFree"] is False
        assert node["wordCount"] == 0

    def test_nested_absent_collapse(self) -> None:
        """A mapping left empty after pruning is dropped too."""
        node = GraphNode("Thing", about={"name": None}, items=[None, ""])
        assert node.to_dict() == {"@type": "Thing"}

    def test_immutable(self) -> None:
        """Nodes and their nested containers are read-only."""
        node = GraphNode("Thing", about={"name": "x"}, keywords=["a"])
        with pytest.raises(TypeError):
            node["name"] = "y"  # type: ignore[index]
        with pytest.raises(TypeError):
            node["about"]["name"] = "y"
        assert isinstance(node["keywords"], tuple)

    def test_to_dict_is_a_copy(self) -> None:
        """Mutating the exported dict leaves the node unchanged."""
        node = GraphNode("Thing", keywords=["a"])
        exported = node.to_dict()
        exported["keywords"].append("b")
        assert node.to_dict()["keywords"] == ["a"]

    def test_type_and_id(self) -> None:
        """Accessors expose @type and @id."""
        node = GraphNode("Person", "https://example.com/#p")
        assert node.type == "Person"
        assert node.id == "https://example.com/#p"
        assert GraphNode("Person").id is None

    def test_equality_and_hash(self) -> None:
        """Nodes with the same content are equal and hash alike."""
        a = GraphNode("Thing", name="x")
        b = GraphNode.from_dict({"@type": "Thing", "name": "x"})
        assert a == b
        assert hash(a) == hash(b)

    def test_ref(self) -> None:
        """ref builds a bare id reference."""
        assert ref("https://example.com/#a") == {"@id": "https://example.com/#a"}


class TestIsoDatetime:
    """Tests for iso_datetime."""

    def test_converts_to_utc(self) -> None:
        """Offsets are normalized to UTC."""
        value = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert iso_datetime(value) == "2024-01-01T10:00:00+00:00"

    def test_naive_is_utc(self) -> None:
        """Naive values are read as UTC."""
        assert iso_datetime(datetime(2024, 1, 1)) == "2024-01-01T00:00:00+00:00"
        assert iso_datetime(None) is None


class TestJsonLdDocument:
    """Tests for JsonLdDocument."""

    def test_round_trip_from_dict(self) -> None:
        """A serialized document can be read back."""
        document = JsonLdDocument((GraphNode("WebPage", "https://e.com/", url="https://e.com/"),))
        assert JsonLdDocument.from_dict(document.to_dict()) == document

    def test_find_and_types(self) -> None:
        """Nodes can be looked up by type."""
        document = JsonLdDocument((GraphNode("WebPage"), GraphNode("Person", name="A")))
        assert document.types() == ["WebPage", "Person"]
        assert document.find("Person")["name"] == "A"
        assert document.find("FAQPage") is None

    def test_from_dict_ignores_garbage(self) -> None:
        """Non-list graphs and non-mapping nodes are skipped."""
        assert len(JsonLdDocument.from_dict({"@graph": "nope"})) == 0
        assert len(JsonLdDocument.from_dict({"@graph": [1, {"@type": "Thing"}]})) == 1


class TestGraphCacheEntry:
    """Tests for GraphCacheEntry."""

    def test_compact_json_and_utc_timestamp(self) -> None:
        """The entry stores compact JSON and a UTC timestamp."""
        document = JsonLdDocument((GraphNode("WebPage", url="https://e.com/"),))
        generated = datetime(2024, 6, 1, 14, 0, tzinfo=timezone(timedelta(hours=2)))
        entry = GraphCacheEntry.from_document(document, generated)
        assert entry.json_ld == document.to_json()
        assert entry.generated_at == datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
        assert entry.to_dict()["generated_at"] == "2024-06-01T12:00:00+00:00"

    def test_defaults_to_now(self) -> None:
        """Without a timestamp the entry uses the current UTC time."""
        before = datetime.now(UTC)
        entry = GraphCacheEntry.from_document(JsonLdDocument(()))
        assert entry.generated_at >= before
        assert entry.generated_at.tzinfo is not None

"""Structural checks on an assembled JSON-LD document."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from engine.entities import ORGANIZATION_TYPES
from engine.graph.document import JsonLdDocument

PAGE_TYPES = ("WebPage", "CollectionPage", "AboutPage", "ProfilePage")

REQUIRED_PROPERTIES = {
    "Article": ("headline", "author", "publisher"),
    "WebPage": ("url", "name"),
    "CollectionPage": ("url", "name"),
    "AboutPage": ("url", "name", "mainEntity"),
    "ProfilePage": ("url", "name", "mainEntity"),
    "Organization": ("name",),
    "Person": ("name",),
    "BreadcrumbList": ("itemListElement",),
    "FAQPage": ("mainEntity",),
}

RECOMMENDED_PROPERTIES = {
    "Article": ("image", "datePublished", "dateModified", "description"),
    "Organization": ("logo", "url"),
    "Person": ("url", "description"),
}


@dataclass
class GraphValidationReport:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": self.errors,
            "warnings": self.warnings,
        }


def _walk(value: Any):
    """Yield every mapping nested anywhere inside ``value``."""
    if isinstance(value, Mapping):
        yield value
        for item in value.values():
            yield from _walk(item)
    elif isinstance(value, list | tuple):
        for item in value:
            yield from _walk(item)


def _rule_type(node_type: Any) -> str | None:
    # Organization subtypes share the Organization rules
    if not isinstance(node_type, str):
        return None
    return "Organization" if node_type in ORGANIZATION_TYPES else node_type


def _is_reference(value: Mapping) -> bool:
    # typed inline objects (WebSite pointer, category subject) carry their own data
    return set(value) == {"@id"}


def validate_graph(document: JsonLdDocument | Mapping[str, Any]) -> GraphValidationReport:
    """
    Check required properties, dangling references and the page root.

    Args:
        document: Assembled document, or its ``to_dict()`` form

    Returns:
        GraphValidationReport; ``is_valid`` is False when any error was found
    """
    data = document.to_dict() if isinstance(document, JsonLdDocument) else document
    raw_nodes = data.get("@graph")
    if not isinstance(raw_nodes, list):
        raw_nodes = []
    nodes = [node for node in raw_nodes if isinstance(node, Mapping)]
    report = GraphValidationReport()

    roots = [node for node in nodes if node.get("@type") in PAGE_TYPES]
    if len(roots) != 1:
        report.errors.append(f"expected exactly one page root, found {len(roots)}")

    known_ids = {
        found["@id"]
        for found in _walk(nodes)
        if "@type" in found and isinstance(found.get("@id"), str)
    }

    for node in nodes:
        node_type = node.get("@type", "?")
        label = f"{node_type} {node.get('@id', '')}".strip()

        rule_type = _rule_type(node_type)
        for name in REQUIRED_PROPERTIES.get(rule_type, ()):
            if node.get(name) in (None, "", [], {}):
                report.errors.append(f"{label}: missing required property '{name}'")
        for name in RECOMMENDED_PROPERTIES.get(rule_type, ()):
            if node.get(name) in (None, "", [], {}):
                report.warnings.append(f"{label}: missing recommended property '{name}'")

        for found in _walk({k: v for k, v in node.items() if k not in ("@type", "@id")}):
            if _is_reference(found) and found["@id"] not in known_ids:
                report.errors.append(f"{label}: reference to unknown node {found['@id']}")

    return report

"""Tests for the scoring and graph endpoints."""

import json

import pytest
from httpx import AsyncClient

ARTICLE = {
    "title": "Coffee brewing",
    "slug": "coffee-brewing",
    "seo_title": "t" * 58,
    "seo_description": "d" * 140,
    "meta_robots": "index, follow",
    "word_count": 950,
    "content_depth": "COMPREHENSIVE",
    "excerpt": "A short summary.",
    "featured_image": {"url": "https://cdn.example.com/coffee.jpg"},
    "json_ld_structured_data": '{"@context": "https://schema.org"}',
    "author_id": "auth-1",
    "date_published": "2024-04-01T09:00:00Z",
    "canonical_url": "https://example.com/articles/coffee",
    "faq_count": 2,
    "sitemap_priority": 0.8,
    "sitemap_change_frequency": "weekly",
    "og_title": "Coffee brewing, explained",
    "twitter_card": "summary_large_image",
}

GRAPH_ARTICLE = {
    "title": "Coffee brewing",
    "slug": "coffee-brewing",
    "seo_description": "About coffee.",
    "author": {"name": "Ada", "slug": "ada"},
    "publisher": {"name": "Example", "slug": "example"},
    "faqs": [{"question": "Why?", "answer": "Because."}],
}


class TestRegistryEndpoint:
    """Tests for GET /v1/seo/registries/{entity_type}."""

    @pytest.mark.asyncio
    async def test_registry(self, client: AsyncClient) -> None:
        """Registry lists its fields and ceiling."""
        response = await client.get("/v1/seo/registries/category")

        assert response.status_code == 200
        data = response.json()
        assert data["entity_type"] == "category"
        assert data["max_score"] == 70
        assert data["fields"][0] == {"name": "name", "label": "Category Name", "dimension": "value"}

    @pytest.mark.asyncio
    async def test_plural_path(self, client: AsyncClient) -> None:
        """Plural entity names are accepted."""
        response = await client.get("/v1/seo/registries/articles")

        assert response.status_code == 200
        assert response.json()["max_score"] == 130

    @pytest.mark.asyncio
    async def test_industry_registry_alias(self, client: AsyncClient) -> None:
        """Industries resolve under their plural path with a 100-point ceiling."""
        response = await client.get("/v1/seo/registries/industries")

        assert response.status_code == 200
        data = response.json()
        assert data["entity_type"] == "industry"
        assert data["max_score"] == 100
        assert len(data["fields"]) == 13

    @pytest.mark.asyncio
    async def test_unknown_entity_type(self, client: AsyncClient) -> None:
        """Unknown kinds return the not_found envelope."""
        response = await client.get("/v1/seo/registries/widget")

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "not_found"
        assert error["details"] == {"entity_type": "widget"}


class TestScoreEndpoint:
    """Tests for POST /v1/seo/{entity_type}/score."""

    @pytest.mark.asyncio
    async def test_score_category(self, client: AsyncClient) -> None:
        """Field engine result with ordered checks."""
        response = await client.post(
            "/v1/seo/category/score", json={"entity": {"name": "News", "slug": "news"}}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["entity_type"] == "category"
        assert data["score"] == 10
        assert data["max_score"] == 70
        assert data["percentage"] == 14
        assert len(data["checks"]) == 8
        assert data["status_counts"]["good"] == 2

    @pytest.mark.asyncio
    async def test_score_industry(self, client: AsyncClient) -> None:
        """Industry pages are scored against their own registry."""
        response = await client.post(
            "/v1/seo/industries/score", json={"entity": {"name": "Fintech", "slug": "fintech"}}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["entity_type"] == "industry"
        assert data["score"] == 10
        assert data["max_score"] == 100
        assert data["percentage"] == 10
        assert len(data["checks"]) == 13

    @pytest.mark.asyncio
    async def test_empty_body_scores_empty_entity(self, client: AsyncClient) -> None:
        """A missing entity is scored as empty, never rejected."""
        response = await client.post("/v1/seo/tag/score", json={})

        assert response.status_code == 200
        assert response.json()["score"] == 0

    @pytest.mark.asyncio
    async def test_non_object_entity_rejected(self, client: AsyncClient) -> None:
        """The entity must be a JSON object."""
        response = await client.post("/v1/seo/tag/score", json={"entity": [1, 2]})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "validation_error"


class TestAnalyzeEndpoint:
    """Tests for POST /v1/seo/articles/analyze."""

    @pytest.mark.asyncio
    async def test_analyze(self, client: AsyncClient) -> None:
        """Composite score with category breakdown."""
        response = await client.post("/v1/seo/articles/analyze", json={"entity": ARTICLE})

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 92
        assert data["categories"]["structured_data"]["score"] == 17
        assert data["categories"]["structured_data"]["percentage"] == 67


class TestGraphEndpoints:
    """Tests for the knowledge graph endpoints."""

    @pytest.mark.asyncio
    async def test_article_graph(self, client: AsyncClient) -> None:
        """Graph, validation report and cache entry are returned."""
        response = await client.post("/v1/seo/articles/graph", json={"article": GRAPH_ARTICLE})

        assert response.status_code == 200
        data = response.json()
        graph = data["graph"]
        assert graph["@context"] == "https://schema.org"
        assert [node["@type"] for node in graph["@graph"]][-1] == "FAQPage"
        assert graph["@graph"][0]["@id"] == "https://example.com/articles/coffee-brewing"
        assert data["validation"]["is_valid"] is True
        assert data["cache"]["json_ld"].startswith('{"@context":"https://schema.org"')
        assert "generated_at" in data["cache"]

    @pytest.mark.asyncio
    async def test_article_graph_missing_author(self, client: AsyncClient) -> None:
        """A missing relation is a validation error, not a crash."""
        article = {key: value for key, value in GRAPH_ARTICLE.items() if key != "author"}
        response = await client.post("/v1/seo/articles/graph", json={"article": article})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "validation_error"
        assert error["details"] == {"field": "author"}

    @pytest.mark.asyncio
    async def test_collection_graph(self, client: AsyncClient) -> None:
        """Listing pages get a CollectionPage graph."""
        response = await client.post(
            "/v1/seo/collections/graph",
            json={
                "collection": {
                    "kind": "category",
                    "name": "Guides",
                    "slug": "guides",
                    "articles": [{"title": "Coffee", "slug": "coffee"}],
                }
            },
        )

        assert response.status_code == 200
        data = response.json()
        page = data["graph"]["@graph"][0]
        assert page["@type"] == "CollectionPage"
        assert page["@id"] == "https://example.com/categories/guides"
        assert data["validation"]["is_valid"] is True

    @pytest.mark.asyncio
    async def test_collection_graph_bad_kind(self, client: AsyncClient) -> None:
        """Unsupported kinds are rejected."""
        response = await client.post(
            "/v1/seo/collections/graph", json={"collection": {"kind": "author", "name": "A"}}
        )

        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"field": "collection.kind"}

    @pytest.mark.asyncio
    async def test_missing_body_field(self, client: AsyncClient) -> None:
        """Request validation errors use the standard envelope."""
        response = await client.post("/v1/seo/articles/graph", json={})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "validation_error"
        assert error["details"]["field"] == "article"

    @pytest.mark.asyncio
    async def test_article_graph_non_finite_numbers(self, client: AsyncClient) -> None:
        """Infinity and NaN in numeric fields are treated as absent."""
        article = {
            **GRAPH_ARTICLE,
            "word_count": "__INF__",
            "featured_image": {"url": "https://cdn.example.com/a.jpg", "width": "__NAN__"},
            "gallery": [{"media": {"url": "https://cdn.example.com/b.jpg"}, "position": "__INF__"}],
        }
        body = (
            json.dumps({"article": article})
            .replace('"__INF__"', "Infinity")
            .replace('"__NAN__"', "NaN")
        )
        response = await client.post(
            "/v1/seo/articles/graph",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 200
        nodes = response.json()["graph"]["@graph"]
        article_node = next(node for node in nodes if node["@type"] == "Article")
        assert "wordCount" not in article_node
        assert "width" not in article_node["image"][0]
        assert len(article_node["image"]) == 2

    @pytest.mark.asyncio
    async def test_organization_graph(self, client: AsyncClient) -> None:
        """Client pages get an AboutPage around the shared organization id."""
        response = await client.post(
            "/v1/seo/organizations/graph",
            json={"organization": {"name": "Acme", "slug": "acme", "url": "https://acme.sa"}},
        )

        assert response.status_code == 200
        data = response.json()
        nodes = data["graph"]["@graph"]
        assert [node["@type"] for node in nodes] == [
            "AboutPage",
            "Organization",
            "BreadcrumbList",
        ]
        assert nodes[0]["@id"] == "https://example.com/clients/acme"
        assert nodes[1]["@id"] == "https://example.com/clients/acme#organization"
        assert data["validation"]["is_valid"] is True

    @pytest.mark.asyncio
    async def test_author_graph(self, client: AsyncClient) -> None:
        """Author pages get a ProfilePage around the shared person id."""
        response = await client.post(
            "/v1/seo/authors/graph",
            json={"author": {"name": "Ada", "slug": "ada"}, "page_url": "https://example.com/ada"},
        )

        assert response.status_code == 200
        nodes = response.json()["graph"]["@graph"]
        assert nodes[0]["@type"] == "ProfilePage"
        assert nodes[0]["@id"] == "https://example.com/ada"
        assert nodes[0]["mainEntity"] == {"@id": "https://example.com/authors/ada#person"}

    @pytest.mark.asyncio
    async def test_profile_graph_requires_slug(self, client: AsyncClient) -> None:
        """A profile without a slug has no stable id."""
        response = await client.post("/v1/seo/authors/graph", json={"author": {"name": "Ada"}})

        assert response.status_code == 422
        assert response.json()["error"]["details"] == {"field": "author.slug"}

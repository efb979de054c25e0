"""The six fixed article categories.

Each analyzer runs a few banded item checks over a NormalizedArticle. Only
the full band of an item counts as passed, so a category's pass rate and
its points are independent signals: a heavily weighted item can fail while
most items pass, and the other way round.
"""

from dataclasses import dataclass, field

from engine.scoring.article.inputs import NormalizedArticle
from engine.scoring.normalize import pass_rate

# Category key -> max points (sums to 100)
CATEGORY_MAX_SCORES = {
    "meta_tags": 25,
    "content": 25,
    "images": 15,
    "structured_data": 20,
    "technical": 10,
    "social": 5,
}


@dataclass(frozen=True)
class ItemCheck:
    """One banded check inside a category."""

    name: str
    points: int
    passed: bool
    detail: str = ""

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "points": self.points,
            "passed": self.passed,
            "detail": self.detail,
        }


@dataclass(frozen=True)
class CategoryResult:
    """Points against the category ceiling, plus the item pass rate."""

    score: int
    max_score: int
    percentage: int
    passed: int
    total: int
    items: tuple[ItemCheck, ...] = field(default=(), compare=False)

    @classmethod
    def from_items(cls, max_score: int, items: list[ItemCheck]) -> "CategoryResult":
        passed = sum(1 for item in items if item.passed)
        score = min(sum(item.points for item in items), max_score)
        return cls(
            score=score,
            max_score=max_score,
            percentage=pass_rate(passed, len(items)),
            passed=passed,
            total=len(items),
            items=tuple(items),
        )

    @classmethod
    def empty(cls) -> "CategoryResult":
        return cls(score=0, max_score=0, percentage=0, passed=0, total=0)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "max_score": self.max_score,
            "percentage": self.percentage,
            "passed": self.passed,
            "total": self.total,
            "items": [item.to_dict() for item in self.items],
        }


def _length_band(name: str, text: str, low: int, high: int) -> ItemCheck:
    length = len(text)
    if low <= length <= high:
        return ItemCheck(name, 10, True, f"{length} chars (optimal {low}-{high})")
    if length > 0:
        return ItemCheck(name, 5, False, f"{length} chars (optimal {low}-{high})")
    return ItemCheck(name, 0, False, "missing")


def analyze_meta_tags(article: NormalizedArticle) -> CategoryResult:
    items = [
        _length_band("seo_title", article.seo_title, 30, 60),
        _length_band("seo_description", article.seo_description, 120, 160),
    ]
    robots = article.meta_robots
    if robots and "noindex" not in robots.lower():
        items.append(ItemCheck("meta_robots", 5, True, robots))
    else:
        items.append(ItemCheck("meta_robots", 0, False, robots or "missing"))
    return CategoryResult.from_items(CATEGORY_MAX_SCORES["meta_tags"], items)


def analyze_content(article: NormalizedArticle) -> CategoryResult:
    words = article.word_count
    if words >= 800:
        items = [ItemCheck("word_count", 15, True, f"{words} words")]
    elif words >= 300:
        items = [ItemCheck("word_count", 8, False, f"{words} words (800+ recommended)")]
    elif words > 0:
        items = [ItemCheck("word_count", 3, False, f"{words} words (800+ recommended)")]
    else:
        items = [ItemCheck("word_count", 0, False, "no content")]

    items.append(
        ItemCheck("content_depth", 5, True, article.content_depth)
        if article.content_depth
        else ItemCheck("content_depth", 0, False, "missing")
    )
    items.append(
        ItemCheck("excerpt", 5, True)
        if article.excerpt
        else ItemCheck("excerpt", 0, False, "missing")
    )
    return CategoryResult.from_items(CATEGORY_MAX_SCORES["content"], items)


def analyze_images(article: NormalizedArticle) -> CategoryResult:
    if not article.has_featured_image:
        # alt text is not applicable without an image, so it passes for 0 points
        items = [
            ItemCheck("featured_image", 0, False, "missing"),
            ItemCheck("featured_image_alt", 0, True, "not applicable"),
        ]
    elif article.featured_image_alt:
        items = [
            ItemCheck("featured_image", 10, True),
            ItemCheck("featured_image_alt", 5, True),
        ]
    else:
        items = [
            ItemCheck("featured_image", 10, True),
            ItemCheck("featured_image_alt", 0, False, "missing"),
        ]
    return CategoryResult.from_items(CATEGORY_MAX_SCORES["images"], items)


def analyze_structured_data(article: NormalizedArticle) -> CategoryResult:
    items = [
        ItemCheck("json_ld", 5, True)
        if article.json_ld
        else ItemCheck("json_ld", 0, False, "not generated")
    ]

    parts = {
        "title": bool(article.title),
        "author": article.has_author,
        "date_published": article.date_published is not None,
        "canonical_url": bool(article.canonical_url),
        "seo_description": bool(article.seo_description),
    }
    schema_points = 2 * sum(parts.values())
    missing = [name for name, present in parts.items() if not present]
    items.append(
        ItemCheck(
            "schema_fields",
            schema_points,
            schema_points >= 8,
            f"{schema_points}/10" + (f" (missing {', '.join(missing)})" if missing else ""),
        )
    )

    faqs = article.faq_count
    if faqs >= 3:
        items.append(ItemCheck("faqs", 5, True, f"{faqs} FAQs"))
    elif faqs > 0:
        items.append(ItemCheck("faqs", 2, False, f"{faqs} FAQs (3+ recommended)"))
    else:
        items.append(ItemCheck("faqs", 0, False, "no FAQs"))
    return CategoryResult.from_items(CATEGORY_MAX_SCORES["structured_data"], items)


def analyze_technical(article: NormalizedArticle) -> CategoryResult:
    url = article.canonical_url
    if url.startswith("https://"):
        items = [ItemCheck("canonical_url", 5, True, url)]
    elif url:
        items = [ItemCheck("canonical_url", 3, False, f"{url} (not HTTPS)")]
    else:
        items = [ItemCheck("canonical_url", 0, False, "missing")]

    has_priority = article.sitemap_priority is not None
    has_frequency = bool(article.sitemap_change_frequency)
    if has_priority and has_frequency:
        items.append(ItemCheck("sitemap", 5, True))
    elif has_priority or has_frequency:
        items.append(ItemCheck("sitemap", 2, False, "priority or change frequency missing"))
    else:
        items.append(ItemCheck("sitemap", 0, False, "missing"))
    return CategoryResult.from_items(CATEGORY_MAX_SCORES["technical"], items)


def analyze_social(article: NormalizedArticle) -> CategoryResult:
    has_open_graph = bool(
        article.og_title
        or article.og_description
        or (article.has_featured_image and article.title)
    )
    items = [
        ItemCheck("open_graph", 3, True)
        if has_open_graph
        else ItemCheck("open_graph", 0, False, "missing"),
        ItemCheck("twitter_card", 2, True, article.twitter_card)
        if article.twitter_card
        else ItemCheck("twitter_card", 0, False, "missing"),
    ]
    return CategoryResult.from_items(CATEGORY_MAX_SCORES["social"], items)


CATEGORY_ANALYZERS = {
    "meta_tags": analyze_meta_tags,
    "content": analyze_content,
    "images": analyze_images,
    "structured_data": analyze_structured_data,
    "technical": analyze_technical,
    "social": analyze_social,
}

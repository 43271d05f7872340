"""
fact-check articles feed built on the claim-review provider.

turns claims:search results into blog-style article cards. pagination uses
the provider's opaque nextPageToken: callers pass back the token they
received; page numbers alone are only echoed.
"""

import math
from datetime import date
from typing import Any, Dict, Optional

from factlens.models import (
    Article,
    ArticlesPage,
    Pagination,
    FactCheckProcessingFailed,
    ProviderCallFailed,
)
from factlens.ai.context.factcheckapi.google_factcheck_client import GoogleFactCheckClient
from factlens.observability.logger import get_logger, PipelineStep

logger = get_logger(__name__, PipelineStep.CLAIM_REVIEW_SEARCH)

DEFAULT_QUERY = "fact check news"
MAX_AGE_DAYS = 365
EXCERPT_LENGTH = 150

# first match wins
CATEGORY_KEYWORDS = [
    ("health", ("covid", "vaccine", "health")),
    ("politics", ("election", "politic", "vote")),
    ("technology", ("ai", "technology", "tech")),
    ("science", ("climate", "science", "research")),
]


def build_search_query(query: str = "", category: str = "") -> str:
    search_query = query.strip()
    if category and category != "all":
        search_query = f"{category} {search_query}".strip()
    return search_query or DEFAULT_QUERY


def categorize_claim_text(text: str) -> str:
    lowered = text.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return "general"


def claim_to_article(index: int, claim: Dict[str, Any]) -> Article:
    """map one raw provider claim to an article card"""
    reviews = claim.get("claimReview") or []
    first_review = reviews[0] if reviews else {}
    text = claim.get("text") or ""

    if len(text) > EXCERPT_LENGTH:
        excerpt = text[:EXCERPT_LENGTH] + "..."
    else:
        excerpt = text or "No description available"

    return Article(
        id=claim.get("name") or f"claim-{index}",
        title=text or "Untitled Fact Check",
        excerpt=excerpt,
        date=claim.get("claimDate") or date.today().isoformat(),
        publisher=(first_review.get("publisher") or {}).get("name") or "Unknown Publisher",
        url=first_review.get("url") or claim.get("url") or "#",
        image_url=None,
        verdict=(first_review.get("textualRating") or "unverified").lower(),
        category=categorize_claim_text(text),
        claim_date=claim.get("claimDate"),
        review_count=len(reviews),
        original_claim=claim.get("text"),
    )


async def list_articles(
    client: GoogleFactCheckClient,
    query: str = "",
    category: str = "",
    page: int = 1,
    limit: int = 20,
    page_token: Optional[str] = None,
) -> ArticlesPage:
    """
    fetch one page of fact-check articles.

    raises:
        ProviderUnavailable: claim-review provider not configured
        FactCheckProcessingFailed: any provider failure
    """
    search_query = build_search_query(query, category)
    logger.info(f"fetching articles: query='{search_query}' page={page} limit={limit}")

    try:
        data = await client.search_raw({
            "query": search_query,
            "languageCode": client.language_code,
            "maxAgeDays": MAX_AGE_DAYS,
            "pageSize": limit,
            "pageToken": page_token,
        })
    except ProviderCallFailed as e:
        logger.error(f"articles fetch failed: {e}")
        raise FactCheckProcessingFailed("Failed to fetch fact-check articles.") from e

    claims = data.get("claims") or []
    next_page_token = data.get("nextPageToken")

    return ArticlesPage(
        articles=[claim_to_article(i, claim) for i, claim in enumerate(claims)],
        pagination=Pagination(
            current_page=page,
            total_pages=math.ceil(len(claims) / limit) if limit else 0,
            has_next_page=bool(next_page_token),
            next_page_token=next_page_token,
        ),
        total_results=len(claims),
    )

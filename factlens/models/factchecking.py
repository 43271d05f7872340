"""
data model of the fact-check pipeline.

all models serialize with camelCase aliases, which is the shape API clients
receive. python code uses the snake_case attribute names.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """base model: snake_case attributes, camelCase JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ===== CLAIM REVIEWS (claim-review provider) =====

class ReviewVerdict(CamelModel):
    """one publisher's verdict on a claim"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "publisherName": "PolitiFact",
            "publisherSite": "politifact.com",
            "textualRating": "False",
            "url": "https://www.politifact.com/factchecks/2019/jul/18/moon-landing/",
            "title": "No, the moon landing was not faked",
            "reviewDate": "2019-07-18T00:00:00Z",
            "languageCode": "en"
        }
    })

    publisher_name: str = Field(..., description="Name of the reviewing publisher")
    publisher_site: Optional[str] = Field(None, description="Publisher domain")
    textual_rating: str = Field(default="", description="Publisher's rating text, e.g. 'False'")
    url: Optional[str] = Field(None, description="Link to the review article, when the publisher gives one")
    title: Optional[str] = Field(None, description="Title of the review article")
    review_date: Optional[str] = Field(None, description="When the review was published")
    language_code: Optional[str] = Field(None, description="Language of the review")


class ClaimReview(CamelModel):
    """a reviewed claim together with every publisher verdict found for it"""

    source_claim_id: str = Field(..., description="Provider claim id, or claim-<index> when absent")
    claim_text: str = Field(default="", description="The claim as reviewed")
    claimant: Optional[str] = Field(None, description="Who made the claim")
    claim_date: Optional[str] = Field(None, description="When the claim was made")
    reviews: List[ReviewVerdict] = Field(default_factory=list)


# ===== IMAGE ANALYSIS (vision provider) =====

class ImageLabel(CamelModel):
    description: str
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class WebEntity(CamelModel):
    description: str
    score: float = 0.0


class ImageAnalysisResult(CamelModel):
    """what the vision provider detected in one image"""

    extracted_text: str = Field(default="", description="Full text detected in the image")
    labels: List[ImageLabel] = Field(default_factory=list)
    web_entities: List[WebEntity] = Field(default_factory=list)

    def label_descriptions(self) -> List[str]:
        return [label.description for label in self.labels]

    def search_query(self) -> str:
        """detected text followed by the space-joined labels, trimmed"""
        return f"{self.extracted_text} {' '.join(self.label_descriptions())}".strip()


# ===== CLAIM ANALYSIS (zero-shot + language model) =====

class ZeroShotResult(BaseModel):
    """candidate labels ordered by descending score"""
    labels: List[str]
    scores: List[float]

    def top(self) -> tuple[str, float]:
        return self.labels[0], self.scores[0]


class Categorization(CamelModel):
    message: str
    categories: List[str] = Field(default_factory=list, max_length=1)


class Consensus(str, Enum):
    STRONG = "Strong Consensus"
    GENERAL = "General Consensus"
    MIXED = "Mixed Findings"
    CONTRADICTORY = "Contradictory"
    INSUFFICIENT_DATA = "Insufficient Data"
    ERROR = "Error"


class AISummary(BaseModel):
    """synthesis of a set of claim reviews"""
    overview: str
    consensus: Consensus
    conclusion: str


# ===== NORMALIZED RESPONSE =====

class ResponseSummary(CamelModel):
    text: str
    consensus: Consensus
    conclusion: str
    labels: List[str] = Field(default_factory=list)
    claim_review_count: int = Field(..., ge=0)


class ResponseData(CamelModel):
    initial_claim_analysis: str
    initial_claim_categorization: str
    fact_check_results: List[ClaimReview] = Field(default_factory=list)


class NormalizedResponse(CamelModel):
    """the one response shape both the text and the image path produce"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "summary": {
                "text": "PolitiFact rated the claim False.",
                "consensus": "Strong Consensus",
                "conclusion": "The moon landing was not faked.",
                "labels": ["conspiracy"],
                "claimReviewCount": 1
            },
            "data": {
                "initialClaimAnalysis": "This claim is likely **false** (confidence: 91.2%).",
                "initialClaimCategorization": "Categorized as: conspiracy (confidence: 88.0%)",
                "factCheckResults": []
            }
        }
    })

    summary: ResponseSummary
    data: ResponseData

    @classmethod
    def build(
        cls,
        ai_summary: AISummary,
        labels: List[str],
        claim_reviews: List[ClaimReview],
        initial_claim_analysis: str,
        initial_claim_categorization: str,
    ) -> "NormalizedResponse":
        return cls(
            summary=ResponseSummary(
                text=ai_summary.overview,
                consensus=ai_summary.consensus,
                conclusion=ai_summary.conclusion,
                labels=labels,
                claim_review_count=len(claim_reviews),
            ),
            data=ResponseData(
                initial_claim_analysis=initial_claim_analysis,
                initial_claim_categorization=initial_claim_categorization,
                fact_check_results=claim_reviews,
            ),
        )


# ===== ARTICLES FEED =====

class Article(CamelModel):
    id: str
    title: str
    excerpt: str
    date: str
    publisher: str
    url: str
    image_url: Optional[str] = None
    verdict: str
    category: str
    claim_date: Optional[str] = None
    review_count: int = 0
    original_claim: Optional[str] = None


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    has_next_page: bool
    next_page_token: Optional[str] = None


class ArticlesPage(CamelModel):
    articles: List[Article] = Field(default_factory=list)
    pagination: Pagination
    total_results: int

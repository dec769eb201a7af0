"""
Data models for the Thuis 3D SEO engine.

Uses Pydantic V2 frozen models so every analysis result is an immutable
value. Field aliases keep the camelCase keys the storefront stores.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


# ============================================================================
# Enum Definitions
# ============================================================================

class Language(str, Enum):
    """Languages targeted for the Belgian market."""
    ES = "es"
    EN = "en"
    NL = "nl"

    @classmethod
    def primary(cls) -> "Language":
        """Dutch is the primary target-market language."""
        return cls.NL

    @classmethod
    def priority_order(cls) -> List["Language"]:
        return [cls.NL, cls.EN, cls.ES]


class SearchVolume(str, Enum):
    """Coarse search volume tiers."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class KeywordType(str, Enum):
    """Keyword role in a page's keyword set."""
    PRIMARY = "primary"
    LONG_TAIL = "long-tail"
    SECONDARY = "secondary"


_FROZEN = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=False)


# ============================================================================
# Keyword Models
# ============================================================================

class KeywordAnalysis(BaseModel):
    """A scored and classified keyword candidate."""

    model_config = _FROZEN

    keyword: str
    relevance_score: int = Field(..., ge=0, le=100, alias="relevanceScore")
    search_volume: SearchVolume = Field(..., alias="searchVolume")
    keyword_type: KeywordType = Field(..., alias="keywordType")
    semantic_category: str = Field(..., alias="semanticCategory")
    language: Optional[Language] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary for JSON serialization."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class MultilingualKeywordResult(BaseModel):
    """Keywords per target language plus the deduplicated union."""

    model_config = _FROZEN

    es: List[KeywordAnalysis] = Field(default_factory=list)
    en: List[KeywordAnalysis] = Field(default_factory=list)
    nl: List[KeywordAnalysis] = Field(default_factory=list)
    combined: List[KeywordAnalysis] = Field(default_factory=list)

    def for_language(self, language: Language) -> List[KeywordAnalysis]:
        return getattr(self, Language(language).value)

    def to_dict(self) -> Dict[str, Any]:
        return {
            key: [kw.to_dict() for kw in getattr(self, key)]
            for key in ("es", "en", "nl", "combined")
        }


class KeywordContext(BaseModel):
    """Optional hints that steer keyword extraction."""

    model_config = _FROZEN

    category: Optional[str] = None
    product_type: Optional[str] = Field(default=None, alias="productType")
    language: Language = Field(default_factory=Language.primary)

    @field_validator("language", mode="before")
    @classmethod
    def default_language(cls, v: Any) -> Any:
        """Missing language falls back to the primary market language."""
        return Language.primary() if v is None else v


# ============================================================================
# Content Models
# ============================================================================

class MetaDescriptionResult(BaseModel):
    """Generated meta description with quality metrics."""

    model_config = _FROZEN

    description: str
    character_count: int = Field(..., ge=0, alias="characterCount")
    keyword_density: float = Field(..., ge=0, le=1, alias="keywordDensity")
    readability_score: float = Field(..., ge=0, le=100, alias="readabilityScore")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class SEOConfiguration(BaseModel):
    """SEO settings of a page as edited in the admin screens."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    description: Optional[str] = None
    keywords: Optional[List[str]] = None
    canonical_url: Optional[str] = Field(default=None, alias="canonicalUrl")
    og_image: Optional[str] = Field(default=None, alias="ogImage")


class SEOValidationResult(BaseModel):
    """Outcome of scoring an SEO configuration against the rubric."""

    model_config = _FROZEN

    is_valid: bool = Field(..., alias="isValid")
    score: int = Field(..., ge=0, le=100)
    recommendations: List[str] = Field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# ============================================================================
# Structured Data Inputs
# ============================================================================

class ProductData(BaseModel):
    """Product fields mapped into schema.org Product markup."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    description: str
    price: Optional[float] = None
    currency: Optional[str] = None
    image: Optional[str] = None
    sku: Optional[str] = None
    availability: Optional[str] = None

    @field_validator("availability")
    @classmethod
    def check_availability(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in ("InStock", "OutOfStock", "PreOrder"):
            raise ValueError(f"Unsupported availability: {v}")
        return v


class ArticleData(BaseModel):
    """Blog article fields mapped into schema.org Article markup."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str
    description: str
    author: Optional[str] = None
    date_published: Optional[str] = Field(default=None, alias="datePublished")
    date_modified: Optional[str] = Field(default=None, alias="dateModified")
    image: Optional[str] = None

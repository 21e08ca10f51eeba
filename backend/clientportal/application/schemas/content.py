"""Pydantic schema for the marketing website content document."""

from pydantic import Field

from clientportal.application.schemas.common import CamelModel


class HeroContent(CamelModel):
    headline: str
    subheadline: str
    image_url: str


class StepContent(CamelModel):
    title: str
    description: str


class FeatureContent(CamelModel):
    title: str
    description: str


class PortfolioItem(CamelModel):
    name: str
    image: str


class PricingTier(CamelModel):
    name: str
    price: str
    features: list[str] = Field(default_factory=list)
    popular: bool = False


class Testimonial(CamelModel):
    name: str
    company: str
    text: str
    avatar: str


class CtaContent(CamelModel):
    headline: str
    subheadline: str


class BrandAssets(CamelModel):
    logo_url: str = ""
    favicon_url: str | None = None
    primary_color: str
    secondary_color: str


class SeoMetadata(CamelModel):
    site_title: str
    meta_description: str


class WebsiteContentSchema(CamelModel):
    """Full content document; PUT replaces it wholesale."""

    hero: HeroContent
    how_it_works: list[StepContent]
    why_choose_us: list[FeatureContent]
    portfolio: list[PortfolioItem]
    pricing: list[PricingTier]
    testimonials: list[Testimonial]
    final_cta: CtaContent
    brand_assets: BrandAssets
    seo_metadata: SeoMetadata

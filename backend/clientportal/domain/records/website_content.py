"""Marketing website content — a singleton record edited from the admin console.

Sections are kept as JSON-shaped dicts/lists; their structure is validated at
the API boundary, the record itself treats them as opaque.
"""

import copy
from dataclasses import dataclass, field
from typing import Any

from clientportal.domain.records.base import Record

WEBSITE_CONTENT_ID = "singleton"

_HERO_IMAGE = "https://framerusercontent.com/images/3X5p25sTzE2bH5L3u3Ceo8nZpU.png"
_ALT_IMAGE = "https://framerusercontent.com/images/eOkQd205iAnD0d5wVfLQ216s.png"

DEFAULT_WEBSITE_CONTENT: dict[str, Any] = {
    "hero": {
        "headline": "Your Business, Simplified.",
        "subheadline": "We build smart web apps that help your business run smoother, faster, and smarter.",
        "image_url": _HERO_IMAGE,
    },
    "how_it_works": [
        {"title": "Tell us your needs", "description": "Describe your business process and what you want to achieve."},
        {"title": "We design & build", "description": "Our experts craft a custom web application tailored for you."},
        {"title": "Launch & manage", "description": "Go live and easily manage your operations from anywhere."},
    ],
    "why_choose_us": [
        {"title": "Custom-built workflows", "description": "Apps designed around your unique business processes."},
        {"title": "Cloud-based & secure", "description": "Access your app from anywhere with top-tier security."},
        {"title": "Scales with you", "description": "Our solutions grow as your business grows."},
        {"title": "No tech skills needed", "description": "We handle all the technical details, so you don't have to."},
    ],
    "portfolio": [
        {"name": "CRM Dashboard", "image": _HERO_IMAGE},
        {"name": "Project Manager", "image": _ALT_IMAGE},
        {"name": "Inventory System", "image": _HERO_IMAGE},
        {"name": "Client Portal", "image": _ALT_IMAGE},
    ],
    "pricing": [
        {"name": "Starter", "price": "PKR 999", "features": ["1 Core Workflow", "Up to 5 Users", "Basic Support"], "popular": False},
        {"name": "Growth", "price": "PKR 2499", "features": ["Up to 3 Workflows", "Up to 20 Users", "Priority Support", "Integrations"], "popular": True},
        {"name": "Enterprise", "price": "Custom", "features": ["Unlimited Workflows", "Unlimited Users", "Dedicated Support", "Advanced Security"], "popular": False},
    ],
    "testimonials": [
        {
            "name": "Sarah L.",
            "company": "CEO, Innovate Inc.",
            "text": "What used to take hours now takes minutes. A true game-changer!",
            "avatar": "https://i.pravatar.cc/150?u=a042581f4e29026704d",
        },
        {
            "name": "Mike R.",
            "company": "Founder, Growth Co.",
            "text": "The custom app they built for us is intuitive, fast, and perfectly tailored to our workflow.",
            "avatar": "https://i.pravatar.cc/150?u=a042581f4e29026705d",
        },
    ],
    "final_cta": {
        "headline": "Ready to simplify your business?",
        "subheadline": "Let's build the perfect web app to streamline your operations and fuel your growth.",
    },
    "brand_assets": {
        "logo_url": "",
        "favicon_url": "",
        "primary_color": "#2F80ED",
        "secondary_color": "#5B2EFF",
    },
    "seo_metadata": {
        "site_title": "Smart Web Apps for Smarter Businesses",
        "meta_description": "We build custom web apps that make business operations simpler, faster, and smarter.",
    },
}


def _default(section: str):
    return field(default_factory=lambda: copy.deepcopy(DEFAULT_WEBSITE_CONTENT[section]))


@dataclass
class WebsiteContent(Record):
    id: str = WEBSITE_CONTENT_ID
    hero: dict[str, Any] = _default("hero")
    how_it_works: list[dict[str, Any]] = _default("how_it_works")
    why_choose_us: list[dict[str, Any]] = _default("why_choose_us")
    portfolio: list[dict[str, Any]] = _default("portfolio")
    pricing: list[dict[str, Any]] = _default("pricing")
    testimonials: list[dict[str, Any]] = _default("testimonials")
    final_cta: dict[str, Any] = _default("final_cta")
    brand_assets: dict[str, Any] = _default("brand_assets")
    seo_metadata: dict[str, Any] = _default("seo_metadata")

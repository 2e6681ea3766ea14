from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import Rules

XSS = "<script>alert('xss')</script>"


@pytest.fixture
def project_rules() -> Rules:
    """
    Load the REAL rules from project root.
    """
    rules_path = Path(__file__).parent.parent / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def hostile_props() -> dict:
    """Props where every text and URL field carries a script payload."""
    return {
        "title": XSS,
        "subtitle": XSS,
        "description": XSS,
        "backgroundImage": XSS,
        "backgroundColor": XSS,
        "buttonText": XSS,
        "buttonLink": XSS,
        "src": XSS,
        "alt": XSS,
        "caption": XSS,
        "linkUrl": XSS,
        "image": XSS,
        "imageAlt": XSS,
        "url": XSS,
        "poster": XSS,
        "features": [{"title": XSS, "description": XSS}],
        "services": [{"title": XSS, "description": XSS}],
        "plans": [{"name": XSS, "price": XSS, "period": XSS, "features": [XSS]}],
        "fields": [{"label": XSS, "name": XSS, "type": XSS, "required": True}],
        "members": [{"name": XSS, "role": XSS, "avatar": XSS, "bio": XSS}],
        "faqs": [{"question": XSS, "answer": XSS}],
        "stats": [{"label": XSS, "value": XSS, "description": XSS}],
        "events": [{"title": XSS, "date": XSS, "description": XSS}],
        "items": [{"title": XSS, "description": XSS, "image": XSS, "date": XSS, "excerpt": XSS}],
        "testimonials": [{"quote": XSS, "author": XSS}],
        "logos": [XSS, {"image": XSS, "alt": XSS}],
        "links": [{"href": XSS, "label": XSS}],
        "banners": [{"image": XSS, "alt": XSS, "title": XSS, "description": XSS}],
    }

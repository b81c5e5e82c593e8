"""General text and URL helpers shared by services and routes."""

import re
import secrets
from datetime import datetime, timezone
from typing import Optional


def generate_id() -> str:
    return secrets.token_urlsafe(12)


def create_slug(text: str) -> str:
    """Lowercase, drop punctuation and join words with single dashes."""
    slug = text.lower().strip()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"[\s_-]+", "-", slug)
    return slug.strip("-")


def truncate_text(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def count_lines(text: str) -> int:
    return len(text.split("\n"))


def format_relative_time(moment: datetime, now: Optional[datetime] = None) -> str:
    """Render a timestamp as e.g. "2 days ago"."""
    now = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    seconds = int((now - moment).total_seconds())

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{seconds // 60} minutes ago"
    if seconds < 86400:
        return f"{seconds // 3600} hours ago"
    if seconds < 2592000:
        return f"{seconds // 86400} days ago"
    if seconds < 31536000:
        return f"{seconds // 2592000} months ago"
    return f"{seconds // 31536000} years ago"


def get_snippet_share_url(snippet_id: str, title: str, base_url: str = "") -> str:
    return f"{base_url}/snippets/{snippet_id}/{create_slug(title)}"


def get_profile_url(username: str, base_url: str = "") -> str:
    return f"{base_url}/profile/{username}"


def get_language_url(language: str, base_url: str = "") -> str:
    return f"{base_url}/languages/{create_slug(language)}"

"""Shared helpers for category evaluators."""

import math
from collections.abc import Iterable
from datetime import datetime

from profile_health.models.common import _as_utc
from profile_health.models.model_snapshot import Photo, Service


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties rounding up.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``); scores
    must round 2.5 up to 3.
    """
    return int(math.floor(value + 0.5))


def count_recent(timestamps: Iterable[datetime | None], cutoff: datetime) -> int:
    """Count timestamps strictly after ``cutoff``. Missing timestamps never count."""
    cutoff = _as_utc(cutoff)
    return sum(1 for ts in timestamps if ts is not None and _as_utc(ts) > cutoff)


def first_present(*candidates: str | None) -> str | None:
    """Return the first non-empty candidate, or None."""
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def resolve_photo_category(photo: Photo) -> str | None:
    """Resolve a photo's category.

    Precedence: the photo's own ``category``, then
    ``location_association.category``. Every category-dependent photo check
    goes through this function.
    """
    association = photo.location_association
    return first_present(photo.category, association.category if association else None)


def distinct_categories(photos: Iterable[Photo]) -> list[str]:
    """Distinct non-empty resolved categories in first-seen order."""
    seen: dict[str, None] = {}
    for photo in photos:
        category = resolve_photo_category(photo)
        if category:
            seen.setdefault(category, None)
    return list(seen)


def resolve_service_description(service: Service) -> str | None:
    """Resolve a service description.

    Precedence: plain ``description``, then the structured service item's
    description, then the free-form label's description.
    """
    structured = service.structured_service_item
    label = service.free_form_service_item.label if service.free_form_service_item else None
    return first_present(
        service.description,
        structured.description if structured else None,
        label.description if label else None,
    )


def tier_points(value: float, tiers: list[tuple[float, float]]) -> float:
    """Return the points of the first tier whose threshold ``value`` reaches.

    ``tiers`` is a list of (threshold, points) pairs, highest threshold first.
    """
    for threshold, points in tiers:
        if value >= threshold:
            return points
    return 0

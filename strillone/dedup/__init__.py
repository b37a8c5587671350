"""Time-windowed deduplication of processed events."""

from strillone.dedup.cache import DEFAULT_TTL, DedupCache

__all__ = ["DEFAULT_TTL", "DedupCache"]

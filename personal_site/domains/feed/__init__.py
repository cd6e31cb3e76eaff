from personal_site.domains.feed.entities import FeedItem, FeedMetadata

__all__ = [
    "FeedItem", "FeedMetadata",
]

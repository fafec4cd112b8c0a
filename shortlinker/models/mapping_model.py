from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MappingModel:
    """Represent a short alias to destination URL mapping.

    Attributes:
        alias (str):
            The unique short identifier used as the lookup key.
        destination (str):
            The absolute URL the alias redirects to.
        created_at (datetime):
            Timezone-aware creation time. Never changes after creation.
        expires_at (datetime | None):
            Time after which resolving the alias is rejected as expired.
            None means the mapping never expires.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> mapping = MappingModel(
        ...     alias='abc123',
        ...     destination='https://example.com/article/123',
        ...     created_at=now,
        ...     expires_at=now - timedelta(seconds=1),
        ... )
        >>> mapping.is_expired(now)
        True
    """

    alias: str
    destination: str
    created_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        """Return True if the mapping has an expiry strictly before `now`."""
        return self.expires_at is not None and self.expires_at < now

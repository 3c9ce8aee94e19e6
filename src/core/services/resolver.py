"""Resolution of a user-supplied name pattern against the activity catalog."""

from __future__ import annotations

import re

from core.domain.models import Activity, Catalog
from core.errors import InvalidPatternError, NotFoundError


class ActivityResolver:
    """Case-insensitive, unanchored regex match; first match in catalog order wins.

    The catalog is scanned as given and never re-sorted, so when several
    activities match, catalog order decides (not name, not id).
    """

    @staticmethod
    def compile(pattern: str) -> re.Pattern[str]:
        try:
            return re.compile(pattern, re.IGNORECASE)
        except re.error as exc:
            raise InvalidPatternError(f"invalid pattern {pattern!r}: {exc}") from exc

    def resolve(self, catalog: Catalog, pattern: str | re.Pattern[str]) -> Activity:
        regex = pattern if isinstance(pattern, re.Pattern) else self.compile(pattern)
        for activity in catalog:
            if regex.search(activity.name):
                return activity
        raise NotFoundError(f"no activity matches {regex.pattern!r}")

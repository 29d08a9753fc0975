from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)


def hostname_of(url: object) -> Optional[str]:
    """Return the lower-cased hostname of ``url`` or ``None`` when it has none."""
    if not isinstance(url, str):
        return None
    try:
        return urlsplit(url.strip()).hostname or None
    except ValueError:
        return None


def extract_domains(sources: Iterable[Mapping]) -> List[str]:
    """Unique hostnames of the cited sources, in first-seen order.

    Two pages on the same host count once.  Entries without a parseable
    hostname are skipped with a warning.
    """
    domains: List[str] = []
    seen = set()
    for source in sources or []:
        url = source.get("url") if isinstance(source, Mapping) else None
        host = hostname_of(url)
        if host is None:
            logger.warning("Skipping source with malformed URL: %r", url)
            continue
        if host not in seen:
            seen.add(host)
            domains.append(host)
    return domains

"""Specific documentation URL resolution."""

import logging
from typing import Optional, Sequence

from .domains import get_domain

logger = logging.getLogger(__name__)


def resolve_url(domain: str, topics: Sequence[str]) -> Optional[str]:
    """Map the main topic to a specific documentation URL.

    Only ``topics[0]`` is consulted. Rules are evaluated in the domain's
    priority order and the first rule claiming the topic wins.

    Returns:
        URL string, or None when the caller should use the domain base URL
    """
    if not topics:
        return None

    profile = get_domain(domain)
    if profile is None:
        return None

    main_topic = topics[0]
    for rule in profile.url_rules:
        if rule.applies_to(main_topic):
            return rule.build(main_topic)

    logger.debug(f"No URL rule for topic '{main_topic}' in {domain}")
    return None

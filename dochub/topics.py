"""Topic extraction for classified queries.

Combines the domain's named topic patterns with any quoted terms the user
typed, e.g. ``How do I use "Suspense" boundaries?`` yields ``Suspense``.
"""

import logging
import re
from typing import List

from .domains import get_domain

logger = logging.getLogger(__name__)

# Double- or single-quoted runs; the two quote styles never nest.
QUOTED_TERM_PATTERN = re.compile(r'"([^"]+)"|\'([^\']+)\'')
QUOTE_CHARS_PATTERN = re.compile(r"['\"]")

# Quoted terms this short are too ambiguous to use as topics
MIN_QUOTED_TERM_LENGTH = 3


def _utf16_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text.encode("utf-16-le")) // 2


def extract_quoted_terms(query: str) -> List[str]:
    """Return quoted terms from the raw query, left to right, casing preserved."""
    terms = []
    for match in QUOTED_TERM_PATTERN.finditer(query):
        term = QUOTE_CHARS_PATTERN.sub("", match.group(0))
        if _utf16_length(term) >= MIN_QUOTED_TERM_LENGTH:
            terms.append(term)
    return terms


def extract_topics(query: str, domain: str) -> List[str]:
    """Extract an ordered topic list for a query within a domain.

    Domain pattern labels come first, in the domain's declaration order,
    followed by quoted terms. Duplicates are kept. Domains without patterns,
    including unknown names, contribute nothing but quoted terms.

    Args:
        query: Raw user query
        domain: Domain name, normally the classifier's output

    Returns:
        Ordered list of topic labels; the first entry is the main topic
    """
    query_lower = query.lower()
    topics: List[str] = []

    profile = get_domain(domain)
    if profile is not None:
        topics.extend(p.label for p in profile.topic_patterns if p.matches(query_lower))

    topics.extend(extract_quoted_terms(query))

    logger.debug(f"Extracted topics for {domain}: {topics}")
    return topics

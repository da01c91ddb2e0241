"""Query -> domain -> topics -> URL -> documentation orchestration.

Each public function returns the plain-data payload served by the matching
MCP tool, so the server module only has to register them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .classifier import classify
from .domains import GENERAL_DOMAIN, is_known_domain
from .fetcher import DocumentationFetcher
from .observability.metrics import record_classification
from .topics import extract_topics
from .urls import resolve_url

logger = logging.getLogger(__name__)

DOMAIN_ERROR_MESSAGE = "Error fetching documentation for this domain."


@dataclass
class QueryAnalysis:
    """Outcome of running a query through the classification pipeline."""

    query: str
    domain: str
    topics: List[str] = field(default_factory=list)
    specific_url: Optional[str] = None

    @property
    def main_topic(self) -> Optional[str]:
        return self.topics[0] if self.topics else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "query": self.query,
            "domain": self.domain,
            "topics": list(self.topics),
            "specificUrl": self.specific_url,
        }


def analyze(query: str, domain: Optional[str] = None) -> QueryAnalysis:
    """Run the pure pipeline: classify (unless a domain is given), extract, resolve."""
    resolved_domain = domain or classify(query)
    topics = extract_topics(query, resolved_domain)
    return QueryAnalysis(
        query=query,
        domain=resolved_domain,
        topics=topics,
        specific_url=resolve_url(resolved_domain, topics),
    )


def determine_domain(query: str) -> Dict[str, str]:
    """Classify a query; confidence is "high" unless it fell back to general."""
    domain = classify(query)
    record_classification(domain)
    return {
        "domain": domain,
        "confidence": "high" if domain != GENERAL_DOMAIN else "low",
    }


def topics_for(query: str, domain: str) -> Dict[str, Any]:
    """Topic list for a query within an explicit domain."""
    topics = extract_topics(query, domain)
    return {"topics": topics, "count": len(topics)}


async def fetch_documentation(
    query: str,
    domain: Optional[str] = None,
    fetcher: Optional[DocumentationFetcher] = None,
) -> Dict[str, Any]:
    """Resolve the best documentation page for a query and fetch it.

    An explicitly supplied domain skips classification. Unknown domains and
    fetch failures are reported through an ``error`` field rather than raised.

    Args:
        query: User query
        domain: Optional domain override
        fetcher: Fetcher to use (default: a new DocumentationFetcher)

    Returns:
        Dict with domain, topics, specificUrl, content and source
    """
    if not domain:
        domain = classify(query)
        record_classification(domain)

    if not is_known_domain(domain):
        error = f"Unknown domain: {domain}"
        logger.error(f"Error fetching documentation: {error}")
        return {
            "domain": domain,
            "content": DOMAIN_ERROR_MESSAGE,
            "error": error,
        }

    analysis = analyze(query, domain)
    fetcher = fetcher or DocumentationFetcher()
    result = await fetcher.read_domain(domain, analysis.specific_url)

    response: Dict[str, Any] = {
        "domain": domain,
        "topics": analysis.topics or [GENERAL_DOMAIN],
        "specificUrl": analysis.specific_url,
        "content": result.content,
        "source": result.source,
    }
    if result.error is not None:
        response["error"] = result.error
    return response

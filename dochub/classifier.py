"""
Keyword-based domain classifier.

Scores a free-text query against each domain's keyword set and picks the
domain with the most keyword hits. Queries that hit no keyword at all fall
back to the general domain.
"""

import logging
from typing import Dict, Mapping, Optional

from .domains import DOMAINS, GENERAL_DOMAIN, DomainProfile

logger = logging.getLogger(__name__)


class DomainClassifier:
    """Classify queries into documentation domains by keyword containment.

    Scoring rules:
        - A keyword scores 1 if it occurs anywhere in the lowercased query
          (substring containment, repeated occurrences still score 1)
        - The domain with the strictly highest score wins
        - Ties go to the domain declared first in the registry
        - A best score of 0 resolves to the general domain
    """

    def __init__(self, domains: Optional[Mapping[str, DomainProfile]] = None):
        self._domains = domains if domains is not None else DOMAINS

    def score(self, query: str) -> Dict[str, int]:
        """Count distinct keyword hits per domain, in registry order.

        Args:
            query: Input query string

        Returns:
            Mapping of domain name to keyword hit count
        """
        query_lower = query.lower()
        return {
            name: sum(1 for keyword in profile.keywords if keyword in query_lower)
            for name, profile in self._domains.items()
        }

    def classify(self, query: str) -> str:
        """Return the best matching domain name for a query.

        Args:
            query: Input query string

        Returns:
            Domain name, or "general" when no keyword matches
        """
        best_domain = GENERAL_DOMAIN
        highest_score = 0

        for name, score in self.score(query).items():
            # Strict comparison keeps the first domain on ties
            if score > highest_score:
                highest_score = score
                best_domain = name

        logger.debug(f"Classified query as {best_domain} (score={highest_score})")
        return best_domain


_default_classifier = DomainClassifier()


def classify(query: str) -> str:
    """Classify a query using the built-in domain registry."""
    return _default_classifier.classify(query)


def score_domains(query: str) -> Dict[str, int]:
    """Per-domain keyword scores for a query using the built-in registry."""
    return _default_classifier.score(query)

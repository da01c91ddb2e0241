"""Explain how queries are routed to documentation.

Runs queries through classification, topic extraction and URL resolution and
prints each decision. No documentation is fetched.

Usage:
    dochub-explain "How do I use useState hook in React?"
    dochub-explain --domain python-docs "reading a file"
    dochub-explain            # built-in sample queries
    dochub-explain --json "Express routing"
"""

import argparse
import json
import sys
from typing import List, Optional, Sequence

from .classifier import score_domains
from .domains import DOMAINS
from .pipeline import QueryAnalysis, analyze

SAMPLE_QUERIES = [
    # React queries
    "How do I use useState hook in React?",
    "What are React components and how do they work?",
    "Explain props in React",
    "How does JSX work in React?",

    # Node.js queries
    "How to read files in Node.js?",
    "Creating an HTTP server in Node",
    "What is the path module in Node.js?",
    "How to use Express.js for routing?",

    # Python queries
    "How to work with lists in Python",
    "Python dictionary examples",
    "Creating classes in Python",
    "Using pandas DataFrame in Python",

    # Mixed or ambiguous queries
    "What's the difference between Node.js and Python?",
    "How to handle events",
    "Best practices for file handling",
]


def format_analysis(analysis: QueryAnalysis, show_scores: bool = False) -> str:
    """Render one analysis as the human-readable report block."""
    lines = [
        "-" * 37,
        f'Query: "{analysis.query}"',
        f"Domain: {analysis.domain}",
    ]
    if show_scores:
        scores = score_domains(analysis.query)
        lines.append("Scores: " + ", ".join(f"{name}={score}" for name, score in scores.items()))
    lines.append(f"Topics: {', '.join(analysis.topics) if analysis.topics else 'None detected'}")
    lines.append(
        f"Specific URL: {analysis.specific_url or 'No specific URL constructed, would use base URL'}"
    )
    lines.append("-" * 37)
    return "\n".join(lines)


def run(queries: Sequence[str], domain: Optional[str] = None) -> List[QueryAnalysis]:
    return [analyze(query, domain) for query in queries]


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Show how queries are classified, which topics are found and which URL would be fetched"
    )
    parser.add_argument(
        "queries",
        nargs="*",
        help="Queries to explain (default: built-in sample set)"
    )
    parser.add_argument(
        "--domain",
        choices=list(DOMAINS),
        help="Skip classification and use this domain"
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Show per-domain keyword scores"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON object per query instead of the text report"
    )

    args = parser.parse_args(argv)
    analyses = run(args.queries or SAMPLE_QUERIES, args.domain)

    if args.json:
        for analysis in analyses:
            print(json.dumps(analysis.to_dict()))
        return 0

    print("=" * 60)
    print("DOCUMENTATION ROUTING")
    print("=" * 60)
    for analysis in analyses:
        print()
        print(format_analysis(analysis, show_scores=args.scores))
    return 0


if __name__ == "__main__":
    sys.exit(main())

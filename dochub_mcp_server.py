#!/usr/bin/env python3
"""Documentation Hub MCP Server - route technical questions to the right docs.

This server exposes the documentation hub as MCP tools and resources, enabling
any MCP-compatible client (VS Code Copilot, Claude Desktop, Cursor, etc.) to:
- Classify a query into a documentation domain (React, Node.js, Python)
- Extract the topics a query is about
- Fetch the most specific documentation page for a query

Usage:
    # Direct execution (stdio transport)
    python dochub_mcp_server.py

    # Installed entry point
    dochub-mcp-server

Requirements:
    pip install -e .
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from dochub.config import get_config
from dochub.domains import DOMAINS
from dochub.fetcher import DocumentationFetcher
from dochub.observability.metrics import export_metrics
from dochub import pipeline

# Configure logging (stderr; stdout carries the stdio transport)
logging.basicConfig(
    level=getattr(logging, get_config().server.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("dochub-mcp")

server = FastMCP(get_config().server.name)


# Log startup info on first tool call
_startup_logged = False


def _log_startup_info():
    """Log startup information once per process."""
    global _startup_logged
    if _startup_logged:
        return
    _startup_logged = True

    config = get_config()
    logger.info("=" * 60)
    logger.info(f"Documentation Hub MCP Server {config.server.version}")
    logger.info(f"  PID: {os.getpid()}")
    logger.info(f"  Domains: {', '.join(DOMAINS)}")
    logger.info(f"  Fetch timeout: {config.fetch.timeout}s, retries: {config.fetch.max_retries}")
    logger.info("=" * 60)


# Global fetcher (lazy initialization)
_fetcher: Optional[DocumentationFetcher] = None


def get_fetcher() -> DocumentationFetcher:
    """Get or create the documentation fetcher singleton."""
    global _fetcher
    if _fetcher is None:
        _fetcher = DocumentationFetcher(get_config().fetch)
    return _fetcher


# ============================================================================
# FastMCP Tool Definitions
# ============================================================================

@server.tool(name="determine-domain")
async def determine_domain(query: str) -> Dict[str, Any]:
    """Determines which technical domain a query belongs to.

    Returns the domain (react-docs, node-docs, python-docs or general) and a
    confidence of "high", or "low" when no domain keyword was found.

    Args:
        query: The user query to classify
    """
    _log_startup_info()
    logger.info(f"determine-domain called: query='{query}'")
    return pipeline.determine_domain(query)


@server.tool(name="extract-topics")
async def extract_topics(query: str, domain: str) -> Dict[str, Any]:
    """Extracts the documentation topics a query refers to within a domain.

    Quoted terms in the query ("like this") are always included as topics.

    Args:
        query: The user query
        domain: Domain to match topics in (react-docs, node-docs, python-docs, general)
    """
    _log_startup_info()
    logger.info(f"extract-topics called: query='{query}', domain={domain}")
    return pipeline.topics_for(query, domain)


@server.tool(name="fetch-documentation")
async def fetch_documentation(query: str, domain: Optional[str] = None) -> Dict[str, Any]:
    """Fetches documentation based on query and domain.

    Picks the most specific documentation page for the query's main topic and
    falls back to the domain's documentation home page.

    Args:
        query: The user query
        domain: Optional domain override
    """
    _log_startup_info()
    logger.info(f"fetch-documentation called: query='{query}', domain={domain}")
    return await pipeline.fetch_documentation(query, domain, fetcher=get_fetcher())


# ============================================================================
# Resources
# ============================================================================

@server.resource(
    "docs://domains",
    name="domains",
    description="Documentation domains known to the hub",
    mime_type="application/json",
)
async def list_domains() -> str:
    """Describe every documentation domain, its base URL and topics."""
    return json.dumps([profile.to_dict() for profile in DOMAINS.values()], indent=2)


@server.resource(
    "docs://{domain}",
    name="domain-docs",
    description="Documentation home page for a domain (react-docs, node-docs, python-docs, general)",
    mime_type="application/json",
)
async def read_domain_docs(domain: str) -> str:
    """Fetch a domain's documentation home page with source metadata."""
    _log_startup_info()
    result = await get_fetcher().read_domain(domain)
    return json.dumps(result.to_dict(), indent=2)


@server.resource(
    "metrics://dochub",
    name="metrics",
    description="Classification and fetch metrics in Prometheus text format",
    mime_type="text/plain",
)
async def read_metrics() -> str:
    """Current Prometheus metrics."""
    return export_metrics()


# ============================================================================
# Main Entry Point
# ============================================================================

def main():
    """Run the MCP server."""
    logger.info("Documentation Hub MCP Server started")
    server.run()


if __name__ == "__main__":
    main()

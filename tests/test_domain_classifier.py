"""
Tests for DomainClassifier in classifier.py

Covers keyword scoring, the first-declared tie-break and the general fallback.
"""
import unittest

import pytest

from dochub.classifier import DomainClassifier, classify, score_domains
from dochub.domains import DOMAINS, GENERAL_DOMAIN


@pytest.mark.unit
class TestDomainClassifier(unittest.TestCase):
    """Test suite for keyword-based domain classification."""

    def setUp(self):
        self.classifier = DomainClassifier()

    def test_single_domain_queries(self):
        """Queries with keywords from one domain resolve to that domain."""
        cases = {
            "Explain props in React": "react-docs",
            "How does JSX work in React?": "react-docs",
            "Creating an HTTP server in Node": "node-docs",
            "How to use Express.js for routing?": "node-docs",
            "Python dictionary examples": "python-docs",
            "Using pandas DataFrame in Python": "python-docs",
        }

        for query, expected in cases.items():
            with self.subTest(query=query):
                self.assertEqual(self.classifier.classify(query), expected)

    def test_no_keywords_falls_back_to_general(self):
        """Queries without any configured keyword resolve to general."""
        queries = [
            "Best practices for file handling",
            "How to handle events",
            "",
            "   ",
        ]

        for query in queries:
            with self.subTest(query=query):
                self.assertEqual(self.classifier.classify(query), GENERAL_DOMAIN)

    def test_matching_is_case_insensitive(self):
        """Keyword containment ignores case."""
        self.assertEqual(self.classifier.classify("NUMPY BROADCASTING"), "python-docs")
        self.assertEqual(self.classifier.classify("NpM InStAlL"), "node-docs")

    def test_keyword_counts_once_regardless_of_frequency(self):
        """Repeated keywords add nothing; containment, not frequency."""
        scores = self.classifier.score("react react react react")
        self.assertEqual(scores["react-docs"], 1)

    def test_keywords_match_as_substrings(self):
        """Keywords match inside longer words, e.g. 'state' in 'useState'."""
        scores = self.classifier.score("useState")
        self.assertEqual(scores["react-docs"], 1)

        # "component" inside "components", "module" inside "modules"
        self.assertEqual(self.classifier.score("components")["react-docs"], 1)
        self.assertEqual(self.classifier.score("modules")["node-docs"], 1)

    def test_highest_score_wins(self):
        """A domain with more distinct keyword hits beats one with fewer."""
        # node: node, module -> 2; python: python -> 1
        query = "Loading a node module from python"
        self.assertEqual(self.classifier.classify(query), "node-docs")

        # python: python, pip, django -> 3; node: npm -> 1
        query = "python pip install django vs npm"
        self.assertEqual(self.classifier.classify(query), "python-docs")

    def test_tie_goes_to_first_declared_domain(self):
        """One keyword each from two domains resolves to the earlier domain."""
        cases = [
            ("react or python", "react-docs"),
            ("python or react", "react-docs"),
            ("npm and flask", "node-docs"),
            ("flask and npm", "node-docs"),
            ("jsx with express", "react-docs"),
        ]

        for query, expected in cases:
            with self.subTest(query=query):
                self.assertEqual(self.classifier.classify(query), expected)

    def test_score_reports_every_domain_in_order(self):
        """Scores cover every registry domain in declaration order."""
        scores = self.classifier.score("anything")
        self.assertEqual(list(scores), list(DOMAINS))
        self.assertEqual(scores[GENERAL_DOMAIN], 0)

    def test_classification_is_deterministic(self):
        """The same query always yields the same domain."""
        query = "What's the difference between Node.js and Python?"
        results = {self.classifier.classify(query) for _ in range(20)}
        self.assertEqual(results, {"node-docs"})

    def test_result_is_always_a_registered_domain(self):
        """Classification is total over arbitrary input."""
        queries = ["", "?", "ünïcödé react", "'\"", "x" * 10_000, "STATE\nHOOK\tJSX"]

        for query in queries:
            with self.subTest(query=query[:20]):
                self.assertIn(self.classifier.classify(query), DOMAINS)


class TestModuleHelpers:
    """Module-level helpers delegate to the default classifier."""

    def test_classify_helper(self):
        assert classify("How to work with lists in Python") == "python-docs"

    def test_score_domains_helper(self):
        scores = score_domains("How do I use useState hook in React?")
        # react, hook, state
        assert scores["react-docs"] == 3
        assert scores["node-docs"] == 0
        assert scores["python-docs"] == 0

    def test_custom_registry(self):
        """A classifier can be built over a reduced registry."""
        only_python = {"python-docs": DOMAINS["python-docs"]}
        classifier = DomainClassifier(only_python)
        assert classifier.classify("react hooks") == GENERAL_DOMAIN
        assert classifier.classify("flask routes") == "python-docs"

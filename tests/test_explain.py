"""Tests for the dochub-explain diagnostic CLI."""

import json

import pytest

from dochub.explain import SAMPLE_QUERIES, format_analysis, main, run
from dochub.pipeline import QueryAnalysis


class TestFormatting:

    def test_report_with_url(self):
        analysis = QueryAnalysis(
            "Explain props in React",
            "react-docs",
            ["props"],
            "https://react.dev/learn/passing-props-to-a-component",
        )
        text = format_analysis(analysis)
        assert 'Query: "Explain props in React"' in text
        assert "Domain: react-docs" in text
        assert "Topics: props" in text
        assert "Specific URL: https://react.dev/learn/passing-props-to-a-component" in text

    def test_report_without_topics(self):
        text = format_analysis(QueryAnalysis("How to handle events", "general"))
        assert "Topics: None detected" in text
        assert "No specific URL constructed, would use base URL" in text

    def test_report_with_scores(self):
        text = format_analysis(QueryAnalysis("react and npm", "react-docs"), show_scores=True)
        assert "Scores: react-docs=1, node-docs=1, python-docs=0, general=0" in text


class TestMain:

    def test_runs_sample_set_by_default(self, capsys):
        assert main([]) == 0
        out = capsys.readouterr().out
        assert "DOCUMENTATION ROUTING" in out
        assert out.count("Query: ") == len(SAMPLE_QUERIES)

    def test_json_output(self, capsys):
        assert main(["--json", "How to work with lists in Python"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == {
            "query": "How to work with lists in Python",
            "domain": "python-docs",
            "topics": ["list"],
            "specificUrl": "https://docs.python.org/3/library/stdtypes.html#lists",
        }

    def test_domain_override(self, capsys):
        main(["--json", "--domain", "node-docs", "streams everywhere"])
        data = json.loads(capsys.readouterr().out)
        assert data["domain"] == "node-docs"
        assert data["topics"] == []

    def test_rejects_unknown_domain(self):
        with pytest.raises(SystemExit):
            main(["--domain", "vue-docs", "anything"])

    def test_run_returns_one_analysis_per_query(self):
        analyses = run(["react", "npm", "pip"])
        assert [a.domain for a in analyses] == ["react-docs", "node-docs", "python-docs"]

"""Documentation domain registry.

Static, immutable profiles for every documentation domain the hub knows about.
Each profile bundles the keywords used for classification, the named topic
patterns used for topic extraction, the ordered URL rules used to pick a
specific documentation page, and the base URL fetched when no rule applies.

Declaration order is significant:
- DOMAINS iteration order is the classifier's tie-break order
- TopicPattern order is the order topics are reported in
- UrlRule order is the priority in which rules are evaluated
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Pattern, Tuple

GENERAL_DOMAIN = "general"


@dataclass(frozen=True)
class TopicPattern:
    """A topic label and the case-insensitive regex that detects it."""

    label: str
    regex: Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


@dataclass(frozen=True)
class UrlRule:
    """Maps one or more topic labels to a documentation URL.

    ``template`` may reference the matched label as ``{topic}``; templates
    without a placeholder are literal URLs.
    """

    labels: frozenset
    template: str

    def applies_to(self, topic: str) -> bool:
        return topic in self.labels

    def build(self, topic: str) -> str:
        return self.template.format(topic=topic)


@dataclass(frozen=True)
class DomainProfile:
    """Immutable configuration for a single documentation domain."""

    name: str
    description: str
    base_url: Optional[str]
    keywords: Tuple[str, ...] = ()
    topic_patterns: Tuple[TopicPattern, ...] = ()
    url_rules: Tuple[UrlRule, ...] = ()

    @property
    def topic_labels(self) -> Tuple[str, ...]:
        return tuple(p.label for p in self.topic_patterns)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "baseUrl": self.base_url,
            "keywords": list(self.keywords),
            "topics": list(self.topic_labels),
        }


# ECMAScript whitespace; Python's Unicode \s also accepts \x1c-\x1f and \x85
WHITESPACE_CLASS = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"


def _patterns(*pairs: Tuple[str, str]) -> Tuple[TopicPattern, ...]:
    """Compile topic regexes with ASCII word boundaries.

    ``\\b`` must treat letters such as CJK or accented characters as non-word
    characters, so ``list`` in ``pythonのlistの使い方`` is a whole word.
    """
    return tuple(
        TopicPattern(label, re.compile(expr.replace(r"\s", WHITESPACE_CLASS), re.IGNORECASE | re.ASCII))
        for label, expr in pairs
    )


def _rule(labels, template: str) -> UrlRule:
    if isinstance(labels, str):
        labels = (labels,)
    return UrlRule(frozenset(labels), template)


REACT_HOOKS = (
    "useState",
    "useEffect",
    "useContext",
    "useReducer",
    "useCallback",
    "useMemo",
    "useRef",
)

PYTHON_BUILTIN_TYPES = ("list", "dict", "tuple", "set", "string")


REACT = DomainProfile(
    name="react-docs",
    description="React.js documentation",
    base_url="https://react.dev/reference/react",
    keywords=("react", "component", "jsx", "hook", "props", "state"),
    topic_patterns=_patterns(
        ("useState", r"use\s*state"),
        ("useEffect", r"use\s*effect"),
        ("useContext", r"use\s*context"),
        ("useReducer", r"use\s*reducer"),
        ("useCallback", r"use\s*callback"),
        ("useMemo", r"use\s*memo"),
        ("useRef", r"use\s*ref"),
        ("components", r"component"),
        ("props", r"props"),
        ("state", r"state\b"),
        ("jsx", r"jsx"),
        ("rendering", r"render"),
        ("events", r"event"),
    ),
    url_rules=(
        # Hooks share one reference page layout, so they go first
        _rule(REACT_HOOKS, "https://react.dev/reference/react/{topic}"),
        _rule("components", "https://react.dev/learn/your-first-component"),
        _rule("props", "https://react.dev/learn/passing-props-to-a-component"),
        _rule("state", "https://react.dev/learn/state-a-components-memory"),
        _rule("jsx", "https://react.dev/learn/writing-markup-with-jsx"),
        _rule("events", "https://react.dev/learn/responding-to-events"),
        _rule("rendering", "https://react.dev/learn/render-and-commit"),
    ),
)

NODE = DomainProfile(
    name="node-docs",
    description="Node.js documentation",
    base_url="https://nodejs.org/en/docs",
    keywords=("node", "express", "npm", "package", "module", "require"),
    topic_patterns=_patterns(
        ("fs", r"\bfs\b|file\s*system"),
        ("http", r"\bhttp\b|\bserver\b"),
        ("path", r"\bpath\b"),
        ("buffer", r"\bbuffer\b"),
        ("stream", r"\bstream\b"),
        ("events", r"\bevents\b"),
        ("modules", r"\bmodule\b|\brequire\b|\bimport\b"),
        ("npm", r"\bnpm\b|\bpackage\b"),
        ("express", r"\bexpress\b"),
        ("process", r"\bprocess\b"),
    ),
    url_rules=(
        _rule("fs", "https://nodejs.org/api/fs.html"),
        _rule("http", "https://nodejs.org/api/http.html"),
        _rule("path", "https://nodejs.org/api/path.html"),
        _rule("buffer", "https://nodejs.org/api/buffer.html"),
        _rule("stream", "https://nodejs.org/api/stream.html"),
        _rule("events", "https://nodejs.org/api/events.html"),
        _rule("modules", "https://nodejs.org/api/modules.html"),
        _rule("process", "https://nodejs.org/api/process.html"),
        _rule("npm", "https://docs.npmjs.com/"),
        _rule("express", "https://expressjs.com/en/api.html"),
    ),
)

PYTHON = DomainProfile(
    name="python-docs",
    description="Python documentation",
    base_url="https://docs.python.org/3/",
    keywords=("python", "pip", "django", "flask", "pandas", "numpy"),
    topic_patterns=_patterns(
        ("list", r"\blist\b|\blists\b"),
        ("dict", r"\bdict\b|\bdictionary\b|\bdictionaries\b"),
        ("tuple", r"\btuple\b|\btuples\b"),
        ("set", r"\bset\b|\bsets\b"),
        ("string", r"\bstring\b|\bstr\b"),
        ("file", r"\bfile\b|\bopen\b|\bread\b|\bwrite\b"),
        ("class", r"\bclass\b|\bobject\b|\binheritance\b"),
        ("function", r"\bfunction\b|\bdef\b"),
        ("module", r"\bmodule\b|\bimport\b"),
        ("pandas", r"\bpandas\b|\bpd\b|\bdataframe\b"),
        ("numpy", r"\bnumpy\b|\bnp\b|\barray\b"),
        ("django", r"\bdjango\b"),
        ("flask", r"\bflask\b"),
    ),
    url_rules=(
        # Built-in types live on one stdtypes page, anchored by plural label
        _rule(PYTHON_BUILTIN_TYPES, "https://docs.python.org/3/library/stdtypes.html#{topic}s"),
        _rule("file", "https://docs.python.org/3/tutorial/inputoutput.html#reading-and-writing-files"),
        _rule("class", "https://docs.python.org/3/tutorial/classes.html"),
        _rule("function", "https://docs.python.org/3/tutorial/controlflow.html#defining-functions"),
        _rule("module", "https://docs.python.org/3/tutorial/modules.html"),
        _rule("pandas", "https://pandas.pydata.org/docs/user_guide/index.html"),
        _rule("numpy", "https://numpy.org/doc/stable/user/index.html"),
        _rule("django", "https://docs.djangoproject.com/en/stable/"),
        _rule("flask", "https://flask.palletsprojects.com/en/latest/"),
    ),
)

GENERAL = DomainProfile(
    name=GENERAL_DOMAIN,
    description="General documentation when domain is unclear",
    base_url=None,
)


# Read-only registry; insertion order is the classifier tie-break order.
DOMAINS: Mapping[str, DomainProfile] = MappingProxyType(
    {profile.name: profile for profile in (REACT, NODE, PYTHON, GENERAL)}
)


def get_domain(name: str) -> Optional[DomainProfile]:
    """Look up a domain profile by name, or None if unknown."""
    return DOMAINS.get(name)


def is_known_domain(name: str) -> bool:
    return name in DOMAINS


def domain_names() -> Tuple[str, ...]:
    return tuple(DOMAINS)

"""Function signature matchers.

Each matcher recognises the opening line of a function or method in one
language family and captures its name. Matchers are tried in priority order
and the first match wins; no grammar is involved.

Adding a family:
  1. Append a SignatureMatcher to FUNCTION_SIGNATURES.
  2. Group 1 of the pattern must capture the function name.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass(frozen=True)
class SignatureMatch:
    """A successful signature match: which matcher fired and what it named."""

    family: str
    name: str


@dataclass(frozen=True)
class SignatureMatcher:
    """A single language-family signature pattern."""

    family: str
    pattern: re.Pattern[str]

    def match(self, text: str) -> Optional[SignatureMatch]:
        m = self.pattern.match(text)
        if m is None:
            return None
        return SignatureMatch(family=self.family, name=m.group(1))


FUNCTION_SIGNATURES: tuple[SignatureMatcher, ...] = (
    # JS/TS: function name(...), async function, export function
    SignatureMatcher(
        "function",
        re.compile(r"^\s*(?:export\s+)?(?:async\s+)?function\s+(\w+)"),
    ),
    # JS/TS: const name = (...) => / const name = async (...) =>
    SignatureMatcher(
        "arrow",
        re.compile(r"^\s*(?:export\s+)?(?:const|let|var)\s+(\w+)\s*=\s*(?:async\s+)?\("),
    ),
    # C-family / Java / C# / TS class methods: name(args): T {
    SignatureMatcher(
        "method",
        re.compile(
            r"^\s*(?:(?:public|private|protected|static|async)\s+)*(\w+)\s*\([^)]*\)\s*(?::\s*\S+)?\s*\{"
        ),
    ),
    # Python: def name( / async def name(
    SignatureMatcher("def", re.compile(r"^\s*(?:async\s+)?def\s+(\w+)\s*\(")),
    # Go: func name( / func (r *T) name(
    SignatureMatcher("func", re.compile(r"^\s*func\s+(?:\([^)]*\)\s+)?(\w+)\s*\(")),
    # Rust: fn name / pub async fn name
    SignatureMatcher("fn", re.compile(r"^\s*(?:pub\s+)?(?:async\s+)?fn\s+(\w+)")),
)


def match_signature(
    text: str, matchers: Sequence[SignatureMatcher] = FUNCTION_SIGNATURES
) -> Optional[SignatureMatch]:
    """Return the first matcher's result for ``text``, or None."""
    for matcher in matchers:
        result = matcher.match(text)
        if result is not None:
            return result
    return None

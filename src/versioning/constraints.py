"""Version constraint expressions evaluated against semantic versions.

Each ``||`` alternative is handed to ``semantic_version.NpmSpec`` and, when
npm syntax cannot express it (``!=``, ``==``, ``~=``), to
``semantic_version.SimpleSpec``. Before that, a few aliases are normalized:
  - ``=>``/``=<`` become ``>=``/``<=`` and ``~>`` becomes ``~``
  - commas join clauses like whitespace does
  - a ``v`` in front of an operand is dropped (``>=v1.2``)
  - an operator may be detached from its operand (``>= 1.2``)
  - hyphen ranges ``1.2 - 1.4.5`` become ``>=1.2 <=1.4.5``

Pre-release versions only match an alternative in which some operand names
a pre-release, so ``>=1.0.0`` never selects ``2.0.0-rc.1`` and ``<2.0.0``
never selects ``2.0.0-beta``.
"""
from __future__ import annotations

import re
from typing import List, Tuple

import semantic_version

_DETACHED_OP_RE = re.compile(r"(!=|==|~=|>=|<=|[=<>~^])\s+")
_LEADING_V_RE = re.compile(r"(?:(?<=[\s,=<>~^!])|^)v(?=\d)")
_WILDCARD_RE = re.compile(r"(?:(?<=[.=<>~^!])|^)[xX](?=\.|$)")
_OPERAND_START_RE = re.compile(r"^[0-9xX*]")
# Complete operands are checked with the strict parser ("1.0.0-01" is not semver)
_FULL_OPERAND_RE = re.compile(r"^(?:!=|==|~=|>=|<=|[=<>~^])?(\d+\.\d+\.\d+(?:[-+].*)?)$")

_ALIASES = (("=>", ">="), ("=<", "<="), ("~>", "~"))

Alternative = Tuple[semantic_version.base.BaseSpec, bool]


class InvalidConstraintError(ValueError):
    """Raised when an expression is not a valid version constraint."""


def _tokens(group: str) -> List[str]:
    for alias, operator in _ALIASES:
        group = group.replace(alias, operator)
    group = _DETACHED_OP_RE.sub(r"\1", group)
    group = _LEADING_V_RE.sub("", group)
    return [token for token in re.split(r"[\s,]+", group) if token]


def _lower_hyphen_ranges(tokens: List[str]) -> List[str]:
    """Rewrite ``a - b`` as ``>=a <=b``; both ends must be bare versions."""
    lowered: List[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        if index + 1 < len(tokens) and tokens[index + 1] == "-":
            if index + 2 >= len(tokens):
                raise ValueError("hyphen range without upper bound")
            upper = tokens[index + 2]
            if not (_OPERAND_START_RE.match(token) and _OPERAND_START_RE.match(upper)):
                raise ValueError("hyphen range bounds must be plain versions")
            lowered.extend([">=" + token, "<=" + upper])
            index += 3
            continue
        if token == "-":
            raise ValueError("hyphen range without lower bound")
        lowered.append(token)
        index += 1
    return lowered


def _names_prerelease(tokens: List[str]) -> bool:
    """Validate complete operands; True when one of them carries a pre-release."""
    prerelease = False
    for token in tokens:
        match = _FULL_OPERAND_RE.match(token)
        if match is not None and semantic_version.Version(match.group(1)).prerelease:
            prerelease = True
    return prerelease


def _parse_alternative(group: str) -> Alternative:
    tokens = _lower_hyphen_ranges(_tokens(group))
    if not tokens:
        raise ValueError("empty constraint")
    allow_prerelease = _names_prerelease(tokens)
    try:
        spec = semantic_version.NpmSpec(" ".join(tokens))
    except ValueError:
        # SimpleSpec takes comma separated clauses and only "*" as a wildcard
        spec = semantic_version.SimpleSpec(",".join(_WILDCARD_RE.sub("*", token) for token in tokens))
    return spec, allow_prerelease


class VersionConstraint:
    """A predicate over versions, e.g. ``VersionConstraint(">=1.0.0 <2.0.0")``.

    Raises:
        InvalidConstraintError: if ``expression`` cannot be parsed.
    """

    def __init__(self, expression: str):
        if not isinstance(expression, str) or not expression.strip():
            raise InvalidConstraintError(f"improper constraint: {expression!r}")
        self.expression = expression
        try:
            self._alternatives = [_parse_alternative(group) for group in expression.split("||")]
        except ValueError as exc:
            raise InvalidConstraintError(f"improper constraint: {expression!r}: {exc}") from exc

    def match(self, version: semantic_version.Version) -> bool:
        """Return True when ``version`` satisfies any ``||`` alternative."""
        for spec, allow_prerelease in self._alternatives:
            if version.prerelease and not allow_prerelease:
                continue
            if spec.match(version):
                return True
        return False

    def __contains__(self, version: semantic_version.Version) -> bool:
        return self.match(version)

    def __repr__(self) -> str:
        return f"VersionConstraint({self.expression!r})"

    def __str__(self) -> str:
        return self.expression

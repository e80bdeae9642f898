"""Tests for constraint expression semantics."""

import pytest

from src.versioning.constraints import InvalidConstraintError, VersionConstraint
from src.versioning.validator import parse_version


def matches(expression, version):
    return VersionConstraint(expression).match(parse_version(version))


class TestComparisons:
    """Comparison operators on full and partial operands."""

    @pytest.mark.parametrize("expression,version,expected", [
        ("1.2.3", "1.2.3", True),
        ("=1.2.3", "1.2.4", False),
        ("1.2.3", "1.2.3+build.5", True),
        (">1.2.3", "1.2.4", True),
        (">1.2.3", "1.2.3", False),
        (">=1.2.3", "1.2.3", True),
        ("<1.2.3", "1.2.2", True),
        ("<1.2.3", "1.2.3", False),
        ("<=1.2.3", "1.2.3", True),
        ("!=1.2.3", "1.2.3", False),
        ("!=1.2.3", "1.2.4", True),
        ("=>1.0.0", "1.0.0", True),
        ("=<1.0.0", "1.0.1", False),
    ])
    def test_full_operands(self, expression, version, expected):
        assert matches(expression, version) is expected

    @pytest.mark.parametrize("expression,version,expected", [
        ("1.2", "1.2.9", True),
        ("1.2", "1.3.0", False),
        ("v1", "1.9.9", True),
        ("v1", "2.0.0", False),
        (">1.2", "1.2.9", False),
        (">1.2", "1.3.0", True),
        (">1", "1.9.0", False),
        (">1", "2.0.0", True),
        ("<=1.2", "1.2.9", True),
        ("<=1.2", "1.3.0", False),
        ("<2", "1.99.0", True),
        ("<2", "2.0.0", False),
        ("!=1.2", "1.2.5", False),
        ("!=1.2", "1.3.0", True),
    ])
    def test_partial_operands(self, expression, version, expected):
        assert matches(expression, version) is expected

    def test_operator_may_be_detached_from_operand(self):
        assert matches(">= 1.0.0", "1.0.0") is True

    def test_v_prefix_after_operator(self):
        assert matches(">=v1.2", "1.2.0") is True
        assert matches("<v2", "2.0.0") is False

    def test_not_equal_combined_with_range(self):
        assert matches(">=1.0.0 !=1.2.3", "1.2.3") is False
        assert matches(">=1.0.0, !=1.2.3", "1.2.4") is True
        assert matches(">=1.0.0 !=1.2.3", "0.9.0") is False


class TestWildcards:
    """x, X and * stand for any value in that position."""

    @pytest.mark.parametrize("expression,version,expected", [
        ("1.0.x", "1.0.7", True),
        ("1.0.x", "1.1.0", False),
        ("1.X", "1.4.0", True),
        ("1.*", "2.0.0", False),
        ("*", "0.0.1", True),
        ("x", "42.0.0", True),
        ("1.x.3", "1.7.0", True),
    ])
    def test_wildcards(self, expression, version, expected):
        assert matches(expression, version) is expected


class TestTildeAndCaret:
    """Tilde allows patch updates, caret allows non-breaking updates."""

    @pytest.mark.parametrize("expression,version,expected", [
        ("~1.2.3", "1.2.9", True),
        ("~1.2.3", "1.2.2", False),
        ("~1.2.3", "1.3.0", False),
        ("~1.2", "1.2.0", True),
        ("~1", "1.9.0", True),
        ("~1", "2.0.0", False),
        ("~>1.2", "1.2.5", True),
        ("^1.2.3", "1.9.0", True),
        ("^1.2.3", "2.0.0", False),
        ("^1.2.3", "1.2.2", False),
        ("^0.2.3", "0.2.9", True),
        ("^0.2.3", "0.3.0", False),
        ("^0.0.3", "0.0.3", True),
        ("^0.0.3", "0.0.4", False),
        ("^0", "0.9.9", True),
        ("^0", "1.0.0", False),
        ("^0.0", "0.0.9", True),
        ("^0.0", "0.1.0", False),
    ])
    def test_ranges(self, expression, version, expected):
        assert matches(expression, version) is expected


class TestCompoundExpressions:
    """AND by whitespace or comma, OR by ||, hyphen ranges."""

    def test_and_by_whitespace(self):
        assert matches(">=1.0.0 <2.0.0", "1.5.0") is True
        assert matches(">=1.0.0 <2.0.0", "2.0.0") is False

    def test_and_by_comma(self):
        assert matches(">=1.0, <2", "1.0.0") is True
        assert matches(">=1.0, <2", "2.1.0") is False

    def test_or(self):
        constraint = VersionConstraint("1.x || >=3.0.0")
        assert constraint.match(parse_version("1.4.0"))
        assert not constraint.match(parse_version("2.0.0"))
        assert parse_version("3.1.0") in constraint

    def test_hyphen_range_full_upper_is_inclusive(self):
        assert matches("1.2.3 - 1.4.5", "1.4.5") is True
        assert matches("1.2.3 - 1.4.5", "1.4.6") is False
        assert matches("1.2.3 - 1.4.5", "1.2.2") is False

    def test_hyphen_range_partial_upper_covers_whole_minor(self):
        assert matches("1.0 - 1.4", "1.4.7") is True
        assert matches("1.0 - 1.4", "1.5.0") is False


class TestPrereleases:
    """Pre-releases only match clauses whose operand names a pre-release."""

    def test_plain_range_rejects_prerelease(self):
        assert matches(">=1.0.0", "2.0.0-rc.1") is False
        assert matches("*", "1.0.0-alpha") is False

    def test_prerelease_operand_admits_prerelease(self):
        assert matches(">=2.0.0-alpha", "2.0.0-rc.1") is True
        assert matches("1.0.0-alpha", "1.0.0-alpha") is True

    def test_upper_bound_does_not_admit_its_own_prereleases(self):
        assert matches("<2.0.0", "2.0.0-beta") is False
        assert matches(">=1.0.0 <2.0.0", "1.5.0-rc.1") is False

    def test_prerelease_ordering(self):
        assert matches("<1.0.0-beta", "1.0.0-alpha") is True
        assert matches(">=1.0.0-beta", "1.0.0-alpha") is False

    def test_prerelease_operand_only_admits_same_patch_prereleases(self):
        assert matches(">=1.0.0-alpha", "1.1.0-rc.1") is False
        assert matches(">=1.0.0-alpha", "1.1.0") is True


class TestConstruction:
    """Invalid expressions are rejected when the constraint is built."""

    @pytest.mark.parametrize("expression", [
        "latest", "main", "1.2.3.4", ">>1", "1.0 - >2", None,
        "1.0 ||", "1.0.0 -", "- 1.0.0", ">*",
    ])
    def test_rejected(self, expression):
        with pytest.raises(InvalidConstraintError):
            VersionConstraint(expression)

    @pytest.mark.parametrize("expression", [
        ">=1.0.0-01",
        "1.0.0-alpha.007",
        "^1.2.3-",
        "~1.2.3-beta..1",
        "1.0.0+build_1",
        "1.0.0 - 2.0.0-01",
    ])
    def test_operand_that_is_not_semver_is_rejected(self, expression):
        with pytest.raises(InvalidConstraintError):
            VersionConstraint(expression)

    def test_large_components_are_accepted(self):
        constraint = VersionConstraint(">=99999999999999999999.0.0")
        assert not constraint.match(parse_version("1.0.0"))

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            VersionConstraint("nope")

    def test_repr_and_str(self):
        constraint = VersionConstraint("^1.2")
        assert str(constraint) == "^1.2"
        assert repr(constraint) == "VersionConstraint('^1.2')"

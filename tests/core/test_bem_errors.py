import pytest

from bemkit.core.errors import (
    BemError,
    BemTypeError,
    GrammarError,
    MutabilityError,
    StructureError,
    describe_value,
)
from bemkit.core.validate import IssueKind, ValidationIssue, check_bem_block, check_bem_element


@pytest.mark.parametrize(
    ("cls", "builtin"),
    [
        (GrammarError, ValueError),
        (StructureError, ValueError),
        (MutabilityError, AttributeError),
        (BemTypeError, TypeError),
    ],
)
def test_error_taxonomy(cls, builtin) -> None:
    err = cls("boom", attribute="blk", expected="a name", actual=1)
    assert isinstance(err, BemError)
    assert isinstance(err, builtin)
    assert str(err) == "boom"
    assert (err.attribute, err.expected, err.actual, err.has_actual) == ("blk", "a name", 1, True)


def test_actual_may_be_absent_or_none() -> None:
    assert BemError("boom").has_actual is False
    err = BemError("boom", actual=None)
    assert err.has_actual is True
    assert err.actual is None


def test_describe_value() -> None:
    assert describe_value(101) == "int (101)"
    assert describe_value("elt2-") == "str ('elt2-')"
    assert describe_value(None) == "NoneType (None)"


@pytest.mark.parametrize(
    ("kind", "cls"),
    [(IssueKind.GRAMMAR, GrammarError), (IssueKind.STRUCTURE, StructureError), (IssueKind.TYPE, BemTypeError)],
)
def test_issue_kind_selects_exception(kind, cls) -> None:
    err = ValidationIssue(kind=kind, message="boom", attribute="elt", actual="x").to_exception()
    assert type(err) is cls
    assert err.attribute == "elt"


def test_issue_within_prefixes_message() -> None:
    issue = check_bem_element("elt-").issue.within("BEM object")
    assert issue.message.startswith("BEM object -- BEM element must be")
    assert issue.attribute == "elt"
    assert issue.within("outer", attribute="mod").attribute == "mod"


def test_unwrap_with_context() -> None:
    assert check_bem_block("blk").unwrap("ignored") == "blk"
    with pytest.raises(GrammarError, match=r"^Outer -- BEM block must be"):
        check_bem_block("blk-").unwrap("Outer")

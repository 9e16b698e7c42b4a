import pytest

from bemkit.core.entity import BemBase
from bemkit.core.errors import BemTypeError, GrammarError, StructureError
from bemkit.core.validate import (
    BemStructureKind,
    IssueKind,
    bem_structure_kind,
    check_bem_block,
    check_bem_modifier,
    check_bem_object,
    check_bem_structure,
    check_bem_vector,
    ensure_bem_block,
    ensure_bem_modifier,
    ensure_bem_object,
    ensure_bem_structure,
    ensure_bem_vector,
    is_valid_bem_modifier,
    is_valid_bem_object,
    is_valid_bem_structure,
    is_valid_bem_vector,
    validate_bem_block,
    validate_bem_element,
    validate_bem_modifier,
    validate_bem_modifier_value,
    validate_bem_name,
    validate_bem_object,
    validate_bem_structure,
    validate_bem_value,
    validate_bem_vector,
)


def test_part_messages_name_type_and_value() -> None:
    assert validate_bem_block("blk") is None
    msg = validate_bem_block("1blk")
    assert msg is not None
    assert msg.startswith("BEM block must be a valid BEM name")
    assert msg.endswith("but it is str ('1blk')")
    assert validate_bem_element(101).endswith("but it is int (101)")
    assert validate_bem_modifier_value("val-").startswith("BEM modifier's value must be a valid BEM value")
    assert validate_bem_name("n") is None
    assert validate_bem_value("0") is None


def test_part_issue_kinds() -> None:
    assert check_bem_block("1blk").issue.kind is IssueKind.GRAMMAR
    assert check_bem_block(None).issue.kind is IssueKind.STRUCTURE
    assert check_bem_block("1blk").issue.attribute == "blk"


def test_ensure_part_returns_value_or_raises() -> None:
    assert ensure_bem_block("blk") == "blk"
    with pytest.raises(GrammarError) as excinfo:
        ensure_bem_block("blk-")
    assert excinfo.value.attribute == "blk"
    assert excinfo.value.actual == "blk-"
    assert excinfo.value.has_actual is True
    with pytest.raises(StructureError):
        ensure_bem_block(7)


@pytest.mark.parametrize(
    ("value", "normalized"),
    [
        (["fiz"], ("fiz",)),
        (("fiz", "buz"), ("fiz", "buz")),
        (["fiz", None], ("fiz",)),
        (["size", "101"], ("size", "101")),
    ],
)
def test_valid_modifiers_are_normalized_to_tuples(value, normalized) -> None:
    assert check_bem_modifier(value).value == normalized
    assert ensure_bem_modifier(value) == normalized
    assert validate_bem_modifier(value) is None


@pytest.mark.parametrize("value", ["fiz", [], ["a", "b", "c"], ["1fiz"], ["fiz", "buz-"], [None], {"fiz": "buz"}])
def test_invalid_modifiers(value) -> None:
    assert is_valid_bem_modifier(value) is False
    assert validate_bem_modifier(value) is not None


def test_modifier_arity_is_a_structure_issue() -> None:
    with pytest.raises(StructureError, match="1 or 2 items"):
        ensure_bem_modifier(["a", "b", "c"])


def test_valid_objects() -> None:
    assert is_valid_bem_object({"blk": "blk"})
    assert is_valid_bem_object({"blk": "blk", "elt": None, "mod": None})
    assert is_valid_bem_object({"blk": "blk", "elt": "elt", "mod": ["modNam", "modVal"]})
    assert is_valid_bem_object({"blk": "blk", "extra": object()})


def test_object_missing_blk() -> None:
    assert validate_bem_object({"elt": "elt"}) == "BEM object -- required 'blk' attribute is missing"
    assert check_bem_object({"elt": "elt"}).issue.kind is IssueKind.STRUCTURE


def test_object_with_invalid_element() -> None:
    issue = check_bem_object({"blk": "blk", "elt": 101}).issue
    assert issue is not None
    assert issue.attribute == "elt"
    assert issue.actual == 101
    assert issue.message.startswith("BEM object -- BEM element must be")
    with pytest.raises(StructureError, match=r"int \(101\)"):
        ensure_bem_object({"blk": "blk", "elt": 101})


def test_object_with_invalid_modifier() -> None:
    with pytest.raises(GrammarError, match="modifier's value"):
        ensure_bem_object({"blk": "blk", "mod": ["name", "value-"]})


def test_object_type_mismatch() -> None:
    with pytest.raises(BemTypeError):
        ensure_bem_object("blk")


@pytest.mark.parametrize(
    "value",
    [["blk"], ("blk", "elt"), ["blk", None, ["mod"]], ("blk", "elt", ("mod", "val"))],
)
def test_valid_vectors(value) -> None:
    assert is_valid_bem_vector(value) is True
    assert ensure_bem_vector(value) is value


def test_vector_arity() -> None:
    assert validate_bem_vector([]) == "BEM vector must have 1 to 3 items (block, element, modifier) but it has 0"
    with pytest.raises(StructureError, match="but it has 4"):
        ensure_bem_vector(["a", "b", ["c"], "d"])


def test_vector_with_invalid_parts() -> None:
    assert validate_bem_vector(["blk", "elt-"]).startswith("BEM vector -- BEM element must be")
    assert check_bem_vector([1]).issue.attribute == "blk"
    with pytest.raises(BemTypeError):
        ensure_bem_vector("blk")


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ("blk", BemStructureKind.STRING),
        ({"blk": "blk"}, BemStructureKind.OBJECT),
        (["blk"], BemStructureKind.VECTOR),
        (("blk",), BemStructureKind.VECTOR),
        (BemBase("blk"), BemStructureKind.ENTITY),
        (42, None),
        (None, None),
    ],
)
def test_bem_structure_kind(value, kind) -> None:
    assert bem_structure_kind(value) is kind


def test_check_bem_structure_dispatches_by_shape() -> None:
    entity = BemBase("blk__elt")
    assert check_bem_structure(entity).value is entity
    assert is_valid_bem_structure("blk__elt--mod")
    assert is_valid_bem_structure({"blk": "blk"})
    assert is_valid_bem_structure(["blk", "elt"])
    assert validate_bem_structure("blk__elt__elt") is not None
    assert validate_bem_structure(42).startswith("BEM structure must be a BemBase")
    with pytest.raises(BemTypeError) as excinfo:
        ensure_bem_structure(3.14)
    assert isinstance(excinfo.value, TypeError)

import logging

import pytest

from bemkit.core.entity import BemBase, Mutability
from bemkit.core.errors import BemTypeError, GrammarError, MutabilityError, StructureError


@pytest.mark.parametrize(
    "initializer",
    [
        "foo__bar--fiz_buz",
        {"blk": "foo", "elt": "bar", "mod": ["fiz", "buz"]},
        ["foo", "bar", ["fiz", "buz"]],
        BemBase("foo__bar--fiz_buz"),
    ],
)
def test_construct_from_every_representation(initializer) -> None:
    b = BemBase(initializer)
    assert (b.blk, b.elt, b.mod) == ("foo", "bar", ("fiz", "buz"))
    assert b.mutability is Mutability.MUTABLE


def test_modifier_value_may_start_with_digit() -> None:
    assert BemBase("foo--biz_101").mod == ("biz", "101")


@pytest.mark.parametrize(
    ("initializer", "error"),
    [(42, BemTypeError), ("foo__", GrammarError), ("a__b__c", StructureError), ({"elt": "x"}, StructureError)],
)
def test_invalid_initializer(initializer, error) -> None:
    with pytest.raises(error):
        BemBase(initializer)


def test_state_from_flags() -> None:
    assert BemBase("foo", is_frozen=True).mutability is Mutability.FROZEN
    final = BemBase("foo", is_final=True, is_frozen=False)
    assert final.mutability is Mutability.FINAL
    assert final.is_final and final.is_frozen


def test_mutable_setters_apply_in_place() -> None:
    b = BemBase("foo")
    assert b.set_blk("bar") is b
    b.elt = "baz"
    b.mod = "qux"
    assert str(b) == "bar__baz--qux"
    b.set_mod(["size", "xl"])
    assert b.mod == ("size", "xl")
    b.set_elt(None).set_mod(None)
    assert b.to_bem_vector() == ("bar", None, None)


def test_setter_rejects_invalid_value_with_context() -> None:
    b = BemBase("foo")
    with pytest.raises(GrammarError, match=r"^Can not set 'blk' of BemBase -- BEM block must be") as excinfo:
        b.blk = "1foo"
    assert excinfo.value.attribute == "blk"
    assert excinfo.value.actual == "1foo"
    assert b.blk == "foo"
    with pytest.raises(StructureError, match="Can not set 'elt' of BemBase"):
        b.set_elt(101)
    with pytest.raises(StructureError, match="Can not set 'blk' of BemBase"):
        b.set_blk(None)
    with pytest.raises(StructureError, match="1 or 2 items"):
        b.set_mod(["a", "b", "c"])


def test_frozen_instance_rejects_mutation() -> None:
    b = BemBase("foo", is_frozen=True)
    with pytest.raises(MutabilityError, match="Instance is frozen and can not be changed") as excinfo:
        b.set_blk("bar")
    assert excinfo.value.attribute == "blk"
    assert isinstance(excinfo.value, AttributeError)
    with pytest.raises(MutabilityError):
        b.mod = "fiz"
    assert b.blk == "foo"


def test_final_instance_rejects_mutation() -> None:
    b = BemBase("foo", is_final=True)
    with pytest.raises(MutabilityError, match="Instance is final and can not be changed"):
        b.elt = "bar"


def test_mutability_gate_runs_before_validation() -> None:
    with pytest.raises(MutabilityError):
        BemBase("foo", is_frozen=True).set_blk("1-invalid-")
    with pytest.raises(MutabilityError, match="final"):
        BemBase("foo", is_final=True).set_blk(None)


def test_fresh_copy_leaves_receiver_untouched() -> None:
    b = BemBase("foo", is_frozen=True)
    fresh = b.set_blk("bar", fresh=True)
    assert fresh is not b
    assert fresh.blk == "bar"
    assert b.blk == "foo"
    assert fresh.is_frozen is True


def test_fresh_copy_of_final_instance_stays_final() -> None:
    b = BemBase("foo__bar", is_final=True)
    fresh = b.set_mod(["fiz", "buz"], fresh=True).set_elt(None, fresh=True)
    assert str(fresh) == "foo--fiz_buz"
    assert fresh.is_final is True
    assert str(b) == "foo__bar"


def test_fresh_copy_still_validates() -> None:
    with pytest.raises(GrammarError):
        BemBase("foo", is_final=True).set_elt("bar-", fresh=True)


def test_freeze_and_unfreeze() -> None:
    b = BemBase("foo")
    assert b.freeze() is b
    assert b.is_frozen is True
    b.freeze()
    assert b.mutability is Mutability.FROZEN
    assert b.unfreeze() is b
    assert b.is_frozen is False
    b.unfreeze()
    assert b.mutability is Mutability.MUTABLE
    b.blk = "bar"
    assert b.blk == "bar"


def test_final_can_not_be_unfrozen() -> None:
    b = BemBase("foo", is_final=True)
    b.freeze()
    assert b.is_final is True
    with pytest.raises(MutabilityError, match="can not be undone because it is also final"):
        b.unfreeze()
    assert b.is_frozen is True


def test_throw_helpers_return_receiver() -> None:
    b = BemBase("foo")
    assert b._throw_when_is_final() is b
    assert b._throw_when_is_frozen() is b
    with pytest.raises(MutabilityError, match="custom"):
        BemBase("foo", is_frozen=True)._throw_when_is_frozen("custom")


def test_clone_is_mutable_and_independent() -> None:
    b = BemBase("foo__bar", is_final=True)
    c = b.clone()
    assert c == b
    assert c.mutability is Mutability.MUTABLE
    c.blk = "baz"
    assert b.blk == "foo"


def test_conversions() -> None:
    b = BemBase(["foo", "bar", ["fiz", "buz"]])
    assert b.to_bem_string() == "foo__bar--fiz_buz"
    assert str(b) == "foo__bar--fiz_buz"
    assert b.to_bem_object() == {"blk": "foo", "elt": "bar", "mod": ("fiz", "buz")}
    assert b.to_bem_vector() == ("foo", "bar", ("fiz", "buz"))


def test_repr_shows_string_and_state() -> None:
    assert repr(BemBase("foo")) == "BemBase('foo')"
    assert repr(BemBase("foo", is_frozen=True)) == "BemBase('foo', is_frozen=True)"
    assert repr(BemBase("foo__bar", is_final=True)) == "BemBase('foo__bar', is_final=True)"


def test_equality_ignores_state_and_entities_are_unhashable() -> None:
    assert BemBase("foo--a_1") == BemBase(["foo", None, ["a", "1"]], is_final=True)
    assert BemBase("foo") != BemBase("bar")
    assert BemBase("foo") != "foo"
    with pytest.raises(TypeError):
        hash(BemBase("foo"))


def test_mutations_are_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    b = BemBase("foo")
    with caplog.at_level(logging.DEBUG, logger="bemkit.core.entity"):
        b.blk = "bar"
        b.freeze()
    messages = [r.getMessage() for r in caplog.records if r.name == "bemkit.core.entity"]
    assert "Set blk of BemBase to 'bar'" in messages
    assert "Froze bar" in messages

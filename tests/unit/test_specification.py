"""Unit tests for in-memory specification evaluation."""

import pytest

from app.domain.entities.dealer import Dealer
from app.domain.specifications.specification import (
    AllSpecification,
    AndSpecification,
    DistinctSpecification,
    FieldSpecification,
    NotSpecification,
    Operator,
    is_distinct,
)


@pytest.fixture
def dealer() -> Dealer:
    """Dealer with a name."""
    return Dealer(id=10, name="AAAAAAAAAA")


@pytest.fixture
def unnamed_dealer() -> Dealer:
    """Dealer without a name."""
    return Dealer(id=11, name=None)


def test_all_specification_matches_everything(dealer, unnamed_dealer):
    """Test that the empty specification matches every dealer."""
    assert AllSpecification().is_satisfied_by(dealer)
    assert AllSpecification().is_satisfied_by(unnamed_dealer)


def test_all_specification_and_returns_other():
    """Test that AND-ing onto the empty specification yields the other operand."""
    other = FieldSpecification("id", Operator.EQUALS, 1)

    assert (AllSpecification() & other) is other


@pytest.mark.parametrize(
    "operator,value,expected",
    [
        (Operator.EQUALS, 10, True),
        (Operator.EQUALS, 11, False),
        (Operator.IN, (9, 10), True),
        (Operator.IN, (1, 2), False),
        (Operator.GREATER_THAN, 10, False),
        (Operator.GREATER_THAN_OR_EQUAL, 10, True),
        (Operator.LESS_THAN, 10, False),
        (Operator.LESS_THAN_OR_EQUAL, 10, True),
    ],
)
def test_id_comparisons(dealer, operator, value, expected):
    """Test comparison operators on the id field."""
    assert FieldSpecification("id", operator, value).is_satisfied_by(dealer) is expected


def test_contains_ignores_case(dealer):
    """Test that contains matches regardless of case."""
    assert FieldSpecification("name", Operator.CONTAINS_IGNORE_CASE, "aaa").is_satisfied_by(dealer)
    assert not FieldSpecification("name", Operator.CONTAINS_IGNORE_CASE, "bbb").is_satisfied_by(dealer)


def test_contains_folds_case_one_character_at_a_time():
    """Test that contains never expands characters such as 'ß' into 'SS'."""
    dealer = Dealer(id=1, name="Straße")

    assert FieldSpecification("name", Operator.CONTAINS_IGNORE_CASE, "STRAßE").is_satisfied_by(dealer)
    assert not FieldSpecification("name", Operator.CONTAINS_IGNORE_CASE, "SS").is_satisfied_by(dealer)
    assert not FieldSpecification("name", Operator.CONTAINS_IGNORE_CASE, "strasse").is_satisfied_by(dealer)


def test_null_checks(dealer, unnamed_dealer):
    """Test IS NULL / IS NOT NULL."""
    assert FieldSpecification("name", Operator.IS_NOT_NULL).is_satisfied_by(dealer)
    assert not FieldSpecification("name", Operator.IS_NULL).is_satisfied_by(dealer)
    assert FieldSpecification("name", Operator.IS_NULL).is_satisfied_by(unnamed_dealer)


def test_comparison_against_null_is_unknown(unnamed_dealer):
    """Test that comparing a null field is unknown, and so is its negation."""
    equals = FieldSpecification("name", Operator.EQUALS, "AAAAAAAAAA")

    assert equals.evaluate(unnamed_dealer) is None
    assert NotSpecification(equals).evaluate(unnamed_dealer) is None
    assert not (~equals).is_satisfied_by(unnamed_dealer)


def test_not_inverts_known_results(dealer):
    """Test that NOT flips a known result."""
    equals = FieldSpecification("name", Operator.EQUALS, "AAAAAAAAAA")

    assert not (~equals).is_satisfied_by(dealer)
    assert (~FieldSpecification("name", Operator.EQUALS, "BBBBBBBBBB")).is_satisfied_by(dealer)


def test_and_uses_three_valued_logic(unnamed_dealer):
    """Test that AND is false if any side is false, unknown if any side is unknown."""
    unknown = FieldSpecification("name", Operator.EQUALS, "x")
    false = FieldSpecification("id", Operator.EQUALS, 99)
    true = FieldSpecification("id", Operator.EQUALS, 11)

    assert AndSpecification(unknown, false).evaluate(unnamed_dealer) is False
    assert AndSpecification(false, unknown).evaluate(unnamed_dealer) is False
    assert AndSpecification(unknown, true).evaluate(unnamed_dealer) is None
    assert AndSpecification(true, true).evaluate(unnamed_dealer) is True


def test_distinct_adds_no_row_predicate(dealer):
    """Test that a distinct term matches every row."""
    assert DistinctSpecification(True).is_satisfied_by(dealer)
    assert DistinctSpecification(False).is_satisfied_by(dealer)


def test_terms_flattens_and_chain_left_to_right():
    """Test that terms() lists AND operands in composition order."""
    distinct = DistinctSpecification(True)
    by_id = FieldSpecification("id", Operator.EQUALS, 1)
    by_name = FieldSpecification("name", Operator.EQUALS, "a")

    specification = AllSpecification() & distinct & by_id & by_name

    assert list(specification.terms()) == [distinct, by_id, by_name]


def test_is_distinct():
    """Test distinct detection on composed specifications."""
    by_id = FieldSpecification("id", Operator.EQUALS, 1)

    assert is_distinct(DistinctSpecification(True) & by_id)
    assert not is_distinct(DistinctSpecification(False) & by_id)
    assert not is_distinct(by_id)
    assert not is_distinct(AllSpecification())

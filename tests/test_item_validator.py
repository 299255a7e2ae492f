import pytest
from pydantic import ValidationError

from core.domain.models import InvalidItem, IssueKind, Item
from core.services.item_validator import validate_item, validate_items


def test_mixed_batch_returns_one_item_and_one_error(mixed_raw_items):
    items, errors = validate_items(mixed_raw_items)

    assert items == [Item(name="dummy", amount=1, price=120)]
    assert len(errors) == 1
    assert errors[0].index == 1
    assert errors[0].fields == ["price"]
    assert errors[0].issues[0].kind is IssueKind.MISSING


def test_bad_record_does_not_stop_the_batch():
    raw = [
        "not an item",
        {"name": "tea", "amount": "abc", "price": 10},
        None,
        {"name": "milk", "amount": 1, "price": 300},
    ]

    items, errors = validate_items(raw)

    assert [item.name for item in items] == ["milk"]
    assert [error.index for error in errors] == [0, 1, 2]


def test_numeric_strings_are_coerced():
    outcome = validate_item({"name": "cake", "amount": "3", "price": "50"})

    assert outcome == Item(name="cake", amount=3, price=50)


@pytest.mark.parametrize(
    "raw, field",
    [
        ({"name": "cake", "amount": "abc", "price": 50}, "amount"),
        ({"name": "cake", "amount": 1, "price": 2.5}, "price"),
        ({"name": 123, "amount": 1, "price": 50}, "name"),
        ({"name": "cake", "amount": True, "price": 50}, "amount"),
        ({"name": "cake", "amount": 1, "price": False}, "price"),
    ],
)
def test_wrong_types_are_reported(raw, field):
    outcome = validate_item(raw)

    assert isinstance(outcome, InvalidItem)
    assert outcome.fields == [field]
    assert outcome.issues[0].kind is IssueKind.INVALID_TYPE


def test_blank_name_counts_as_missing():
    outcome = validate_item({"name": "   ", "amount": 1, "price": 50})

    assert isinstance(outcome, InvalidItem)
    assert outcome.fields == ["name"]
    assert outcome.issues[0].kind is IssueKind.MISSING


def test_all_missing_fields_are_listed():
    outcome = validate_item({}, index=4)

    assert isinstance(outcome, InvalidItem)
    assert outcome.index == 4
    assert sorted(outcome.fields) == ["amount", "name", "price"]
    assert all(issue.kind is IssueKind.MISSING for issue in outcome.issues)


def test_non_mapping_record_is_rejected_as_a_whole():
    outcome = validate_item(["cake", 1, 50])

    assert isinstance(outcome, InvalidItem)
    assert outcome.fields == ["item"]
    assert outcome.raw == ["cake", 1, 50]


def test_negative_price_is_structurally_valid():
    outcome = validate_item({"name": "discount", "amount": 1, "price": -100})

    assert isinstance(outcome, Item)
    assert outcome.subtotal == -100


def test_extra_keys_are_ignored_and_items_are_frozen():
    item = validate_item({"name": "cake", "amount": 1, "price": 50, "note": "x"})

    assert isinstance(item, Item)
    with pytest.raises(ValidationError):
        item.price = 10


def test_describe_lists_every_issue():
    outcome = validate_item({"name": "cake"})

    assert isinstance(outcome, InvalidItem)
    assert outcome.describe() == "amount: missing; price: missing"

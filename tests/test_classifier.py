import pytest

from arbgen.classes import ClassifiedKeySet, PluralFamily, Quantity
from arbgen.classifier import (
    classify,
    classify_locale,
    extract_parameters,
    first_parameter,
    group_plurals,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Hello, ${name}!", ["name"]),
        ("Cost: \\$5", []),
        ("No parameters here", []),
        ("$count items", ["count"]),
        ("$a and ${b}, then $a again", ["a", "b"]),
        ("Price: $", []),
        ("Cost $5", []),
    ],
)
def test_extract_parameters(value, expected):
    assert extract_parameters(value) == expected


def test_escaped_placeholder_next_to_real_one():
    assert extract_parameters("\\$skip $keep") == ["keep"]


def test_first_parameter_falls_back():
    assert first_parameter("${count} items") == "count"
    assert first_parameter("many items") == "param"
    assert first_parameter("many items", "n") == "n"


def test_quantity_from_suffix():
    assert Quantity.from_suffix("itemsOther") is Quantity.OTHER
    assert Quantity.from_suffix("items_few") is Quantity.FEW
    assert Quantity.from_suffix("ITEMSZERO") is Quantity.ZERO
    assert Quantity.from_suffix("title") is None
    # the key must be longer than the suffix
    assert Quantity.from_suffix("other") is None


def test_quantity_case_labels():
    assert [q.case_label for q in Quantity] == ["0", "1", "2", "few", "many", None]
    assert Quantity.from_case_label("few") is Quantity.FEW
    with pytest.raises(ValueError):
        Quantity.from_case_label("7")
    with pytest.raises(ValueError):
        Quantity.from_case_label("other")


def test_group_plurals():
    values = {
        "title": "Title",
        "itemsOne": "1 item",
        "itemsOther": "$count items",
        "appleFew": "few apples",
        "appleMany": "many apples",
    }
    families, consumed = group_plurals(values, values)

    assert families == [
        PluralFamily("items", {Quantity.ONE: "1 item", Quantity.OTHER: "$count items"})
    ]
    assert consumed == {"itemsOne", "itemsOther"}


def test_group_without_other_is_not_a_plural():
    values = {"fooOne": "one foo", "fooFew": "$n foos"}
    families, consumed = group_plurals(values, values)

    assert families == []
    assert consumed == set()

    classified = classify_locale(values, values)
    assert classified.plain == ["fooOne"]
    assert classified.parametrized == ["fooFew"]
    assert classified.plurals == []


def test_duplicate_quantity_keeps_first_key(caplog):
    values = {"fooOne": "first", "fooone": "second", "fooOther": "rest"}
    families, consumed = group_plurals(values, values)

    assert families[0].values[Quantity.ONE] == "first"
    assert consumed == {"fooOne", "fooOther"}
    assert "declares one twice" in caplog.text


def test_plural_method_name_drops_trailing_underscore():
    family = PluralFamily("items_", {Quantity.OTHER: "x"})
    assert family.method_name == "items"
    assert family.present_quantities == {Quantity.OTHER}


def test_classify():
    values = {"a": "plain", "b": "with $param", "c": "escaped \\$x"}
    assert classify(["a", "b", "c"], values) == (["a", "c"], ["b"])


def test_classify_locale_keeps_declaration_order():
    values = {
        "zeta": "z",
        "alpha": "a",
        "hello": "Hi $name",
        "bye": "Bye ${name}",
        "dogsOther": "$n dogs",
        "catsOne": "a cat",
        "catsOther": "$n cats",
    }
    classified = classify_locale(values, values)

    assert classified.plain == ["zeta", "alpha"]
    assert classified.parametrized == ["hello", "bye"]
    assert [f.base_id for f in classified.plurals] == ["dogs", "cats"]

    ordered = classified.sorted()
    assert ordered.plain == ["alpha", "zeta"]
    assert ordered.parametrized == ["bye", "hello"]
    assert [f.base_id for f in ordered.plurals] == ["cats", "dogs"]


def test_member_names():
    classified = ClassifiedKeySet(
        ["a"], ["b"], [PluralFamily("items_", {Quantity.OTHER: "x"})]
    )
    assert classified.member_names() == {"a", "b", "items"}

"""
Unit tests for positional placeholder substitution.
"""

from i18n_service import substitute_placeholders


def test_replaces_in_order():
    assert substitute_placeholders("Hi {0}, meet {1}", ["Ann", "Bob"]) == "Hi Ann, meet Bob"


def test_surplus_arguments_ignored():
    assert substitute_placeholders("Welcome, {0}!", ["Ann", "Bob", "Cy"]) == "Welcome, Ann!"


def test_missing_argument_leaves_placeholder():
    assert substitute_placeholders("{0} and {1}", ["Ann"]) == "Ann and {1}"


def test_only_first_occurrence_replaced():
    assert substitute_placeholders("{0} {0}", ["x"]) == "x {0}"


def test_placeholders_out_of_order():
    assert substitute_placeholders("{1} before {0}", ["a", "b"]) == "b before a"


def test_arguments_are_stringified():
    assert substitute_placeholders("{0} items cost {1}", [3, 4.5]) == "3 items cost 4.5"


def test_no_arguments_returns_text_unchanged():
    assert substitute_placeholders("Hi {0}", []) == "Hi {0}"


def test_substituted_value_can_contain_later_token():
    """No escaping: a value containing {1} is itself subject to the next pass."""
    assert substitute_placeholders("{0}", ["{1}", "x"]) == "x"

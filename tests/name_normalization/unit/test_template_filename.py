"""Template file name derivation tests."""

from __future__ import annotations

import pytest
from workflow_xml_generator.name_normalization import (
    convert_requirement_name_to_file,
    generate_name_of_flow,
)


def test_wraps_digits_and_splits_case_boundaries() -> None:
    assert convert_requirement_name_to_file("Update UserInfo2") == "update_user_info_(2).xml"


def test_strips_symbols_and_joins_words_with_underscores() -> None:
    assert (
        convert_requirement_name_to_file("Change Name & Address (New)")
        == "change_name_address_new.xml"
    )


def test_keeps_stop_words() -> None:
    assert (
        convert_requirement_name_to_file("Change Name and Address")
        == "change_name_and_address.xml"
    )


def test_hyphenated_words_are_joined_before_case_split() -> None:
    assert convert_requirement_name_to_file("Update User-Info") == "update_user_info.xml"


@pytest.mark.parametrize(
    ("requirement_name", "expected"),
    [
        ("Step 12 Review", "step_(12)_review.xml"),
        ("Form2B", "form_(2)b.xml"),
        ("2 Factor", "_(2)_factor.xml"),
        ("Version 1.2", "version_(12).xml"),
    ],
)
def test_wraps_each_digit_run(requirement_name: str, expected: str) -> None:
    assert convert_requirement_name_to_file(requirement_name) == expected


def test_uppercase_runs_are_not_split() -> None:
    assert convert_requirement_name_to_file("Send SMS Alert") == "send_sms_alert.xml"


def test_collapses_whitespace_and_underscore_runs() -> None:
    assert convert_requirement_name_to_file("  Reset   Password ") == "_reset_password_.xml"


def test_empty_name_yields_bare_extension() -> None:
    assert convert_requirement_name_to_file("") == ".xml"


def test_is_independent_of_flow_identifier() -> None:
    name = "Change Name and Address"

    assert generate_name_of_flow(name) == "ChangeNameAddress"
    assert convert_requirement_name_to_file(name) != convert_requirement_name_to_file(
        generate_name_of_flow(name)
    )

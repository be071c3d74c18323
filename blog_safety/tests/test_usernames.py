"""Tests for display-name checks."""

import pytest

from ..policies.usernames import check_username, is_username_restricted


@pytest.mark.parametrize("name", ["Admin", "SuperUser99", "eldrex_fan", "my-System", "Delos Reyes"])
def test_reserved_names_are_restricted(name: str) -> None:
    """Names containing a reserved term are restricted regardless of case."""
    assert is_username_restricted(name)


def test_ordinary_name_is_accepted() -> None:
    """A name with no reserved term passes."""
    assert not is_username_restricted("Reader42")


def test_custom_restricted_list() -> None:
    """An explicit list replaces the configured one."""
    assert is_username_restricted("TheOwner", ["owner"])
    assert not is_username_restricted("Admin", ["owner"])


def test_check_username_trims_and_accepts() -> None:
    """Surrounding whitespace is stripped from accepted names."""
    result = check_username("  Reader42  ")

    assert result.allowed
    assert result.username == "Reader42"
    assert result.reason is None


def test_check_username_rejects_blank() -> None:
    """Whitespace-only names are treated as missing."""
    result = check_username("   ")

    assert not result.allowed
    assert result.reason == "Please enter a username"


def test_check_username_rejects_restricted() -> None:
    """Reserved names are refused."""
    result = check_username("SiteModerator")

    assert not result.allowed
    assert result.username is None
    assert result.reason == "This username is not allowed"


def test_check_username_enforces_length() -> None:
    """Thirty characters is the longest accepted name."""
    assert check_username("a" * 30).allowed

    result = check_username("a" * 31)
    assert not result.allowed
    assert result.reason == "Username must be less than 30 characters."


def test_check_username_counts_utf16_units() -> None:
    """Emoji outside the BMP count as two characters each."""
    assert check_username("\U0001F600" * 15).allowed
    assert not check_username("\U0001F600" * 16).allowed


def test_check_username_custom_length() -> None:
    """The length limit is interpolated into the reason."""
    result = check_username("Reader42", max_length=5)

    assert not result.allowed
    assert result.reason == "Username must be less than 5 characters."

from conftest import make_bit
from shared.identity import current_user_name, normalize, owner_name, resolve_display_name
from shared.models import Account


def test_normalize_trims_and_lowercases():
    assert normalize("  Amy ") == "amy"
    assert normalize("") == ""
    assert normalize(None) == ""


def test_resolve_display_name_prefers_display_name_then_email(accounts):
    assert resolve_display_name("u-amy", "fallback", accounts) == "Amy"
    assert resolve_display_name("u-cass", "fallback", accounts) == "cass@bithub.dev"


def test_resolve_display_name_falls_back_for_unknown_or_empty_ids(accounts):
    assert resolve_display_name("nobody", "Old Name", accounts) == "Old Name"
    assert resolve_display_name("", "", accounts) == "Unknown"
    assert resolve_display_name(None, None, []) == "Unknown"


def test_current_user_name_uses_email_local_part():
    assert current_user_name(Account(id="x", display_name="Zed")) == "Zed"
    assert current_user_name(Account(id="x", email="zed@example.com")) == "zed"
    assert current_user_name(Account(id="x")) == ""
    assert current_user_name(None) == ""


def test_owner_name_prefers_explicit_author(accounts):
    assert owner_name(make_bit(author="  Bo  ", author_id="u-amy"), accounts) == "Bo"
    assert owner_name(make_bit(author="   ", author_id="u-amy"), accounts) == "Amy"
    assert owner_name(make_bit(), accounts) == "Unknown"


def test_whitespace_only_author_without_account_is_unknown(accounts):
    assert owner_name(make_bit(author="   "), accounts) == "Unknown"
    assert owner_name(make_bit(author="   ", author_id="nobody"), accounts) == "Unknown"

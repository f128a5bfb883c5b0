import pytest

from zencafe.shared.email import is_valid_email


@pytest.mark.parametrize("email", ["nimali@example.com", "a.b+tea@zencafe.lk", "x@sub.domain.org"])
def test_valid_addresses(email):
    assert is_valid_email(email)


@pytest.mark.parametrize(
    "email",
    [
        None,
        "",
        "plainaddress",
        "two@@example.com",
        "no-dot@localhost",
        "space in@example.com",
        ".leading@example.com",
        "double..dot@example.com",
        "user@-bad.com",
        "semi;colon@example.com",
    ],
)
def test_invalid_addresses(email):
    assert not is_valid_email(email)

"""Basic structural checks for email addresses."""

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def is_valid_email(email: str | None) -> bool:
    """Return True when `email` has one @, a dotted domain, and no forbidden characters."""
    if not email or any(ch.isspace() for ch in email):
        return False

    if email.count("@") != 1:
        return False

    local_part, domain_part = email.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        return False

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            return False

    return not any(ch in email for ch in _FORBIDDEN)

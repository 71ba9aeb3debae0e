"""Tag de-duplication."""


def unique_tags(tags: list[str]) -> list[str]:
    """De-duplicate tags case-insensitively and sort them.

    The first spelling of each tag wins: ["Users", "users", "ADMIN"] gives
    ["ADMIN", "Users"].
    """
    seen: dict[str, str] = {}
    for tag in tags:
        seen.setdefault(tag.lower(), tag)
    return sorted(seen.values())


def merge_tags(operation: dict, tags: list[str]) -> list[str]:
    """Union an operation's tags with new ones and store the normalized result."""
    operation["tags"] = unique_tags(list(operation.get("tags", [])) + list(tags))
    return operation["tags"]

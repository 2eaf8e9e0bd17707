"""Helpers for repository identifiers."""


def parse_repo_string(full_name: str) -> tuple[str, str]:
    """Split an ``owner/name`` string into its parts.

    Args:
        full_name: Repository in owner/name format (e.g., 'octo/hello-world')

    Returns:
        Tuple of (owner, name)

    Raises:
        ValueError: If the string is not exactly one owner and one name
    """
    owner, sep, name = full_name.strip().partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ValueError(f"Invalid repository '{full_name}', expected owner/name")
    return owner, name

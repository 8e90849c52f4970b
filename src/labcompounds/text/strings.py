"""
Pure text utilities - no external dependencies.
"""

__all__ = [
    "pluralize",
]


def pluralize(
    singular: str,
    count: int,
    irregular: dict[str, str] | None = None,
) -> str:
    """
    Return singular or plural form based on count.
    
    Args:
        singular: The singular form of the word
        count: The count to determine plural
        irregular: Optional dict of irregular plurals {singular: plural}
    
    Returns:
        Singular if count == 1, else plural form
    
    Example:
        >>> pluralize("candidate", 1)
        'candidate'
        >>> pluralize("candidate", 3)
        'candidates'
        >>> pluralize("Formula", 2, {"Formula": "Formulae"})
        'Formulae'
    """
    if count == 1:
        return singular
    if irregular and singular in irregular:
        return irregular[singular]
    return f"{singular}s"

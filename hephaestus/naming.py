"""Identifier naming helpers."""


def camel_to_snake_case(text: str) -> str:
    """Convert camelCase or UpperCamelCase text to snake_case.

    Each ASCII capital letter is lower-cased. It is preceded by an underscore
    unless it is the first character.

    >>> camel_to_snake_case("UpperCamelCase")
    'upper_camel_case'
    >>> camel_to_snake_case("lowerCamelCase")
    'lower_camel_case'
    """
    parts = []
    for position, char in enumerate(text):
        if "A" <= char <= "Z":
            lowered = char.lower()
            parts.append(lowered if position == 0 else f"_{lowered}")
        else:
            parts.append(char)
    return "".join(parts)
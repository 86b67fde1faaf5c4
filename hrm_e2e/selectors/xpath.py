"""XPath helpers for locator builders."""


def xpath_literal(text: str) -> str:
    """
    Quote *text* as an XPath 1.0 string literal.

    XPath has no escape character, so text holding both quote kinds is
    split into pieces and joined with ``concat()``.
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    pieces = text.split('"')
    return "concat(" + ", '\"', ".join(f'"{piece}"' for piece in pieces) + ")"

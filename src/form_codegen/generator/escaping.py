"""
Literal helpers for generated code.

``escape_string`` makes captions safe inside quote-delimited literals of
the generated template and script. It only handles quote characters and is
not an HTML encoder.
"""


def escape_string(text: str) -> str:
    r"""
    Escape apostrophes, then double quotes, with a backslash.

    No other character is touched, backslashes included, so escaping an
    already escaped string escapes the quote a second time:

        >>> print(escape_string("it's"))
        it\'s
        >>> print(escape_string(escape_string("it's")))
        it\\'s
    """
    return text.replace("'", "\\'").replace('"', '\\"')


def js_value(value: bool | int | float | str) -> str:
    """Render a scalar the way a JavaScript template literal would print it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)

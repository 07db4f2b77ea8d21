r"""
Pointer tokenizer.

Splits a pointer string into ordered, unescaped reference tokens following
RFC 6901 section 3, with the separator generalized to any non-empty
delimiter.

Escaping:
    "~"  is written "~0"
    "/"  is written "~1"

Decoding replaces "~1" before "~0", so "~01" decodes to "~1" and not "/".

Example:
    tokenize("/a~1b/m~0n")          -> ["a/b", "m~n"]
    tokenize("asdf.qwer", ".")      -> ["asdf", "qwer"]
    tokenize("")                    -> []
    tokenize("/")                   -> [DelimiterToken("/")]
"""

from docpointer.lib.exceptions import PointerSyntaxError
from docpointer.models.dataModel import DelimiterToken


def escape(token: str) -> str:
    """Encode a reference token for use inside a pointer string."""
    return token.replace("~", "~0").replace("/", "~1")


def unescape(token: str) -> str:
    """Decode an escaped reference token."""
    return token.replace("~1", "/").replace("~0", "~")


def pointer_check(pointer: object, delimiter: str) -> None:
    """Reject pointers that are not strings and empty delimiters.

    Raises:
        PointerSyntaxError: If the pointer is not a string or the delimiter
            is empty
    """
    if not isinstance(pointer, str):
        raise PointerSyntaxError(
            f"Pointer must be a string, not {type(pointer).__name__}"
        )
    if not delimiter:
        raise PointerSyntaxError("Delimiter cannot be empty")


def tokenize(pointer: str, delimiter: str = "/") -> list[str]:
    """Split a pointer string into its decoded reference tokens.

    Args:
        pointer: Pointer string; "" addresses the whole document
        delimiter: Separator between tokens

    Returns:
        Tokens in document traversal order. A pointer equal to the delimiter
        yields a single DelimiterToken addressing the empty-string key.

    Raises:
        PointerSyntaxError: If the pointer is not a string or the delimiter
            is empty
    """
    pointer_check(pointer, delimiter)

    if not pointer:
        return []
    if pointer == delimiter:
        return [DelimiterToken(delimiter)]

    tokens: list[str] = [unescape(part) for part in pointer.split(delimiter)]
    if tokens[0] == "":  # leading delimiter is structural
        tokens.pop(0)
    return tokens

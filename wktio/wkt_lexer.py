import logging
import re

from pygments.lexer import RegexLexer
from pygments.token import Error

from .exceptions import InternalError, TokenizationError
from .wkt_tokens import TOKEN_RULES, Token

L = logging.getLogger("wktio.wkt_lexer")


class WKTLexer(RegexLexer):
    """
    WKTLexer is able to split a string with well-known text geometry format into tokens.
    Being a pygments lexer, its tokens can also be passed straight to a pygments formatter.
    """

    name = "WKT"
    aliases = ["wkt"]

    # ASCII only: no Unicode case folding, and \s is just ASCII whitespace.
    flags = re.IGNORECASE | re.ASCII

    tokens = {
        # every rule is tried in order at the current position, the first match wins
        "root": list(TOKEN_RULES),
    }


def tokenize(text):
    """
    Splits the given WKT into a tuple of Tokens that covers the whole of the text.
    Raises TokenizationError if some part of the text isn't a WKT token.
    """
    tokens = []
    position = 0

    # get_tokens_unprocessed doesn't strip or add any newlines, unlike get_tokens.
    for index, tokentype, value in WKTLexer().get_tokens_unprocessed(text):
        if tokentype is Error:
            raise TokenizationError(
                f"Invalid WKT: no token matches {text[index:index + 20]!r} at offset {index}",
                text=text,
                offset=index,
            )
        if index != position:
            raise InternalError(
                f"Tokenization skipped from offset {position} to offset {index}"
            )
        position = index + len(value)
        tokens.append(Token(tokentype, value, position))

    if position != len(text):
        raise InternalError(
            f"Tokenization stopped at offset {position} of {len(text)}"
        )

    L.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
    return tuple(tokens)

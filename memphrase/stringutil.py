# normalize, split_tokens
# (string utilities)
#

import unicodedata


def normalize(text: str) -> str:
    """Prepare the `text` for use as a passphrase token.

    Replaces composed characters by basic ones and converts to lowercase.

    """
    text = unicodedata.normalize('NFKD', text)
    output = []
    for c in text:
        if not unicodedata.combining(c):
            output += [c]
    return ''.join(output).lower()


def split_tokens(text: str) -> list:
    """Split whitespace-delimited `text` into normalized tokens."""
    return [normalize(token) for token in text.split()]

# src/utils/text.py
#
# Copyright (c) 2025-2026 Cindy's World LLC and contributors
# Licensed under the MIT License. See LICENSE.md for details.
#
"""Text helpers."""

WORD_SEPARATOR = " "


def capitalize_words(text: str) -> str:
    """
    Uppercase the first character of every space-delimited word.

    Only the single space character separates words, so runs of spaces and
    leading/trailing spaces come back exactly as given. The rest of each word
    is left alone:

        >>> capitalize_words("hello   world")
        'Hello   World'
        >>> capitalize_words("WORLD hello-world 123abc")
        'WORLD Hello-world 123abc'
    """
    if not isinstance(text, str):
        raise TypeError(f"capitalize_words expects a str, got {type(text).__name__}")
    words = text.split(WORD_SEPARATOR)
    return WORD_SEPARATOR.join(word[:1].upper() + word[1:] for word in words)

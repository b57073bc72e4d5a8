from typing import Iterator, TextIO

WORD_LIMIT = 256


def _is_word_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


def get_word(stream: TextIO, limit: int = WORD_LIMIT) -> str | None:
    """
    Read the next lower-cased word from `stream`, or None at end of input.

    Apostrophes inside a word are dropped. A word holds at most `limit - 1`
    characters; the rest of a longer run comes back as the next word.
    """
    if limit < 2:
        raise ValueError(f"Word limit should be at least 2, got {limit}")

    c = stream.read(1)
    while c != "" and not _is_word_char(c):
        c = stream.read(1)
    if c == "":
        return None

    word = [c.lower()]
    while len(word) < limit - 1:
        c = stream.read(1)
        if _is_word_char(c):
            word.append(c.lower())
        elif c == "'":
            continue
        else:
            break

    return "".join(word)


def read_words(stream: TextIO, limit: int = WORD_LIMIT) -> Iterator[str]:
    while (word := get_word(stream, limit)) is not None:
        yield word

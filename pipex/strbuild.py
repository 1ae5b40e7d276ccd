"""Building strings and string lists: splitting, trimming, joining, mapping."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from pipex.strsearch import strlen


def _text(s: str) -> str:
    return s[:strlen(s)]


def split(text: str, sep: str) -> List[str]:
    """Words of text separated by runs of the single character sep.

    Empty pieces are dropped, so leading, trailing and repeated separators
    produce no empty words.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    body = _text(text)
    if sep == "\0":
        return [body] if body else []
    return [word for word in body.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """text without the characters of charset at either end."""
    chars = _text(charset)
    if not chars:
        return _text(text)
    return _text(text).strip(chars)


def strrtrim(text: str, charset: str) -> str:
    """The span of text from the first to the last character found in charset.

    Characters outside charset are removed from both ends; when no character
    of text is in charset the result is empty.
    """
    body, chars = _text(text), set(_text(charset))
    positions = [i for i, ch in enumerate(body) if ch in chars]
    if not positions:
        return ""
    return body[positions[0]:positions[-1] + 1]


def strjoin(first: Optional[str], second: Optional[str]) -> str:
    """first followed by second; a missing side contributes nothing.

    At least one of the two must be given.
    """
    if first is None and second is None:
        raise TypeError("strjoin needs at least one string")
    return _text(first or "") + _text(second or "")


def strsjoin(*args: str) -> str:
    """All arguments joined in order."""
    return "".join(_text(arg) for arg in args)


def strs_expand(strs: Optional[Iterable[str]], extra: str) -> List[str]:
    """A new list holding copies of strs followed by extra."""
    result = [_text(s) for s in strs] if strs is not None else []
    result.append(_text(extra))
    return result


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """The string of func(index, char) for each character of text.

    func is called from the last character towards the first, and must
    return a single character for each call.
    """
    body = _text(text)
    mapped = [""] * len(body)
    for index in reversed(range(len(body))):
        ch = func(index, body[index])
        if len(ch) != 1:
            raise ValueError(f"mapping must return a single character, got {ch!r}")
        mapped[index] = ch
    return "".join(mapped)


def striteri(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call func(index, char) on each character of text, first to last.

    A call that returns a character replaces the one at that index; a call
    that returns None leaves it as it is. The resulting string is returned.
    """
    result = []
    for index, ch in enumerate(_text(text)):
        replacement = func(index, ch)
        if replacement is None:
            result.append(ch)
        elif len(replacement) != 1:
            raise ValueError(
                f"replacement must be a single character, got {replacement!r}"
            )
        else:
            result.append(replacement)
    return "".join(result)


def strs_len(strs: Optional[Sequence[Optional[str]]]) -> int:
    """Number of strings before the first None; a missing list counts 0."""
    if strs is None:
        return 0
    count = 0
    for item in strs:
        if item is None:
            break
        count += 1
    return count
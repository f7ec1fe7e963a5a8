"""
Width-bounded line wrapping for help text.

wrap(text, width) yields the lines of text that fit in width columns:
- blank text (empty or whitespace only) yields nothing;
- explicit line breaks ("\\r\\n" or "\\n") always end a line, even inside a
  paragraph that also needs wrapping;
- a segment that fits is yielded verbatim (tabs and runs of spaces are kept);
- a longer segment is cut after the last whitespace of each width-wide window,
  the whitespace staying at the end of the emitted line; a window without
  whitespace is hard-broken at exactly width characters.

The function is a generator: lines are produced lazily and a fresh call starts
over from the beginning.
"""
import re

_BREAKS = re.compile(r"\r\n|\n")


def wrap(text, width, /):
    """
    Yield the lines of text wrapped at width characters.

    Raises
    - TypeError: text is not a string.
    - ValueError: width is not a positive integer.
    """
    if not isinstance(text, str):
        raise TypeError("wrap() text must be a string")
    if width <= 0:
        raise ValueError("wrap() width must be positive")

    if not text or text.isspace():
        return

    for segment in _BREAKS.split(text):
        if len(segment) <= width:
            yield segment
            continue

        index = 0
        while index < len(segment):
            if len(segment) - index < width:
                yield segment[index:]
                break

            # Cut after the last whitespace of the window, or hard-break at width.
            length = width
            for offset in range(width - 1, -1, -1):
                if segment[index + offset].isspace():
                    length = offset + 1
                    break

            yield segment[index:index + length]
            index += length


__all__ = (
    "wrap",
)

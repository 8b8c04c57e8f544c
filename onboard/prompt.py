"""Line-oriented prompt source.

Every interactive component takes an ``ask`` callable with this shape so
tests can script the answers instead of reading stdin.
"""

from typing import Callable

Ask = Callable[[str], str]


def ask(question: str) -> str:
    """Ask one question on stdin and return the trimmed answer.

    End of input reads as an empty answer, which every caller treats as
    "no".
    """
    try:
        value = input(question)
    except EOFError:
        value = ""
    return value.strip()

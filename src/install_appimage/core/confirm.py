"""Interactive yes/no confirmation.

Commands take a ``Confirm`` callable so tests can answer the prompt
without touching stdin.
"""

from collections.abc import Callable

from install_appimage.constants import CONFIRM_ANSWERS

Confirm = Callable[[str], bool]


def is_affirmative(answer: str) -> bool:
    """Return True for "y" or "yes", ignoring case and surrounding spaces."""
    return answer.strip().lower() in CONFIRM_ANSWERS


def prompt_confirmation(
    prompt: str, input_func: Callable[[str], str] = input
) -> bool:
    """Ask ``prompt`` on the terminal; end of input counts as "no"."""
    try:
        answer = input_func(prompt)
    except EOFError:
        return False
    return is_affirmative(answer)

"""
Interactive prompt utilities.

Wrapper around prompt_toolkit for yes/no confirmation.
"""

from typing import Optional

from prompt_toolkit import prompt


def prompt_yes_no(question: str, default: bool = False) -> Optional[bool]:
    """
    Prompt for yes/no confirmation.

    Args:
        question: Question to ask
        default: Default answer (True=yes, False=no)

    Returns:
        True for yes, False for no, None if cancelled
    """
    suffix = " [Y/n]" if default else " [y/N]"
    try:
        answer = prompt(f"{question}{suffix}: ").strip().lower()

        if not answer:
            return default

        return answer in ('y', 'yes')
    except (KeyboardInterrupt, EOFError):
        return None

"""CLI Utility Functions"""


class InputError(Exception):
    """Raised when the confirmation answer cannot be read."""
    pass


def is_yes(answer: str) -> bool:
    """Only a lone 'y' (any case, surrounding whitespace ignored) counts."""
    return answer.strip().lower() == 'y'


def confirm(prompt: str) -> bool:
    """Print prompt, read one line from stdin. A closed stdin is an error, not a 'no'."""
    print(prompt)
    try:
        answer = input()
    except EOFError:
        raise InputError("Failed to read input")
    return is_yes(answer)

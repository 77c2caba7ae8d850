"""String Generator generates random strings of given length.

The strings consist of ASCII letters and digits, i.e. of 62 distinct characters, hence for longer
strings the repetitions of the characters are guaranteed.
"""
from __future__ import annotations

# Standard Imports
import random
import string

# Third-Party Imports

# Asymptote Imports

ALPHABET: str = string.ascii_letters + string.digits


def generate_string(size: int) -> str:
    """Generates the random string of the given length

    :param int size: length of the generated string
    :return: random string of letters and digits
    """
    return "".join(random.choice(ALPHABET) for _ in range(size))

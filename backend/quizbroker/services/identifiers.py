import random
import string
from typing import Callable, Optional

ALPHABET = string.ascii_uppercase + string.digits


def generate_id(taken: Optional[Callable[[str], bool]] = None, length: int = 6) -> str:
    """Generate a short, shareable identifier.

    When ``taken`` is given, keep drawing until it reports the code as free.
    """
    while True:
        code = ''.join(random.choices(ALPHABET, k=length))
        if taken is None or not taken(code):
            return code

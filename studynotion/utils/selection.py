import random


def random_index(count: int) -> int:
    """Uniform index in ``[0, count)``."""
    if count <= 0:
        raise ValueError("count must be positive")
    return random.randrange(count)

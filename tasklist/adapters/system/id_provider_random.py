from tasklist.ports.id_provider import IdProvider
import random

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

class RandomIdProvider(IdProvider):
    """Losowy 32-bitowy identyfikator ze znakiem; kolizje nie są sprawdzane."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def new_id(self) -> int:
        return self._rng.randint(INT32_MIN, INT32_MAX)

"""Перемешивает участников алгоритмом Фишера-Йетса."""

import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float: ...


def make_rng(seed: int | None = None) -> random.Random:
    # Без seed получаем недетерминированный источник.
    return random.Random(seed)


def shuffle(sequence: Sequence[T], rng: RandomSource | None = None) -> list[T]:
    """Возвращает новую равновероятную перестановку, исходная последовательность не меняется."""
    source = rng or random
    shuffled = list(sequence)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(source.random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled

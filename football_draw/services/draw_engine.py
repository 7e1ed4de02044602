"""Формирует жеребьевку: 36 команд в 4 корзины по 9 и полный список матчей."""

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from enum import Enum
from itertools import combinations

from football_draw.core.errors import NotReadyError, ValidationError
from football_draw.models.draw import GROUP_COUNT, GROUP_SIZE, TEAMS_TOTAL, TRIPLE_SIZE, DrawResult, Match
from football_draw.services.randomizer import RandomSource, shuffle
from football_draw.services.rendering import render_markup, render_text

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    COLLECTING = "collecting"
    READY = "ready"
    DRAWN = "drawn"


def partition_into_groups(entrants: Sequence[str]) -> tuple[tuple[str, ...], ...]:
    # Команда с индексом i попадает в корзину i // 9 на позицию i % 9.
    return tuple(tuple(entrants[idx * GROUP_SIZE : (idx + 1) * GROUP_SIZE]) for idx in range(GROUP_COUNT))


def generate_group_matches(group: Sequence[str]) -> list[Match]:
    """Внутри корзины каждая тройка играет круг: (x, y), (z, x), (y, z)."""
    matches: list[Match] = []
    for start in range(0, len(group), TRIPLE_SIZE):
        x, y, z = group[start : start + TRIPLE_SIZE]
        matches.extend([Match(side1=x, side2=y), Match(side1=z, side2=x), Match(side1=y, side2=z)])
    return matches


def generate_cross_group_matches(group_a: Sequence[str], group_b: Sequence[str]) -> list[Match]:
    """Каждая команда из первой корзины играет с командами второй на позициях i и i + 1."""
    matches: list[Match] = []
    size = len(group_b)
    for idx, team in enumerate(group_a):
        matches.append(Match(side1=team, side2=group_b[idx]))
        matches.append(Match(side1=group_b[(idx + 1) % size], side2=team))
    return matches


def generate_matches(groups: Sequence[Sequence[str]]) -> list[Match]:
    # Сначала матчи внутри корзин A-D, затем пары корзин AB, AC, AD, BC, BD, CD.
    matches: list[Match] = []
    for group in groups:
        matches.extend(generate_group_matches(group))
    for group_a, group_b in combinations(groups, 2):
        matches.extend(generate_cross_group_matches(group_a, group_b))
    return matches


def check_entrants(entrants: Sequence[str]) -> None:
    # Проверяем состав до перемешивания: ровно 36 команд без повторов.
    if len(entrants) != TEAMS_TOTAL:
        raise ValidationError(len(entrants))
    duplicates = sorted(name for name, seen in Counter(entrants).items() if seen > 1)
    if duplicates:
        raise ValidationError(len(entrants), duplicates=duplicates)


def build_draw(entrants: Sequence[str], rng: RandomSource | None = None) -> DrawResult:
    check_entrants(entrants)
    groups = partition_into_groups(shuffle(entrants, rng))
    return DrawResult(groups=groups, matches=tuple(generate_matches(groups)))


class DrawEngine:
    """Хранит список участников и результат последней жеребьевки.

    Любое изменение списка сбрасывает результат: жеребьевку нельзя
    поправить частично, только провести заново.
    """

    def __init__(self, entrants: Iterable[str] | None = None, rng: RandomSource | None = None) -> None:
        self._entrants: list[str] = []
        self._result: DrawResult | None = None
        self._rng = rng
        if entrants is not None:
            self.add_entrants(entrants)

    @property
    def entrants(self) -> tuple[str, ...]:
        return tuple(self._entrants)

    @property
    def result(self) -> DrawResult | None:
        return self._result

    @property
    def state(self) -> EngineState:
        if self._result is not None:
            return EngineState.DRAWN
        return EngineState.READY if self.is_ready() else EngineState.COLLECTING

    def add_entrant(self, name: str) -> bool:
        # Пустые имена и строки из пробелов молча пропускаем.
        cleaned = (name or "").strip()
        if not cleaned:
            return False
        self._entrants.append(cleaned)
        self._result = None
        logger.debug("Added entrant %r, total %d", cleaned, len(self._entrants))
        return True

    def add_entrants(self, names: Iterable[str]) -> int:
        return sum(1 for name in names if self.add_entrant(name))

    def remove_entrant(self, index: int) -> str | None:
        # Индекс вне диапазона (в том числе отрицательный) ничего не меняет.
        if not 0 <= index < len(self._entrants):
            logger.debug("Ignored removal at out-of-range index %d", index)
            return None
        removed = self._entrants.pop(index)
        self._result = None
        logger.debug("Removed entrant %r, total %d", removed, len(self._entrants))
        return removed

    def clear_entrants(self) -> None:
        self._entrants.clear()
        self._result = None

    def count(self) -> int:
        return len(self._entrants)

    def is_ready(self) -> bool:
        return self.count() == TEAMS_TOTAL

    def generate_draw(self) -> DrawResult:
        try:
            result = build_draw(self._entrants, self._rng)
        except ValidationError as exc:
            logger.warning("Draw rejected: %s", exc)
            raise

        self._result = result
        logger.info("Draw generated: %d teams, %d matches", self.count(), len(result.matches))
        return result

    def _require_result(self) -> DrawResult:
        if self._result is None:
            raise NotReadyError()
        return self._result

    def format_text(self) -> str:
        return render_text(self._require_result())

    def format_markup(self) -> str:
        return render_markup(self._require_result())

"""Описывает неизменяемый результат жеребьевки: корзины и список матчей."""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

GROUP_COUNT = 4
GROUP_SIZE = 9
TEAMS_TOTAL = GROUP_COUNT * GROUP_SIZE
GROUP_LABELS = ("A", "B", "C", "D")
TRIPLE_SIZE = 3
INTRA_MATCHES_TOTAL = GROUP_COUNT * (GROUP_SIZE // TRIPLE_SIZE) * 3


class Match(BaseModel):
    model_config = ConfigDict(frozen=True)

    side1: str
    side2: str

    @model_validator(mode="after")
    def check_distinct_sides(self) -> "Match":
        if self.side1 == self.side2:
            raise ValueError("команда не может играть сама с собой")
        return self

    def key(self) -> frozenset[str]:
        # Матч неупорядоченный: порядок сторон важен только для вывода.
        return frozenset((self.side1, self.side2))

    def involves(self, entrant: str) -> bool:
        return entrant in (self.side1, self.side2)

    def __str__(self) -> str:
        return f"{self.side1} - {self.side2}"


class DrawResult(BaseModel):
    """Результат одной жеребьевки. Каждая новая жеребьевка создает новый объект."""

    model_config = ConfigDict(frozen=True)

    groups: tuple[tuple[str, ...], ...]
    matches: tuple[Match, ...]

    @field_validator("groups")
    @classmethod
    def check_groups_shape(cls, groups: tuple[tuple[str, ...], ...]) -> tuple[tuple[str, ...], ...]:
        if len(groups) != GROUP_COUNT or any(len(group) != GROUP_SIZE for group in groups):
            raise ValueError(f"нужно {GROUP_COUNT} корзины по {GROUP_SIZE} команд")
        return groups

    @property
    def group_labels(self) -> tuple[str, ...]:
        return GROUP_LABELS[: len(self.groups)]

    @property
    def intra_group_matches(self) -> tuple[Match, ...]:
        # Внутрикорзинные матчи идут первыми: по 3 тройки x 3 матча на корзину.
        return self.matches[:INTRA_MATCHES_TOTAL]

    @property
    def cross_group_matches(self) -> tuple[Match, ...]:
        return self.matches[INTRA_MATCHES_TOTAL:]

    def group(self, label: str) -> tuple[str, ...]:
        try:
            return self.groups[GROUP_LABELS.index(label)]
        except ValueError:
            raise KeyError(label) from None

    def group_of(self, entrant: str) -> str:
        for label, group in zip(self.group_labels, self.groups):
            if entrant in group:
                return label
        raise KeyError(entrant)

    def opponents(self, entrant: str) -> list[str]:
        # Соперники команды в порядке матчей.
        return [match.side2 if match.side1 == entrant else match.side1 for match in self.matches if match.involves(entrant)]

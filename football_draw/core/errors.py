"""Ошибки жеребьевки."""

from collections.abc import Sequence

from football_draw.models.draw import TEAMS_TOTAL


class DrawError(Exception):
    pass


class ValidationError(DrawError, ValueError):
    """Состав участников не подходит для жеребьевки: не 36 команд или есть повторы."""

    def __init__(self, actual: int, expected: int = TEAMS_TOTAL, duplicates: Sequence[str] = ()) -> None:
        self.expected = expected
        self.actual = actual
        self.duplicates = tuple(duplicates)
        if self.duplicates:
            message = f"duplicate teams: {', '.join(self.duplicates)}"
        else:
            message = f"expected {expected} teams, got {actual}"
        super().__init__(message)


class NotReadyError(DrawError, RuntimeError):
    def __init__(self, message: str = "draw has not been generated yet") -> None:
        super().__init__(message)

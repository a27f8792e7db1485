"""Базовые интерфейсы для отрисовки оверлея."""

from dataclasses import dataclass
from typing import Protocol

from todo_overlay.config import FontConfig, Rgba


@dataclass(frozen=True)
class Rect:
    """Прямоугольник в пикселях кадра (левый верхний угол + размеры)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def shifted(self, dx: int = 0, dy: int = 0) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


class TextMeasurer(Protocol):
    """
    Интерфейс измерения текста.

    Результат должен зависеть только от строки и шрифта.
    """

    def measure(self, text: str, font: FontConfig) -> tuple[float, float]:
        """
        Измерить строку.

        Args:
            text: Строка текста
            font: Шрифт

        Returns:
            Пара (ширина, высота) в пикселях
        """
        ...


class DrawingSurface(Protocol):
    """
    Поверхность, на которой рисуется один кадр.

    Действительна только на время обработки уведомления о кадре.
    """

    def draw_filled_rect(self, rect: Rect, color: Rgba) -> None:
        ...

    def draw_text(
        self,
        text: str,
        font: FontConfig,
        position: tuple[float, float],
        color: Rgba,
        bold: bool = False,
    ) -> None:
        """
        Нарисовать строку.

        Args:
            text: Строка текста
            font: Шрифт
            position: Левый верхний угол строки (x, y)
            color: Цвет (RGBA)
            bold: Рисовать жирным
        """
        ...

    def draw_line(
        self,
        start: tuple[float, float],
        vector: tuple[float, float],
        color: Rgba,
    ) -> None:
        """
        Нарисовать линию.

        Args:
            start: Начальная точка (x, y)
            vector: Размер линии (ширина, толщина)
            color: Цвет (RGBA)
        """
        ...

"""OpenCV реализация измерения текста и поверхности отрисовки."""

from collections.abc import Callable

import cv2
import numpy as np

from todo_overlay.config import FontConfig, Rgba
from todo_overlay.overlay.base import Rect


def _hershey_text(text: str) -> str:
    # Шрифты Hershey умеют только ASCII
    return text.replace("…", "...")


class CvTextMeasurer:
    """Измеритель текста на основе cv2.getTextSize."""

    def measure(self, text: str, font: FontConfig) -> tuple[float, float]:
        """
        Измерить строку.

        Высота включает baseline, чтобы строки с выносными элементами
        не налезали друг на друга.

        Args:
            text: Строка текста
            font: Шрифт

        Returns:
            Пара (ширина, высота) в пикселях
        """
        (text_width, text_height), baseline = cv2.getTextSize(
            _hershey_text(text), font.face, font.scale, font.thickness
        )
        return float(text_width), float(text_height + baseline)


class CvDrawingSurface:
    """
    Поверхность отрисовки поверх кадра OpenCV.

    Кадр в формате RGB (numpy array) модифицируется на месте.
    Полупрозрачные цвета смешиваются с кадром через cv2.addWeighted.
    """

    def __init__(self, frame: np.ndarray) -> None:
        """
        Инициализация поверхности.

        Args:
            frame: Кадр в формате RGB (numpy array)
        """
        self.frame = frame

    def draw_filled_rect(self, rect: Rect, color: Rgba) -> None:
        def paint(layer: np.ndarray, x0: int, y0: int) -> None:
            layer[:] = color[:3]

        self._blend(rect.x, rect.y, rect.right, rect.bottom, color[3], paint)

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

        Жирный текст рисуется двумя проходами, второй со сдвигом вправо
        на font.bold_offset пикселей.

        Args:
            text: Строка текста
            font: Шрифт
            position: Левый верхний угол строки (x, y)
            color: Цвет (RGBA)
            bold: Рисовать жирным
        """
        text = _hershey_text(text)
        (text_width, text_height), baseline = cv2.getTextSize(
            text, font.face, font.scale, font.thickness
        )
        x, y = int(position[0]), int(position[1])
        offsets = [0, font.bold_offset] if bold else [0]
        pad = font.thickness + font.bold_offset

        def paint(layer: np.ndarray, x0: int, y0: int) -> None:
            for dx in offsets:
                cv2.putText(
                    layer,
                    text,
                    (x - x0 + dx, y - y0 + text_height),
                    font.face,
                    font.scale,
                    color[:3],
                    font.thickness,
                    cv2.LINE_AA,
                )

        self._blend(
            x - pad,
            y - pad,
            x + text_width + pad,
            y + text_height + baseline + pad,
            color[3],
            paint,
        )

    def draw_line(
        self,
        start: tuple[float, float],
        vector: tuple[float, float],
        color: Rgba,
    ) -> None:
        x, y = int(start[0]), int(start[1])
        self.draw_filled_rect(Rect(x, y, int(vector[0]), int(vector[1])), color)

    def _blend(
        self,
        x0: int,
        y0: int,
        x1: int,
        y1: int,
        alpha: int,
        paint: Callable[[np.ndarray, int, int], None],
    ) -> None:
        height, width = self.frame.shape[:2]
        x0, y0 = max(x0, 0), max(y0, 0)
        x1, y1 = min(x1, width), min(y1, height)
        if x1 <= x0 or y1 <= y0 or alpha <= 0:
            return

        roi = self.frame[y0:y1, x0:x1]
        # cv2 рисует только в непрерывный массив, поэтому работаем с копией
        layer = roi.copy()
        paint(layer, x0, y0)
        if alpha >= 255:
            roi[:] = layer
        else:
            a = alpha / 255.0
            roi[:] = cv2.addWeighted(layer, a, roi, 1.0 - a, 0.0)

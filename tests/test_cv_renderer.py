"""Тесты для OpenCV реализации измерения и отрисовки."""

import numpy as np
import pytest

from todo_overlay.config import FontConfig
from todo_overlay.overlay.base import Rect
from todo_overlay.overlay.cv_renderer import CvDrawingSurface, CvTextMeasurer

OPAQUE_WHITE = (255, 255, 255, 255)


def test_measurer_returns_positive_size() -> None:
    """Измеритель возвращает положительные ширину и высоту."""
    width, height = CvTextMeasurer().measure("Buy 5 parsnips", FontConfig())

    assert width > 0
    assert height > 0


def test_measurer_is_deterministic() -> None:
    """Повторное измерение даёт тот же результат."""
    measurer = CvTextMeasurer()
    font = FontConfig()

    assert measurer.measure("Water the crops", font) == measurer.measure("Water the crops", font)


def test_measurer_longer_text_is_wider() -> None:
    """Более длинная строка шире."""
    measurer = CvTextMeasurer()
    font = FontConfig()

    assert measurer.measure("abcdef", font)[0] > measurer.measure("abc", font)[0]


def test_measurer_handles_ellipsis() -> None:
    """Многоточие измеряется как три точки."""
    measurer = CvTextMeasurer()
    font = FontConfig()

    assert measurer.measure("ab…", font) == measurer.measure("ab...", font)


def test_measurer_scales_with_font() -> None:
    """Больший масштаб шрифта даёт более широкую строку."""
    measurer = CvTextMeasurer()

    small = measurer.measure("To-Do List", FontConfig(scale=0.5))
    large = measurer.measure("To-Do List", FontConfig(scale=1.0))

    assert large[0] > small[0]


def test_filled_rect_opaque() -> None:
    """Непрозрачный прямоугольник закрашивает ровно свою область."""
    frame = np.zeros((100, 100, 3), dtype=np.uint8)
    surface = CvDrawingSurface(frame)

    surface.draw_filled_rect(Rect(10, 20, 30, 40), (255, 0, 0, 255))

    assert (frame[20:60, 10:40] == (255, 0, 0)).all()
    assert frame[:20].sum() == 0
    assert frame[60:].sum() == 0
    assert frame[:, :10].sum() == 0


def test_filled_rect_blends_alpha() -> None:
    """Полупрозрачный фон смешивается с кадром."""
    frame = np.full((50, 50, 3), 200, dtype=np.uint8)
    surface = CvDrawingSurface(frame)

    surface.draw_filled_rect(Rect(0, 0, 50, 50), (0, 0, 0, 51))

    # 200 * (1 - 0.2) = 160
    assert abs(int(frame[25, 25, 0]) - 160) <= 1


def test_transparent_color_draws_nothing() -> None:
    """Полностью прозрачный цвет не меняет кадр."""
    frame = np.zeros((50, 50, 3), dtype=np.uint8)
    surface = CvDrawingSurface(frame)

    surface.draw_filled_rect(Rect(0, 0, 50, 50), (255, 255, 255, 0))

    assert frame.sum() == 0


@pytest.mark.parametrize(
    "rect",
    [
        Rect(-20, -20, 40, 40),
        Rect(90, 90, 50, 50),
        Rect(200, 200, 10, 10),
        Rect(10, 10, -5, 5),
    ],
)
def test_filled_rect_is_clipped(rect: Rect) -> None:
    """Прямоугольники за краем кадра обрезаются без ошибок."""
    frame = np.zeros((100, 100, 3), dtype=np.uint8)

    CvDrawingSurface(frame).draw_filled_rect(rect, OPAQUE_WHITE)

    assert frame.shape == (100, 100, 3)


def test_text_renders() -> None:
    """Текст рисуется на кадре."""
    frame = np.zeros((100, 300, 3), dtype=np.uint8)

    CvDrawingSurface(frame).draw_text("To-Do List", FontConfig(), (5, 5), OPAQUE_WHITE)

    assert frame.sum() > 0


def test_text_is_drawn_below_position() -> None:
    """Позиция текста задаёт левый верхний угол строки."""
    frame = np.zeros((100, 300, 3), dtype=np.uint8)

    CvDrawingSurface(frame).draw_text("Farm", FontConfig(), (10, 50), OPAQUE_WHITE)

    assert frame[:45].sum() == 0
    assert frame[50:].sum() > 0


def test_bold_text_is_heavier() -> None:
    """Жирный текст закрашивает больше пикселей, чем обычный."""
    plain = np.zeros((60, 300, 3), dtype=np.uint8)
    bold = np.zeros((60, 300, 3), dtype=np.uint8)
    font = FontConfig()

    CvDrawingSurface(plain).draw_text("Water the crops", font, (5, 5), OPAQUE_WHITE)
    CvDrawingSurface(bold).draw_text("Water the crops", font, (5, 5), OPAQUE_WHITE, bold=True)

    assert bold.sum() > plain.sum()


def test_line_renders_as_thin_rect() -> None:
    """Линия рисуется полосой заданной длины и толщины."""
    frame = np.zeros((50, 100, 3), dtype=np.uint8)

    CvDrawingSurface(frame).draw_line((5, 10), (40, 1), OPAQUE_WHITE)

    assert (frame[10, 5:45] == 255).all()
    assert frame[11:].sum() == 0
    assert frame[:10].sum() == 0

"""Раскладка панели списка дел."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from todo_overlay.config import FontConfig, LayoutConfig, OverlayConfig
from todo_overlay.messages import ListItem
from todo_overlay.overlay.base import Rect, TextMeasurer

logger = logging.getLogger(__name__)

ELLIPSIS = "…"


@dataclass(frozen=True)
class DisplayLine:
    """Измеренная (и, возможно, обрезанная) строка панели."""

    text: str
    height: float
    bold: bool = False


@dataclass(frozen=True)
class RenderPlan:
    """
    Готовая к отрисовке панель: строки и ограничивающий прямоугольник.

    План неизменяем. При изменении списка строится новый план целиком,
    поэтому читатель никогда не видит частично построенную раскладку.
    """

    lines: tuple[DisplayLine, ...]
    bounds: Rect
    header: str
    header_size: tuple[float, float]

    @property
    def is_empty(self) -> bool:
        return not self.lines


class LayoutEngine:
    """
    Раскладчик панели.

    Превращает упорядоченный список пунктов в набор измеренных строк,
    обрезанных по ширине, и прямоугольник панели. Результат зависит
    только от входных данных, поэтому повторный вызов с теми же
    данными даёт тот же план.
    """

    def __init__(
        self,
        measurer: TextMeasurer,
        font: FontConfig,
        layout: LayoutConfig,
    ) -> None:
        """
        Инициализация раскладчика.

        Args:
            measurer: Измеритель текста
            font: Шрифт панели
            layout: Отступы и интервалы
        """
        self.measurer = measurer
        self.font = font
        self.layout_config = layout
        self._header_sizes: dict[str, tuple[float, float]] = {}

    def measure_header(self, header: str) -> tuple[float, float]:
        """Размер заголовка; измеряется один раз для каждой строки заголовка."""
        size = self._header_sizes.get(header)
        if size is None:
            size = self.measurer.measure(header, self.font)
            self._header_sizes[header] = size
        return size

    def truncate(self, text: str, available_width: float) -> tuple[str, float, float]:
        """
        Обрезать строку до доступной ширины.

        Пока строка не помещается, с конца убираются два символа
        и добавляется многоточие. Строка короче двух символов
        возвращается как есть, даже если не помещается.

        Args:
            text: Исходная строка
            available_width: Доступная ширина (px)

        Returns:
            Тройка (строка, ширина, высота)
        """
        width, height = self.measurer.measure(text, self.font)
        while width > available_width:
            if len(text) < 2:
                break
            text = text[:-2] + ELLIPSIS
            width, height = self.measurer.measure(text, self.font)
        return text, width, height

    def layout(
        self,
        items: Iterable[ListItem],
        config: OverlayConfig,
        header: str | None = None,
    ) -> RenderPlan:
        """
        Построить план панели.

        Args:
            items: Пункты списка в исходном порядке
            config: Пользовательские настройки оверлея
            header: Заголовок панели (по умолчанию из LayoutConfig)

        Returns:
            Новый RenderPlan
        """
        lc = self.layout_config
        if header is None:
            header = lc.header_text
        header_width, header_height = self.measure_header(header)

        items = list(items)
        if not items:
            return RenderPlan(
                lines=(),
                bounds=Rect(config.offset_x, config.offset_y, 0, 0),
                header=header,
                header_size=(header_width, header_height),
            )

        # Заголовок может сделать панель шире max_width
        available_width = max(
            config.max_width - lc.margin_left - lc.margin_right, header_width
        )
        used_width = header_width
        cursor = lc.margin_top + header_height
        lines: list[DisplayLine] = []

        for item in items:
            if item.is_done or item.hide_in_overlay or not item.is_visible_today:
                continue

            if len(lines) >= config.max_items:
                _, marker_height = self.measurer.measure(lc.overflow_marker, self.font)
                lines.append(DisplayLine(lc.overflow_marker, marker_height, False))
                cursor += marker_height
                break

            cursor += lc.line_spacing
            text = item.text if item.is_header else lc.item_indent + item.text
            text, width, height = self.truncate(text, available_width)
            used_width = max(used_width, width)
            lines.append(DisplayLine(text, height, item.is_bold))
            cursor += height

        bounds = Rect(
            config.offset_x,
            config.offset_y,
            int(used_width + lc.margin_left + lc.margin_right),
            int(cursor) + lc.margin_bottom,
        )
        logger.debug(
            "Layout: %d items -> %d lines, bounds=%s", len(items), len(lines), bounds
        )
        return RenderPlan(
            lines=tuple(lines),
            bounds=bounds,
            header=header,
            header_size=(header_width, header_height),
        )

"""Контроллер оверлея: держит актуальный план и рисует его каждый кадр."""

import logging
from enum import Enum

from todo_overlay.bus import EventBus
from todo_overlay.config import FontConfig, LayoutConfig, OverlayConfig
from todo_overlay.messages import (
    TOPIC_FRAME_RENDERED,
    TOPIC_LIST_CHANGED,
    FrameRendered,
    HostContext,
    ListChanged,
)
from todo_overlay.overlay.base import DrawingSurface, Rect
from todo_overlay.overlay.layout import LayoutEngine, RenderPlan
from todo_overlay.todo_list import TodoList

logger = logging.getLogger(__name__)


class ControllerState(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"


class OverlayController:
    """
    Контроллер оверлея списка дел.

    Подписывается на изменения списка (перестроение плана) и на
    отрисовку кадра (вывод плана). Оба обработчика вызываются хостом
    последовательно в одном потоке. Поле ``_plan`` пишет только
    ``_on_list_changed``/``refresh``, и каждый раз туда кладётся новый
    неизменяемый RenderPlan целиком, поэтому отрисовка всегда видит
    согласованный план без блокировок.

    Состояния: IDLE -> ACTIVE при создании, ACTIVE -> IDLE при dispose().
    Повторная активация не поддерживается, нужно создать новый экземпляр.
    """

    def __init__(
        self,
        todo_list: TodoList,
        bus: EventBus,
        engine: LayoutEngine,
        config: OverlayConfig,
        layout: LayoutConfig,
        font: FontConfig,
    ) -> None:
        """
        Инициализация контроллера.

        Args:
            todo_list: Источник пунктов списка
            bus: Шина событий хоста
            engine: Раскладчик панели
            config: Пользовательские настройки (читаются при каждом кадре)
            layout: Отступы и интервалы
            font: Шрифт панели
        """
        self.todo_list = todo_list
        self.bus = bus
        self.engine = engine
        self.config = config
        self.layout_config = layout
        self.font = font
        self.state = ControllerState.IDLE

        self._plan: RenderPlan = self.engine.layout(self.todo_list.items, self.config)

        self.bus.subscribe(TOPIC_FRAME_RENDERED, self._on_frame_rendered)
        self.bus.subscribe(TOPIC_LIST_CHANGED, self._on_list_changed)
        self.state = ControllerState.ACTIVE
        logger.info("Overlay controller active with %d lines", len(self._plan.lines))

    @property
    def plan(self) -> RenderPlan:
        return self._plan

    def refresh(self) -> RenderPlan:
        """
        Перестроить план из текущего состояния списка.

        Нужен после изменения max_width, max_items или смещений,
        которые учитываются только при раскладке.

        Raises:
            RuntimeError: Если контроллер уже остановлен
        """
        if self.state is not ControllerState.ACTIVE:
            raise RuntimeError("Overlay controller has been disposed")
        self._plan = self.engine.layout(self.todo_list.items, self.config)
        return self._plan

    def dispose(self) -> None:
        """Отписаться от шины. Повторный вызов ничего не делает."""
        if self.state is ControllerState.IDLE:
            logger.warning("Overlay controller already disposed")
            return
        self.bus.unsubscribe(TOPIC_LIST_CHANGED, self._on_list_changed)
        self.bus.unsubscribe(TOPIC_FRAME_RENDERED, self._on_frame_rendered)
        self.state = ControllerState.IDLE
        logger.info("Overlay controller disposed")

    def is_suppressed(self, host: HostContext) -> bool:
        """
        Проверить, нужно ли пропустить отрисовку в этом кадре.

        Args:
            host: Состояние хоста на момент кадра

        Returns:
            True, если панель рисовать не нужно
        """
        if self._plan.is_empty:
            return True
        if not self.config.enabled:
            return True
        if host.taking_screenshot:
            return True
        if host.cinematic_active:
            return True
        if self.config.hide_at_festivals and host.festival_active:
            return True
        return False

    def effective_bounds(self, host: HostContext) -> Rect:
        """Прямоугольник панели с учётом индикатора глубины на подземных уровнях."""
        bounds = self._plan.bounds
        if host.in_deep_level:
            bounds = bounds.shifted(dy=self.layout_config.depth_offset)
        return bounds

    def draw(self, surface: DrawingSurface, bounds: Rect) -> None:
        """
        Нарисовать текущий план.

        Args:
            surface: Поверхность кадра
            bounds: Прямоугольник панели
        """
        plan = self._plan
        lc = self.layout_config
        color = self.config.text_color
        header_width, header_height = plan.header_size

        top = bounds.y + lc.margin_top
        left = bounds.x + lc.margin_left

        surface.draw_filled_rect(bounds, self.config.background_color)
        surface.draw_text(plan.header, self.font, (left, top), color, bold=True)
        top += header_height
        surface.draw_line((left, top), (header_width - lc.separator_inset, 1), color)

        for line in plan.lines:
            top += lc.line_spacing
            surface.draw_text(line.text, self.font, (left, top), color, bold=line.bold)
            top += line.height

    def _on_list_changed(self, message: ListChanged) -> None:
        # Шина общая, чужие списки игнорируем
        if message.source is not self.todo_list:
            return
        self._plan = self.engine.layout(message.items, self.config)

    def _on_frame_rendered(self, message: FrameRendered) -> None:
        if self.is_suppressed(message.host):
            return
        self.draw(message.surface, self.effective_bounds(message.host))

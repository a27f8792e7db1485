"""Оверлей списка дел: раскладка панели и её отрисовка поверх кадра."""

from todo_overlay.overlay.base import DrawingSurface, Rect, TextMeasurer
from todo_overlay.overlay.controller import ControllerState, OverlayController
from todo_overlay.overlay.cv_renderer import CvDrawingSurface, CvTextMeasurer
from todo_overlay.overlay.layout import DisplayLine, LayoutEngine, RenderPlan

__all__ = [
    "ControllerState",
    "CvDrawingSurface",
    "CvTextMeasurer",
    "DisplayLine",
    "DrawingSurface",
    "LayoutEngine",
    "OverlayController",
    "Rect",
    "RenderPlan",
    "TextMeasurer",
]

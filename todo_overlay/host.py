import logging

import cv2
import numpy as np

from todo_overlay.bus import EventBus
from todo_overlay.config import Config
from todo_overlay.messages import FrameRendered, HostContext
from todo_overlay.overlay import (
    CvDrawingSurface,
    CvTextMeasurer,
    LayoutEngine,
    OverlayController,
)
from todo_overlay.todo_list import TodoList

logger = logging.getLogger(__name__)


def create_overlay_controller(
    todo_list: TodoList, bus: EventBus, cfg: Config
) -> OverlayController:
    """Wire an OverlayController with the OpenCV text measurer."""
    engine = LayoutEngine(CvTextMeasurer(), cfg.font, cfg.layout)
    controller = OverlayController(
        todo_list, bus, engine, cfg.overlay, cfg.layout, cfg.font
    )
    logger.info(
        "Overlay initialized (max_width=%d, max_items=%d)",
        cfg.overlay.max_width,
        cfg.overlay.max_items,
    )
    return controller


class FrameHost:
    """
    Frame loop driver.

    Owns the RGB canvas and the current host state, and publishes one
    frame-render notification per frame. The drawing surface handed to
    subscribers is only valid during that publish call.
    """

    def __init__(self, bus: EventBus, cfg: Config, context: HostContext | None = None) -> None:
        self.bus = bus
        self.cfg = cfg
        self.context = context if context is not None else HostContext()
        self._frame_count = 0

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def render_frame(self, background: np.ndarray | None = None) -> np.ndarray:
        if background is None:
            frame = np.zeros(
                (self.cfg.preview.height, self.cfg.preview.width, 3), dtype=np.uint8
            )
        else:
            frame = background.copy()

        self.bus.publish_frame(FrameRendered(CvDrawingSurface(frame), self.context))
        self._frame_count += 1
        return frame

    def save_preview(self, frame: np.ndarray, path: str | None = None) -> str:
        """Write an RGB frame to disk; raises OSError if OpenCV cannot write it."""
        path = path or self.cfg.preview.output_path
        try:
            written = cv2.imwrite(path, cv2.cvtColor(frame, cv2.COLOR_RGB2BGR))
        except cv2.error as exc:
            raise OSError(f"Failed to write preview to {path}: {exc}") from exc
        if not written:
            raise OSError(f"Failed to write preview to {path}")
        logger.info("Preview saved to %s", path)
        return path

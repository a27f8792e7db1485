from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from todo_overlay.overlay.base import DrawingSurface
    from todo_overlay.todo_list import TodoList

TOPIC_LIST_CHANGED = "todo/changed"
TOPIC_FRAME_RENDERED = "frame/rendered"


class LocationKind(str, Enum):
    SURFACE = "surface"
    MINE = "mine"
    VOLCANO_DUNGEON = "volcano_dungeon"


@dataclass(frozen=True)
class ListItem:
    text: str
    is_header: bool = False
    is_bold: bool = False
    is_done: bool = False
    hide_in_overlay: bool = False
    is_visible_today: bool = True


@dataclass
class HostContext:
    taking_screenshot: bool = False
    event_up: bool = False
    farm_event_active: bool = False
    festival_active: bool = False
    location: LocationKind = LocationKind.SURFACE
    mine_level: int = 0  # > 0 while inside the mines
    volcano_level: int = 0  # only meaningful in the volcano dungeon

    @property
    def cinematic_active(self) -> bool:
        return self.event_up or self.farm_event_active

    @property
    def in_deep_level(self) -> bool:
        if self.mine_level > 0:
            return True
        return self.location == LocationKind.VOLCANO_DUNGEON and self.volcano_level > 0


@dataclass
class ListChanged:
    items: tuple[ListItem, ...] = field(default_factory=tuple)
    source: TodoList | None = None  # list that published the snapshot


@dataclass
class FrameRendered:
    surface: DrawingSurface  # valid only while the notification is dispatched
    host: HostContext = field(default_factory=HostContext)

import logging
import sys

from todo_overlay import event_bus
from todo_overlay.config import config
from todo_overlay.host import FrameHost, create_overlay_controller
from todo_overlay.messages import ListItem
from todo_overlay.todo_list import TodoList

DEMO_ITEMS = [
    ListItem("Farm", is_header=True, is_bold=True),
    ListItem("Water the crops"),
    ListItem("Buy 5 parsnips"),
    ListItem("Ship the blueberries", is_done=True),
    ListItem("Town", is_header=True, is_bold=True),
    ListItem("Give Abigail an amethyst before the shops close on Friday evening"),
    ListItem("Check the community center bundles", hide_in_overlay=True),
    ListItem("Visit the traveling cart", is_visible_today=False),
]


def main() -> None:
    # Configure logging for the entire application
    logging.basicConfig(
        level=logging.INFO,
        format="%(levelname)s:     %(name)s - %(message)s",
    )

    logging.getLogger("todo_overlay").setLevel(logging.INFO)

    todo_list = TodoList(event_bus, DEMO_ITEMS)
    controller = create_overlay_controller(todo_list, event_bus, config)
    host = FrameHost(event_bus, config)

    try:
        frame = host.render_frame()
        host.save_preview(frame, sys.argv[1] if len(sys.argv) > 1 else None)
    finally:
        controller.dispose()


if __name__ == "__main__":
    main()

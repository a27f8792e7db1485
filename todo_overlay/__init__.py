import logging

from .bus import EventBus

# Configure logging for the todo_overlay package
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s:     %(name)s - %(message)s",
)

logging.getLogger("todo_overlay").setLevel(logging.INFO)

event_bus = EventBus()

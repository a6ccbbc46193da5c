from .base import ResourceFacade, CRUDResource, build_params, require
from .assistants import Assistants, AssistantFiles
from .threads import Threads, validate_messages
from .messages import Messages, MessageFiles
from .runs import Runs
from .files import Files

__all__ = [
    "ResourceFacade",
    "CRUDResource",
    "build_params",
    "require",
    "Assistants",
    "AssistantFiles",
    "Threads",
    "validate_messages",
    "Messages",
    "MessageFiles",
    "Runs",
    "Files",
]

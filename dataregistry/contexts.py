"""
Context levels of the hosting platform.

Values match the platform's own constants so context levels coming from
request parameters can be compared directly.
"""

from typing import NamedTuple

CONTEXT_SYSTEM = 10
CONTEXT_USER = 30
CONTEXT_COURSECAT = 40
CONTEXT_COURSE = 50
CONTEXT_MODULE = 70
CONTEXT_BLOCK = 80


class Context(NamedTuple):
    """A context instance.

    ``instanceid`` is the id of the category, course, module or block the
    context belongs to (0 for the system context).
    """

    id: int
    contextlevel: int
    instanceid: int = 0

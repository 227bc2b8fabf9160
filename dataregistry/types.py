from typing import Any, NamedTuple, TypedDict

from dataregistry.contexts import Context


class RawNode(TypedDict, total=False):
    """A tree node as built by the tree and branch builders.

    Every key is optional, :func:`dataregistry.nodes.complete` fills in
    the missing ones. ``categoryid`` is only set on category nodes and is
    not carried into completed nodes.
    """

    text: Any
    contextlevel: int | None
    contextid: int | None
    categoryid: int
    children: list["RawNode"]
    expandelement: str | None
    expandcontextid: int | None
    expanded: int
    active: bool | None


class CompletedNode(TypedDict):
    """A normalized tree node, as handed to the rendering layer."""

    text: Any
    active: bool | None
    children: list["CompletedNode"]
    expandelement: str | None
    expandcontextid: int | None
    contextid: int | None
    contextlevel: int | None
    expanded: int


class CategoryRecord(NamedTuple):
    id: int
    parent: int
    name: str
    coursecount: int = 0
    depth: int = 1


class CourseRecord(NamedTuple):
    id: int
    shortname: str


class ModuleInstance(NamedTuple):
    id: int
    name: str
    context: Context


class BlockInstance(NamedTuple):
    id: int
    title: str

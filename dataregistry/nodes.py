"Tree node normalization."

from dataregistry.types import CompletedNode, RawNode

NULLABLE_FIELDS = ('expandelement', 'expandcontextid', 'contextid',
                   'contextlevel')


def is_active(node, contextlevel=None, contextid=None):
    """
    :returns: ``True`` if ``node`` is the node selected by the
        ``(contextlevel, contextid)`` target, else ``None``.

    A context level only selects a node when no context id is given.
    """
    if contextlevel and node.get('contextlevel') and \
            node['contextlevel'] == contextlevel and not contextid:
        return True
    if contextid and node.get('contextid') and \
            node['contextid'] == contextid:
        return True
    return None


def complete(node: RawNode, contextlevel: int | None = None,
             contextid: int | None = None) -> CompletedNode:
    """
    Completes a tree node and its descendants with default values.

    :param node: The node to complete. It is not modified.
    :param contextlevel: Context level of the selected node, if any.
    :param contextid: Context id of the selected node, if any.

    :returns: A new node holding all the :class:`CompletedNode` keys.
        Keys that are missing or ``None`` in ``node`` get their default;
        ``active`` is computed with :func:`is_active` and ``expanded``
        is 1 when the node ends up with children.

    Example::

        complete({'text': 'Users', 'contextlevel': CONTEXT_USER},
                 contextlevel=CONTEXT_USER)
    """
    active = node.get('active')
    if active is None:
        active = is_active(node, contextlevel, contextid)

    children = [complete(child, contextlevel, contextid)
                for child in node.get('children') or []]

    completed = {
        'text': node.get('text'),
        'active': active,
        'children': children,
    }
    for field in NULLABLE_FIELDS:
        completed[field] = node.get(field)

    expanded = node.get('expanded')
    if expanded is None:
        expanded = 1 if children else 0
    completed['expanded'] = expanded
    return completed

"Course categories branch."

import logging

from django.utils.translation import gettext as _

from dataregistry.conf import get_orphan_policy
from dataregistry.exceptions import OrphanedCategory

logger = logging.getLogger(__name__)


def get_category_node(category, source):
    """
    :returns: The raw node of a category. Categories with courses get a
        placeholder child so the UI can fetch the courses on demand.
    """
    context = source.get_category_context(category)
    node = {
        'text': source.format_string(category.name, context),
        'categoryid': category.id,
        'contextid': context.id,
    }
    if category.coursecount > 0:
        node['children'] = [{
            'text': _('Courses'),
            'expandcontextid': context.id,
            'expandelement': 'course',
            'expanded': 0,
        }]
    return node


def build_category_forest(categories, source, orphans=None):
    """
    Builds the nested categories branch from a flat list of categories.

    :param categories:

        The category records, sorted by depth so parents come before
        their children.

    :param source:

        The :class:`~dataregistry.sources.RegistrySource` used to resolve
        category contexts and format names.

    :param orphans:

        What to do with categories whose parent is never placed:
        ``'drop'`` or ``'raise'``. Defaults to the
        ``DATAREGISTRY_ORPHANED_CATEGORIES`` setting.

    :returns: A list of root category nodes, each one with its
        subcategories in ``children``.

    :raise OrphanedCategory: when ``orphans`` is ``'raise'`` and some
        categories could not be placed.
    """
    policy = get_orphan_policy(orphans)

    forest = []
    # category id -> placed node
    lnk = {}
    pending = list(categories)
    while pending:
        remaining = []
        for category in pending:
            if category.parent == 0:
                siblings = forest
            elif category.parent in lnk:
                siblings = lnk[category.parent].setdefault('children', [])
            else:
                remaining.append(category)
                continue
            node = get_category_node(category, source)
            siblings.append(node)
            lnk[category.id] = node
        if len(remaining) == len(pending):
            # nothing placed in this round, the rest will never be
            break
        pending = remaining

    if pending:
        ids = [category.id for category in pending]
        if policy == 'raise':
            raise OrphanedCategory(
                'Categories with unknown parents: %s' % (
                    ', '.join(str(i) for i in ids), ),
                categories=pending)
        logger.warning('Dropping categories with unknown parents: %s', ids)
    return forest

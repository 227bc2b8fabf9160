"Choices for the purpose and category selectors."

from django.utils.translation import gettext as _


def _get(obj, attr):
    try:
        return obj[attr]
    except TypeError:
        return getattr(obj, attr)


def _options(items):
    options = {0: _('Not set')}
    for item in items:
        options[_get(item, 'id')] = _get(item, 'name')
    return options


def purpose_options(purposes):
    """
    :param purposes: Purposes, as model instances or mappings with ``id``
        and ``name``.

    :returns: A dict of purpose id to name, with a ``0`` "Not set" entry
        first.
    """
    return _options(purposes)


def category_options(categories):
    """
    :param categories: Data categories, as model instances or mappings
        with ``id`` and ``name``.

    :returns: A dict of category id to name, with a ``0`` "Not set" entry
        first.
    """
    return _options(categories)

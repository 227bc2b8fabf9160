"""Settings for dataregistry, read from the Django settings module."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

DEFAULTS = {
    'SOURCE': None,
    'ORPHANED_CATEGORIES': 'drop',
}

ORPHAN_POLICIES = ('drop', 'raise')


def get_setting(name):
    """
    :returns: the value of ``DATAREGISTRY_<name>``, or its default.

    :raise KeyError: when ``name`` is not a dataregistry setting
    """
    return getattr(settings, 'DATAREGISTRY_' + name, DEFAULTS[name])


def get_orphan_policy(policy=None):
    if policy is None:
        policy = get_setting('ORPHANED_CATEGORIES')
    if policy not in ORPHAN_POLICIES:
        raise ImproperlyConfigured(
            'DATAREGISTRY_ORPHANED_CATEGORIES must be one of %s, got %r' % (
                ', '.join(ORPHAN_POLICIES), policy))
    return policy


def get_source():
    """
    :returns: an instance of the source class named by
        ``DATAREGISTRY_SOURCE``.
    """
    path = get_setting('SOURCE')
    if not path:
        raise ImproperlyConfigured(
            'DATAREGISTRY_SOURCE must be set to build a tree without an '
            'explicit source.')
    return import_string(path)()

"""

    dataregistry.tree
    -----------------

    The data registry navigation tree.

    The default tree holds the system context, with the user, categories,
    activity modules and blocks context levels below it. Courses, their
    activities and their blocks are not included; nodes that have them
    carry an ``expandelement`` so the UI can fetch them later with the
    branch methods.

"""

import logging

from django.utils.translation import gettext as _

from dataregistry.categories import build_category_forest
from dataregistry.conf import get_source
from dataregistry.contexts import CONTEXT_BLOCK, CONTEXT_COURSE, \
    CONTEXT_COURSECAT, CONTEXT_MODULE, CONTEXT_SYSTEM, CONTEXT_USER
from dataregistry.exceptions import InvalidContextLevel
from dataregistry.nodes import complete

logger = logging.getLogger(__name__)


class DataRegistryTree:
    """Builds the data registry tree and its lazily loaded branches.

    :param source: The :class:`~dataregistry.sources.RegistrySource` to
        read from. Defaults to the one in ``DATAREGISTRY_SOURCE``.
    :param defaultcontextlevel: Context level of the selected node.
    :param defaultcontextid: Context id of the selected node. When given,
        it takes precedence over ``defaultcontextlevel``.
    """

    def __init__(self, source=None, defaultcontextlevel=None,
                 defaultcontextid=None):
        if source is None:
            source = get_source()
        self.source = source
        self.defaultcontextlevel = defaultcontextlevel
        self.defaultcontextid = defaultcontextid

    def get_default_tree_structure(self):
        """
        :returns: A list with the completed system node as its only item.
        """
        logger.debug('Building data registry tree (contextlevel=%s, '
                     'contextid=%s)', self.defaultcontextlevel,
                     self.defaultcontextid)
        categoriesbranch = self.get_all_categories_branch()

        elements = {
            'text': _('Site'),
            'contextlevel': CONTEXT_SYSTEM,
            'children': [
                {
                    'text': _('User'),
                    'contextlevel': CONTEXT_USER,
                }, {
                    'text': _('Categories'),
                    'children': categoriesbranch,
                    'expandelement': 'category',
                }, {
                    'text': _('Activity modules'),
                    'contextlevel': CONTEXT_MODULE,
                }, {
                    'text': _('Blocks'),
                    'contextlevel': CONTEXT_BLOCK,
                },
            ],
        }

        # a list of roots, even though there is a single one
        return [complete(elements, self.defaultcontextlevel,
                         self.defaultcontextid)]

    def get_all_categories_branch(self):
        return build_category_forest(self.source.get_categories(),
                                     self.source)

    def get_courses_branch(self, catcontext):
        """
        :returns: The completed nodes of the courses in a category.

        :raise InvalidContextLevel: if ``catcontext`` is not a course
            category context
        """
        if catcontext.contextlevel != CONTEXT_COURSECAT:
            raise InvalidContextLevel(
                'A course category context should be provided')

        branches = []
        for course in self.source.get_courses(catcontext):
            coursecontext = self.source.get_course_context(course)
            coursenode = {
                'text': self.source.format_string(course.shortname,
                                                  coursecontext),
                'contextid': coursecontext.id,
                'children': [
                    {
                        'text': _('Activities and resources'),
                        'expandcontextid': coursecontext.id,
                        'expandelement': 'module',
                        'expanded': 0,
                    }, {
                        'text': _('Blocks'),
                        'expandcontextid': coursecontext.id,
                        'expandelement': 'block',
                        'expanded': 0,
                    },
                ],
            }
            branches.append(complete(coursenode))
        return branches

    def get_modules_branch(self, coursecontext):
        """
        :returns: The completed nodes of the activity modules in a course,
            grouped by module type.

        :raise InvalidContextLevel: if ``coursecontext`` is not a course
            context
        """
        if coursecontext.contextlevel != CONTEXT_COURSE:
            raise InvalidContextLevel('A course context should be provided')

        branches = []
        instances = self.source.get_module_instances(coursecontext)
        for moduletype, cms in instances.items():
            modulename = self.source.get_module_type_name(moduletype)
            for cm in cms:
                text = _('%(instancename)s (%(modulename)s)') % {
                    'instancename': cm.name,
                    'modulename': modulename,
                }
                branches.append(complete({
                    'text': text,
                    'contextid': cm.context.id,
                }))
        return branches

    def get_blocks_branch(self, coursecontext):
        """
        :returns: The completed nodes of the blocks added to a course.

        :raise InvalidContextLevel: if ``coursecontext`` is not a course
            context
        """
        if coursecontext.contextlevel != CONTEXT_COURSE:
            raise InvalidContextLevel('A course context should be provided')

        branches = []
        for block in self.source.get_course_blocks(coursecontext) or []:
            blockcontext = self.source.get_block_context(block)
            branches.append(complete({
                'text': self.source.format_string(block.title, blockcontext),
                'contextid': blockcontext.id,
            }))
        return branches


def build_default_tree(defaultcontextlevel=None, defaultcontextid=None,
                       source=None):
    "Shortcut for :meth:`DataRegistryTree.get_default_tree_structure`."
    return DataRegistryTree(source, defaultcontextlevel,
                            defaultcontextid).get_default_tree_structure()


def build_course_branch(catcontext, source=None):
    return DataRegistryTree(source).get_courses_branch(catcontext)


def build_module_branch(coursecontext, source=None):
    return DataRegistryTree(source).get_modules_branch(coursecontext)


def build_block_branch(coursecontext, source=None):
    return DataRegistryTree(source).get_blocks_branch(coursecontext)

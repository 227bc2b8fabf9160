"""
    dataregistry.sources
    --------------------

    Host data sources.

    The tree builders never talk to the hosting platform directly; they
    ask a :class:`RegistrySource` for categories, courses, activity modules
    and blocks, and for the contexts those belong to.
"""

from django.utils.html import strip_tags


class RegistrySource:
    """ Source class.

    This is the base class that defines the API the tree builders use to
    read the hosting platform. Subclass it and point the
    ``DATAREGISTRY_SOURCE`` setting at the subclass.

    Errors raised by a source are not caught by the builders.
    """

    def get_categories(self):
        """
        :returns: All the course categories, hidden ones included, as
            :class:`~dataregistry.types.CategoryRecord` objects sorted by
            depth, parents first.
        """
        raise NotImplementedError

    def get_category_context(self, category):
        """
        :returns: The :class:`~dataregistry.contexts.Context` of a
            category record.
        """
        raise NotImplementedError

    def get_courses(self, catcontext):
        """
        :param catcontext: A course category context.

        :returns: The :class:`~dataregistry.types.CourseRecord` objects of
            the courses in the category.
        """
        raise NotImplementedError

    def get_course_context(self, course):
        """
        :returns: The :class:`~dataregistry.contexts.Context` of a course
            record.
        """
        raise NotImplementedError

    def get_module_instances(self, coursecontext):
        """
        :param coursecontext: A course context.

        :returns: A mapping of module type (e.g. ``'forum'``) to the
            :class:`~dataregistry.types.ModuleInstance` objects of that
            type in the course.
        """
        raise NotImplementedError

    def get_module_type_name(self, moduletype):
        """
        :returns: The display name of a module type.
        """
        raise NotImplementedError

    def get_course_blocks(self, coursecontext):
        """
        :param coursecontext: A course context.

        :returns: The :class:`~dataregistry.types.BlockInstance` objects
            added to the course. May be empty.
        """
        raise NotImplementedError

    def get_block_context(self, block):
        """
        :returns: The :class:`~dataregistry.contexts.Context` of a block
            instance.
        """
        raise NotImplementedError

    def format_string(self, text, context=None):
        """
        Formats a name for display in ``context``.

        The default implementation strips any markup and surrounding
        whitespace; override it to apply the platform's filters.
        """
        return strip_tags(str(text)).strip()

from dataregistry.contexts import CONTEXT_BLOCK, CONTEXT_COURSE, \
    CONTEXT_COURSECAT, CONTEXT_MODULE, Context
from dataregistry.sources import RegistrySource
from dataregistry.types import BlockInstance, CategoryRecord, CourseRecord, \
    ModuleInstance

CATEGORY_CONTEXT_OFFSET = 100
COURSE_CONTEXT_OFFSET = 200
BLOCK_CONTEXT_OFFSET = 400


def category_context(categoryid):
    return Context(CATEGORY_CONTEXT_OFFSET + categoryid, CONTEXT_COURSECAT,
                   categoryid)


def course_context(courseid):
    return Context(COURSE_CONTEXT_OFFSET + courseid, CONTEXT_COURSE, courseid)


SAMPLE_CATEGORIES = [
    CategoryRecord(1, 0, 'Miscellaneous', coursecount=2, depth=1),
    CategoryRecord(5, 0, '<b>Archive</b>', depth=1),
    CategoryRecord(2, 1, 'Science', depth=2),
    CategoryRecord(3, 1, 'Arts', coursecount=1, depth=2),
    CategoryRecord(4, 2, 'Physics', depth=3),
]

SAMPLE_COURSES = {
    1: [CourseRecord(10, 'MATH101'), CourseRecord(11, ' <i>HIST</i> ')],
    3: [CourseRecord(12, 'ART1')],
}

SAMPLE_MODULES = {
    10: {
        'forum': [
            ModuleInstance(1, 'Announcements', Context(301, CONTEXT_MODULE, 1)),
        ],
        'assign': [
            ModuleInstance(2, 'Essay', Context(302, CONTEXT_MODULE, 2)),
            ModuleInstance(3, 'Lab report', Context(303, CONTEXT_MODULE, 3)),
        ],
    },
}

SAMPLE_MODULE_NAMES = {'forum': 'Forum', 'assign': 'Assignment'}

SAMPLE_BLOCKS = {
    10: [BlockInstance(1, 'Calendar'), BlockInstance(2, 'Latest news')],
}


class MemorySource(RegistrySource):
    """Registry source backed by plain python structures."""

    def __init__(self, categories=(), courses=None, modules=None,
                 blocks=None, module_names=None):
        self.categories = list(categories)
        self.courses = courses or {}
        self.modules = modules or {}
        self.blocks = blocks or {}
        self.module_names = module_names or {}
        self.calls = []

    @classmethod
    def with_sample_data(cls):
        return cls(SAMPLE_CATEGORIES, SAMPLE_COURSES, SAMPLE_MODULES,
                   SAMPLE_BLOCKS, SAMPLE_MODULE_NAMES)

    def get_categories(self):
        self.calls.append('get_categories')
        return list(self.categories)

    def get_category_context(self, category):
        return category_context(category.id)

    def get_courses(self, catcontext):
        self.calls.append('get_courses')
        return self.courses.get(catcontext.instanceid, [])

    def get_course_context(self, course):
        return course_context(course.id)

    def get_module_instances(self, coursecontext):
        self.calls.append('get_module_instances')
        return self.modules.get(coursecontext.instanceid, {})

    def get_module_type_name(self, moduletype):
        return self.module_names[moduletype]

    def get_course_blocks(self, coursecontext):
        self.calls.append('get_course_blocks')
        return self.blocks.get(coursecontext.instanceid, [])

    def get_block_context(self, block):
        return Context(BLOCK_CONTEXT_OFFSET + block.id, CONTEXT_BLOCK,
                       block.id)

"""
Data access objects.

Module-level singletons are the intended entry point:

    from course_catalog.boundary.db.CRUD import course_crud
    rows = await course_crud.get_by_name(session, "Algebra")
"""

from course_catalog.boundary.db.CRUD.base_crud import BaseCRUD
from course_catalog.boundary.db.CRUD.course_crud import CourseCRUD, course_crud

__all__ = ["BaseCRUD", "CourseCRUD", "course_crud"]

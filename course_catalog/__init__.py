"""Course catalog service: course CRUD with active-name uniqueness."""

__version__ = "0.1.0"

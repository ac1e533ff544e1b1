"""Persistence layer: typed CRUD over the SQLModel tables."""

from . import day_repository, dev_repository, template_repository, user_repository

__all__ = [
    "day_repository",
    "dev_repository",
    "template_repository",
    "user_repository",
]

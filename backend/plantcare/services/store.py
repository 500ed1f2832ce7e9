"""
In-process record store behind the API.

Stands in for the hosted database: one dict per table, ids handed out
per table starting at 1. Route handlers get it through the `get_store`
dependency, which tests override with a fresh instance.
"""

from collections import defaultdict
from functools import lru_cache
from itertools import count

from plantcare.models.event import Event
from plantcare.models.plant import Plant
from plantcare.models.post import Comment, Post
from plantcare.models.user import UserProfile


class Store:
    def __init__(self) -> None:
        self.users: dict[int, UserProfile] = {}
        self.plants: dict[int, Plant] = {}
        self.events: dict[int, Event] = {}
        self.posts: dict[int, Post] = {}
        self.comments: dict[int, Comment] = {}
        self._sequences = defaultdict(lambda: count(1))

    def next_id(self, table: str) -> int:
        return next(self._sequences[table])


@lru_cache()
def get_store() -> Store:
    return Store()

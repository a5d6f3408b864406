"""
Follow relationships and friend suggestions over the social graph.
"""

from __future__ import annotations
from typing import Iterable, List

from loguru import logger

from tunegraph.catalog import Catalog
from tunegraph.exceptions import ValidationError
from tunegraph.graph.social import SocialGraph
from tunegraph.models import User
from tunegraph.services.records import UserSuggestion


class SocialService:
    """Keeps a :class:`SocialGraph` keyed by username in sync with the catalog."""

    def __init__(self, catalog: Catalog, graph: SocialGraph | None = None):
        self.catalog = catalog
        self.graph = graph if graph is not None else SocialGraph()

    def rebuild(self, users: Iterable[User]) -> None:
        users = list(users)
        logger.info(f"Building social graph for {len(users)} users")

        graph = SocialGraph()
        for user in users:
            graph.add_node(user.username)
        for user in users:
            for followed in self._known_follows(user):
                graph.connect(user.username, followed)
        self.graph = graph

        logger.success(f"Social graph built: {len(self.graph)} nodes, "
                       f"{self.graph.edge_count()} edges")

    def _known_follows(self, user: User) -> List[str]:
        """Followed usernames that exist in the catalog; the rest are skipped."""
        known = [u for u in sorted(user.following)
                 if self.catalog.get_user_by_username(u) is not None]
        unknown = user.following.difference(known)
        if unknown:
            logger.warning(f"User '{user.username}' follows unknown users "
                           f"{sorted(unknown)}, not linking them")
        return known

    def register_user(self, user: User) -> None:
        """
        Add a user's node, linking it to the catalog users it follows and
        to existing users that already follow it.
        """
        self.graph.add_node(user.username)
        for followed in self._known_follows(user):
            self.graph.connect(user.username, followed)
        for other in self.catalog.users():
            if other != user and user.username in other.following:
                self.graph.connect(other.username, user.username)

    def remove_user(self, username: str) -> None:
        self.graph.remove_node(username)

    def follow(self, follower_id: int, target_id: int) -> None:
        """
        Make one user follow another.

        Raises:
            NotFoundError: If either user is unknown
            ValidationError: If a user tries to follow themselves
        """
        follower = self.catalog.require_user(follower_id)
        target = self.catalog.require_user(target_id)
        if follower == target:
            raise ValidationError(f"User '{follower.username}' cannot follow themselves")

        follower.follow(target.username)
        self.graph.connect(follower.username, target.username)
        logger.debug(f"{follower.username} now follows {target.username}")

    def unfollow(self, follower_id: int, target_id: int) -> None:
        """
        Stop following a user.

        Adjacency is symmetric, so the edge is dropped even if the target
        still follows the follower.
        """
        follower = self.catalog.require_user(follower_id)
        target = self.catalog.require_user(target_id)

        follower.unfollow(target.username)
        self.graph.disconnect(follower.username, target.username)
        logger.debug(f"{follower.username} unfollowed {target.username}")

    def suggestions(self, user_id: int) -> List[UserSuggestion]:
        """Friends of friends of a user, in discovery order."""
        user = self.catalog.require_user(user_id)
        results: List[UserSuggestion] = []
        for username in self.graph.friends_of_friends(user.username):
            suggested = self.catalog.get_user_by_username(username)
            if suggested is not None:
                results.append(UserSuggestion.from_user(suggested))
        return results

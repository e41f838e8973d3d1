"""
Post ownership authorization.

Every mutation on a post is decided by one table keyed by
``(PostOperation, ResourceState)``. Each entry is a rule that either
returns (allowed) or raises a domain error. Rules never touch the store.

Default table:

    ============  ==========================  =====================
    operation     post exists                 post missing
    ============  ==========================  =====================
    DELETE        owner only (AUTHORIZATION)  AUTHORIZATION
    UPDATE        any caller                  NOT_FOUND
    ============  ==========================  =====================

DELETE on a missing post raises exactly the same error as DELETE of a
post the caller does not own, so the response does not reveal whether
the id exists.

UPDATE on an existing post is open to every caller, including anonymous
ones unless ``require_owner_for_update`` is switched on.

The post is looked up before the decision and mutated after it in a
separate store call, so a concurrent mutation can land in between.
"""

# Standard library imports
import logging
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

# Local application imports
from ..exceptions import AuthorizationError, NotFoundError
from ..models.caller import AuthenticatedCaller, Caller
from ..models.post import Post

logger = logging.getLogger(__name__)

NOT_OWNER_MESSAGE = "only the creator of a blog can modify it"
NOT_FOUND_MESSAGE = "blog not found"


class PostOperation(str, Enum):
    DELETE = "delete"
    UPDATE = "update"


class ResourceState(str, Enum):
    EXISTS = "exists"
    MISSING = "missing"


Rule = Callable[[Optional[Post], Caller], None]


def allow_any(post: Optional[Post], caller: Caller) -> None:
    return None


def require_owner(post: Optional[Post], caller: Caller) -> None:
    if not isinstance(caller, AuthenticatedCaller):
        raise AuthorizationError(NOT_OWNER_MESSAGE)
    if post is None or not post.is_owned_by(caller.id):
        raise AuthorizationError(NOT_OWNER_MESSAGE)


def deny(post: Optional[Post], caller: Caller) -> None:
    raise AuthorizationError(NOT_OWNER_MESSAGE)


def not_found(post: Optional[Post], caller: Caller) -> None:
    raise NotFoundError(NOT_FOUND_MESSAGE)


def build_policy_table(require_owner_for_update: bool = False) -> Dict[Tuple[PostOperation, ResourceState], Rule]:
    """
    Build the rule table.

    Args:
        require_owner_for_update: Replace the open UPDATE rule with the
            owner check used by DELETE

    Returns:
        Mapping of (operation, resource state) to rule
    """
    return {
        (PostOperation.DELETE, ResourceState.EXISTS): require_owner,
        (PostOperation.DELETE, ResourceState.MISSING): deny,
        (PostOperation.UPDATE, ResourceState.EXISTS): (
            require_owner if require_owner_for_update else allow_any
        ),
        (PostOperation.UPDATE, ResourceState.MISSING): not_found,
    }


class PostAuthorizationPolicy:
    """Renders allow/deny decisions for post mutations"""

    def __init__(self, require_owner_for_update: bool = False) -> None:
        self.require_owner_for_update = require_owner_for_update
        self.rules = build_policy_table(require_owner_for_update)

    def authorize(self, operation: PostOperation, post: Optional[Post], caller: Caller) -> None:
        """
        Check whether ``caller`` may perform ``operation`` on ``post``.

        Args:
            operation: The mutation being attempted
            post: The post as currently stored, or None if the id did not resolve
            caller: The resolved caller identity

        Raises:
            AuthorizationError: If the caller may not perform the operation
            NotFoundError: If the operation requires an existing post
        """
        state = ResourceState.MISSING if post is None else ResourceState.EXISTS
        rule = self.rules[(operation, state)]
        try:
            rule(post, caller)
        except (AuthorizationError, NotFoundError) as e:
            logger.info(f"Denied {operation.value} on {state.value} post for {caller}: {e.message}")
            raise

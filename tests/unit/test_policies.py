"""
Unit tests for post ownership authorization and update merging.
"""
import pytest
from bloglist.domain.exceptions import AuthorizationError, NotFoundError, ValidationError
from bloglist.domain.models.caller import ANONYMOUS, AuthenticatedCaller
from bloglist.domain.models.post import Post
from bloglist.domain.policies.mutation import merge_post_update
from bloglist.domain.policies.ownership import (
    PostAuthorizationPolicy,
    PostOperation,
    ResourceState,
    build_policy_table,
)


OWNER = AuthenticatedCaller(id="owner-1", username="owner")
STRANGER = AuthenticatedCaller(id="stranger-2", username="stranger")


def _post(owner_user_id="owner-1") -> Post:
    return Post(
        id="post-1",
        title="React patterns",
        url="https://reactpatterns.com/",
        author="Michael Chan",
        likes=7,
        owner_user_id=owner_user_id,
    )


class TestPolicyTable:

    def test_table_covers_every_operation_and_state(self):
        table = build_policy_table()
        assert set(table) == {(op, state) for op in PostOperation for state in ResourceState}


class TestDeleteAuthorization:

    def test_owner_may_delete(self):
        PostAuthorizationPolicy().authorize(PostOperation.DELETE, _post(), OWNER)

    @pytest.mark.parametrize("caller", [STRANGER, ANONYMOUS])
    def test_non_owner_denied(self, caller):
        with pytest.raises(AuthorizationError):
            PostAuthorizationPolicy().authorize(PostOperation.DELETE, _post(), caller)

    @pytest.mark.parametrize("caller", [OWNER, STRANGER, ANONYMOUS])
    def test_missing_post_denied_like_not_owned(self, caller):
        policy = PostAuthorizationPolicy()
        with pytest.raises(AuthorizationError) as missing:
            policy.authorize(PostOperation.DELETE, None, caller)
        with pytest.raises(AuthorizationError) as not_owned:
            policy.authorize(PostOperation.DELETE, _post(owner_user_id="someone-else"), caller)
        assert missing.value.message == not_owned.value.message

    def test_post_without_owner_cannot_be_deleted(self):
        with pytest.raises(AuthorizationError):
            PostAuthorizationPolicy().authorize(PostOperation.DELETE, _post(owner_user_id=None), OWNER)


class TestUpdateAuthorization:

    @pytest.mark.parametrize("caller", [OWNER, STRANGER, ANONYMOUS])
    def test_any_caller_may_update_by_default(self, caller):
        PostAuthorizationPolicy().authorize(PostOperation.UPDATE, _post(), caller)

    @pytest.mark.parametrize("caller", [OWNER, STRANGER, ANONYMOUS])
    def test_missing_post_is_not_found(self, caller):
        with pytest.raises(NotFoundError):
            PostAuthorizationPolicy().authorize(PostOperation.UPDATE, None, caller)

    def test_hardened_update_requires_owner(self):
        policy = PostAuthorizationPolicy(require_owner_for_update=True)
        policy.authorize(PostOperation.UPDATE, _post(), OWNER)
        with pytest.raises(AuthorizationError):
            policy.authorize(PostOperation.UPDATE, _post(), STRANGER)
        with pytest.raises(AuthorizationError):
            policy.authorize(PostOperation.UPDATE, _post(), ANONYMOUS)

    def test_hardened_update_still_reports_missing_post(self):
        policy = PostAuthorizationPolicy(require_owner_for_update=True)
        with pytest.raises(NotFoundError):
            policy.authorize(PostOperation.UPDATE, None, OWNER)


class TestMergePostUpdate:

    def test_likes_only_keeps_everything_else(self):
        post = _post()
        merged = merge_post_update(post, likes=1056)
        assert merged.likes == 1056
        assert merged.title == post.title
        assert merged.url == post.url
        assert merged.author == post.author
        assert merged.owner_user_id == post.owner_user_id
        assert merged.id == post.id

    def test_title_only(self):
        merged = merge_post_update(_post(), title="React anti-patterns")
        assert merged.title == "React anti-patterns"
        assert merged.likes == 7

    def test_empty_payload_is_identity(self):
        post = _post()
        assert merge_post_update(post) == post

    def test_zero_likes_is_applied(self):
        assert merge_post_update(_post(), likes=0).likes == 0

    def test_input_not_mutated(self):
        post = _post()
        merge_post_update(post, title="Changed", likes=1)
        assert post.title == "React patterns"
        assert post.likes == 7

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            merge_post_update(_post(), title="")

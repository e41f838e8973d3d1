# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.post_dto import PostCreateRequest, PostUpdateRequest, PostResponse
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...domain.exceptions import BlogListError
from ...domain.models.caller import Caller
from ...di.container import get_container
from .dependencies import get_caller
from .errors import to_http_exception


router = APIRouter(tags=["blogs"])


@router.get("", response_model=List[PostResponse])
async def list_posts() -> List[PostResponse]:
    """
    List every post with its owner's username and name

    Returns:
        List of PostResponse objects
    """
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)
    return await list_posts_use_case.execute()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str) -> PostResponse:
    """
    Get a post by ID

    Args:
        post_id: ID of the post

    Returns:
        PostResponse with post information
    """
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)

    try:
        return await get_post_use_case.execute(post_id)
    except BlogListError as exception:
        raise to_http_exception(exception)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    caller: Caller = Depends(get_caller),
) -> PostResponse:
    """
    Create a new post owned by the caller

    Args:
        request: Post creation request
        caller: Resolved caller identity (from dependency)

    Returns:
        PostResponse with created post information
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)

    try:
        return await create_post_use_case.execute(request=request, caller=caller)
    except BlogListError as exception:
        raise to_http_exception(exception)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    request: PostUpdateRequest,
    caller: Caller = Depends(get_caller),
) -> PostResponse:
    """
    Update a post's title and/or likes

    Args:
        post_id: ID of the post
        request: Partial update payload
        caller: Resolved caller identity (from dependency)

    Returns:
        PostResponse with the merged post
    """
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)

    try:
        return await update_post_use_case.execute(post_id=post_id, request=request, caller=caller)
    except BlogListError as exception:
        raise to_http_exception(exception)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    caller: Caller = Depends(get_caller),
) -> Response:
    """
    Delete a post; only its owner may do so

    Args:
        post_id: ID of the post
        caller: Resolved caller identity (from dependency)
    """
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)

    try:
        await delete_post_use_case.execute(post_id=post_id, caller=caller)
    except BlogListError as exception:
        raise to_http_exception(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

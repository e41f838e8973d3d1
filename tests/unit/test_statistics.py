"""
Unit tests for bloglist.domain.services.statistics
"""
import copy

from bloglist.domain.models.post import Post
from bloglist.domain.services.statistics import (
    AuthorTally,
    FavoriteBlog,
    count_blogs_by_author,
    favorite_blog,
    most_blogs,
    total_likes,
)


def _post(title: str, author, likes: int) -> Post:
    return Post(id=None, title=title, url=f"https://example.com/{title}", author=author, likes=likes)


BLOGS = [
    _post("React patterns", "Michael Chan", 7),
    _post("Go To Statement Considered Harmful", "Edsger W. Dijkstra", 5),
    _post("Canonical string reduction", "Edsger W. Dijkstra", 12),
    _post("First class tests", "Robert C. Martin", 10),
    _post("TDD harms architecture", "Robert C. Martin", 0),
    _post("Type wars", "Robert C. Martin", 2),
]


class TestTotalLikes:

    def test_empty_list_is_zero(self):
        assert total_likes([]) == 0

    def test_single_post_equals_its_likes(self):
        assert total_likes([_post("A", "X", 5)]) == 5

    def test_sums_all_likes(self):
        posts = [_post("A", "X", 7), _post("B", "Y", 5), _post("C", "Z", 12)]
        assert total_likes(posts) == 24

    def test_bigger_list(self):
        assert total_likes(BLOGS) == 36


class TestFavoriteBlog:

    def test_empty_list_is_none(self):
        assert favorite_blog([]) is None

    def test_picks_most_liked(self):
        posts = [_post("A", "X", 5), _post("B", "Y", 12)]
        assert favorite_blog(posts) == FavoriteBlog(title="B", author="Y", likes=12)

    def test_bigger_list(self):
        assert favorite_blog(BLOGS) == FavoriteBlog(
            title="Canonical string reduction",
            author="Edsger W. Dijkstra",
            likes=12,
        )

    def test_tie_goes_to_first_encountered(self):
        posts = [_post("First", "X", 9), _post("Second", "Y", 9), _post("Low", "Z", 1)]
        assert favorite_blog(posts).title == "First"

    def test_result_has_no_id_or_url(self):
        result = favorite_blog(BLOGS)
        assert not hasattr(result, "url")
        assert not hasattr(result, "id")


class TestMostBlogs:

    def test_empty_list_is_none(self):
        assert most_blogs([]) is None

    def test_three_by_x_two_by_y(self):
        posts = [
            _post("1", "X", 0), _post("2", "Y", 0), _post("3", "X", 0),
            _post("4", "Y", 0), _post("5", "X", 0),
        ]
        assert most_blogs(posts) == AuthorTally(author="X", blogs=3)

    def test_bigger_list(self):
        assert most_blogs(BLOGS) == AuthorTally(author="Robert C. Martin", blogs=3)

    def test_tie_goes_to_first_author_seen(self):
        posts = [_post("1", "Y", 0), _post("2", "X", 0), _post("3", "X", 0), _post("4", "Y", 0)]
        assert most_blogs(posts) == AuthorTally(author="Y", blogs=2)

    def test_authors_are_case_sensitive(self):
        posts = [_post("1", "ann", 0), _post("2", "Ann", 0), _post("3", "Ann", 0)]
        assert count_blogs_by_author(posts) == {"ann": 1, "Ann": 2}
        assert most_blogs(posts) == AuthorTally(author="Ann", blogs=2)

    def test_missing_author_is_its_own_group(self):
        posts = [_post("1", None, 0), _post("2", None, 0), _post("3", "X", 0)]
        assert most_blogs(posts) == AuthorTally(author=None, blogs=2)


def test_aggregations_do_not_mutate_input():
    posts = list(BLOGS)
    snapshot = copy.deepcopy(posts)

    total_likes(posts)
    favorite_blog(posts)
    most_blogs(posts)

    assert posts == snapshot

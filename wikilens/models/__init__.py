from wikilens.models.user import User
from wikilens.models.history import History
from wikilens.models.post import Post
from wikilens.models.popular_post import PopularPost
from wikilens.models.popular_search import PopularSearch

__all__ = ["User", "History", "Post", "PopularPost", "PopularSearch"]

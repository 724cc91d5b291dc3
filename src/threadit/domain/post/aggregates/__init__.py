from threadit.domain.post.aggregates.post import Post

__all__ = ["Post"]

from .review import Review, ReviewReply

__all__ = ["Review", "ReviewReply"]

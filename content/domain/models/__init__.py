from .content import ContentCategory, ContentItem, ContentTag

__all__ = ["ContentCategory", "ContentTag", "ContentItem"]

from content.domain.models import ContentCategory, ContentItem, ContentTag

__all__ = ["ContentCategory", "ContentTag", "ContentItem"]

import uuid

from django.conf import settings
from django.db import models


class ContentCategory(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    slug = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True, null=True)
    display_order = models.IntegerField(default=0)
    is_active = models.BooleanField(default=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["display_order", "name"]
        app_label = "content"
        verbose_name_plural = "Content categories"

    def __str__(self):
        return self.name


class ContentTag(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=50)
    slug = models.SlugField(max_length=50, unique=True)
    description = models.TextField(blank=True, null=True)
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        app_label = "content"

    def __str__(self):
        return self.name


class ContentItem(models.Model):
    TYPE_PAGE = "page"
    TYPE_BLOG = "blog"
    TYPE_NEWS = "news"
    TYPE_ANNOUNCEMENT = "announcement"

    TYPE_CHOICES = [
        (TYPE_PAGE, "Page"),
        (TYPE_BLOG, "Blog post"),
        (TYPE_NEWS, "News"),
        (TYPE_ANNOUNCEMENT, "Announcement"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=200, unique=True)
    content = models.TextField()
    excerpt = models.TextField(max_length=500, blank=True, null=True)

    # SEO
    meta_title = models.CharField(max_length=200, blank=True, null=True)
    meta_description = models.CharField(max_length=500, blank=True, null=True)

    content_type = models.CharField(max_length=20, choices=TYPE_CHOICES, default=TYPE_PAGE, db_index=True)
    category = models.ForeignKey(
        ContentCategory, on_delete=models.PROTECT, null=True, blank=True, related_name="items"
    )
    tags = models.ManyToManyField(ContentTag, blank=True, related_name="items")

    # Publishing
    is_active = models.BooleanField(default=True)
    is_published = models.BooleanField(default=False)
    published_at = models.DateTimeField(null=True, blank=True)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="content_items"
    )
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True, related_name="+"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-published_at", "-created_at"]
        app_label = "content"
        indexes = [
            models.Index(fields=["is_published", "is_active"], name="content_item_public_idx"),
        ]

    def __str__(self):
        return self.title

    @property
    def is_public(self):
        return self.is_published and self.is_active

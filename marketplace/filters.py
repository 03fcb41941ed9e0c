import django_filters
from django.db.models import Q

from utils.responses import parse_uuid

from .models import Product


class ProductFilter(django_filters.FilterSet):
    """
    Filter for the public product listing.

    Query parameters use the API's camelCase names.
    """

    category = django_filters.CharFilter(field_name="category", lookup_expr="iexact")
    sellerId = django_filters.CharFilter(method="filter_seller")
    categoryId = django_filters.CharFilter(method="filter_category_id")

    # Price range filters
    minPrice = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    maxPrice = django_filters.NumberFilter(field_name="price", lookup_expr="lte")

    # Search in name and description
    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Product
        fields = []

    def filter_seller(self, queryset, name, value):
        # A seller id that is not a GUID is ignored rather than rejected
        seller_profile_id = parse_uuid(value)
        if seller_profile_id is None:
            return queryset
        return queryset.filter(seller_profile_id=seller_profile_id)

    def filter_category_id(self, queryset, name, value):
        # Matches the category and its direct subcategories
        category_id = parse_uuid(value)
        if category_id is None:
            return queryset
        return queryset.filter(Q(product_category_id=category_id) | Q(product_category__parent_id=category_id))

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(Q(name__icontains=value) | Q(description__icontains=value))

import uuid
from decimal import Decimal

import factory
from django.contrib.auth import get_user_model
from django.utils import timezone
from django.utils.text import slugify
from faker import Faker

from authentication.models import BuyerProfile, Certification, SellerProfile
from content.models import ContentCategory, ContentItem, ContentTag
from marketplace.models import (
    RFQ,
    CategoryConfiguration,
    ContractTemplate,
    Order,
    OrderItem,
    Product,
    ProductCategory,
    Quote,
    Review,
    RFQItem,
    RFQRecipient,
)
from payment_system.models import Payment

User = get_user_model()
fake = Faker()


class UserFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = User

    id = factory.LazyFunction(uuid.uuid4)
    username = factory.Sequence(lambda n: f"user_{n}@example.com")
    email = factory.LazyAttribute(lambda o: o.username)
    password = factory.PostGenerationMethodCall("set_password", "defaultpassword")
    is_active = True
    role = "Buyer"


class BuyerFactory(UserFactory):
    username = factory.Sequence(lambda n: f"buyer_{n}@example.com")


class SellerFactory(UserFactory):
    role = "Seller"
    username = factory.Sequence(lambda n: f"seller_{n}@example.com")


class AdminFactory(UserFactory):
    role = "Admin"
    is_staff = True
    username = factory.Sequence(lambda n: f"admin_{n}@example.com")


class BuyerProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = BuyerProfile

    user = factory.SubFactory(BuyerFactory)
    name = factory.Faker("name")
    company_name = factory.Faker("company")
    country = "Portugal"


class SellerProfileFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = SellerProfile

    user = factory.SubFactory(SellerFactory)
    company_name = factory.Sequence(lambda n: f"Supplier {n} Lda")
    legal_representative = factory.Faker("name")
    tax_id = factory.Sequence(lambda n: f"PT{500000000 + n}")
    industry = "Manufacturing"
    country = "Portugal"
    is_verified = True


class CertificationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Certification

    seller_profile = factory.SubFactory(SellerProfileFactory)
    name = factory.Sequence(lambda n: f"ISO 900{n % 10}")
    document_path = factory.LazyAttribute(lambda o: f"certifications/{slugify(o.name)}.pdf")
    status = Certification.STATUS_PENDING


class ProductCategoryFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ProductCategory

    name = factory.Sequence(lambda n: f"Category {n}")
    description = factory.Faker("sentence", nb_words=8)
    display_order = 0
    is_active = True


class CategoryConfigurationFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = CategoryConfiguration

    category = factory.SubFactory(ProductCategoryFactory)
    required_certifications = ""
    allows_verified_badge = True
    min_certifications_for_badge = 1


class ProductFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Product

    id = factory.LazyFunction(uuid.uuid4)
    seller_profile = factory.SubFactory(SellerProfileFactory)
    name = factory.Sequence(lambda n: f"Product {n}")
    description = factory.Faker("sentence", nb_words=12)
    category = "Industrial"
    price = Decimal("10.00")
    stock_quantity = 100
    is_active = True


class RFQFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = RFQ

    buyer_profile = factory.SubFactory(BuyerProfileFactory)
    title = factory.Sequence(lambda n: f"Steel bolts batch {n}")
    description = factory.Faker("paragraph", nb_sentences=2)
    status = RFQ.STATUS_OPEN


class RFQItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = RFQItem

    rfq = factory.SubFactory(RFQFactory)
    product_name = "M8 bolt"
    quantity = 500
    unit = "pcs"


class RFQRecipientFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = RFQRecipient

    rfq = factory.SubFactory(RFQFactory)
    seller_profile = factory.SubFactory(SellerProfileFactory)


class QuoteFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Quote

    rfq = factory.SubFactory(RFQFactory)
    seller_profile = factory.SubFactory(SellerProfileFactory)
    price = Decimal("1500.00")
    delivery_time = "14 days"
    description = factory.Faker("sentence", nb_words=10)
    status = Quote.STATUS_PENDING


class OrderFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Order

    buyer = factory.SubFactory(BuyerFactory)
    seller_profile = factory.SubFactory(SellerProfileFactory)
    status = Order.STATUS_PENDING
    total_amount = Decimal("100.00")
    currency = "USD"


class OrderItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = OrderItem

    order = factory.SubFactory(OrderFactory)
    product = factory.SubFactory(ProductFactory, seller_profile=factory.SelfAttribute("..order.seller_profile"))
    product_name = factory.LazyAttribute(lambda o: o.product.name)
    quantity = 2
    unit_price = Decimal("50.00")
    total_price = factory.LazyAttribute(lambda o: o.unit_price * o.quantity)


class ReviewFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Review

    buyer_profile = factory.SubFactory(BuyerProfileFactory)
    seller_profile = factory.SubFactory(SellerProfileFactory)
    rating = 4
    comment = factory.Faker("sentence", nb_words=8)


class ContractTemplateFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ContractTemplate

    created_by = factory.SubFactory(SellerProfileFactory)
    name = factory.Sequence(lambda n: f"Supply agreement {n}")
    title = "Supply Agreement"
    content = "Contract {{contractNumber}} between {{buyerName}} and {{sellerCompany}}."
    template_type = "supply"


class ContentCategoryFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ContentCategory

    name = factory.Sequence(lambda n: f"Guides {n}")
    slug = factory.LazyAttribute(lambda o: slugify(o.name))


class ContentTagFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ContentTag

    name = factory.Sequence(lambda n: f"sourcing-{n}")
    slug = factory.LazyAttribute(lambda o: slugify(o.name))


class ContentItemFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = ContentItem

    title = factory.Sequence(lambda n: f"How to write an RFQ part {n}")
    slug = factory.LazyAttribute(lambda o: slugify(o.title))
    content = factory.Faker("paragraph", nb_sentences=4)
    content_type = ContentItem.TYPE_BLOG
    category = factory.SubFactory(ContentCategoryFactory)
    is_published = True
    published_at = factory.LazyFunction(timezone.now)


class PaymentFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Payment

    order = factory.SubFactory(OrderFactory)
    seller_profile = factory.LazyAttribute(lambda o: o.order.seller_profile)
    amount = factory.LazyAttribute(lambda o: o.order.total_amount)
    currency = "USD"
    payment_provider = "stripe"
    provider_transaction_id = factory.LazyFunction(lambda: f"pi_{fake.uuid4()[:12]}")
    status = Payment.STATUS_COMPLETED
    payment_method = "card"

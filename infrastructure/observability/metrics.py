from prometheus_client import Counter


# Auth Metrics
registrations_total = Counter("b2b_registrations_total", "User registrations", ["role", "outcome"])
logins_total = Counter("b2b_logins_total", "Login attempts", ["outcome"])

# Sourcing Metrics
rfqs_created_total = Counter("b2b_rfqs_created_total", "RFQs created")
quotes_submitted_total = Counter("b2b_quotes_submitted_total", "Quotes submitted")

# Order Metrics
orders_placed_total = Counter("b2b_orders_placed_total", "Per-seller orders created")
order_status_changes_total = Counter("b2b_order_status_changes_total", "Order status transitions", ["status"])

# Review Metrics
reviews_created_total = Counter("b2b_reviews_created_total", "Reviews created")

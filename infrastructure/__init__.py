"""
Infrastructure Package
======================

Provides abstraction layers for external dependencies.

Modules:
    - container: lazily built service singletons for views
    - email: Email service abstraction (Django mail, mock)
    - observability: OpenTelemetry tracing and Prometheus metrics
"""

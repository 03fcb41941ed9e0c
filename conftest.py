import pytest

from infrastructure.container import container


@pytest.fixture(autouse=True)
def service_container():
    """Fresh services per test, with email captured in memory."""
    container.configure_for_testing()
    yield container
    container.reset()

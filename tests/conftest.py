from unittest import mock

import pytest

from receipt_validator import AppStoreClient, Endpoint, ReceiptValidator


@pytest.fixture
def validator():
    yield ReceiptValidator(endpoint=Endpoint.PRODUCTION, shared_secret=None)


@pytest.fixture
def sandbox_validator():
    yield ReceiptValidator(endpoint=Endpoint.SANDBOX, shared_secret=None)


@pytest.fixture
def appstore_client():
    yield mock.Mock(AppStoreClient())


@pytest.fixture
def receipt_data_b64():
    yield 'ewoJInNpZ25hdHVyZSIgPSAiQXBNVUJDODZBbHpOaWtWNVl0clpBTWlKUWJLOEVk'

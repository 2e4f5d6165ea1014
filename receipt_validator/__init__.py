__all__ = [
    'AppStoreClient',
    'ConfigurationError',
    'Endpoint',
    'InvalidEndpoint',
    'MalformedResponseError',
    'ReceiptValidator',
    'ReceiptValidatorException',
    'Response',
    'ResultCategory',
    'ResultCode',
    'TransportError',
    'classify_result_code',
    'register_result_code',
]
from .clients import AppStoreClient
from .enums import Endpoint, ResultCategory, ResultCode, classify_result_code, register_result_code
from .exceptions import (
    ConfigurationError,
    InvalidEndpoint,
    MalformedResponseError,
    ReceiptValidatorException,
    TransportError,
)
from .response import Response
from .validator import ReceiptValidator

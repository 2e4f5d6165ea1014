# https://developer.apple.com/documentation/appstorereceipts/verifyreceipt

import base64
import json
import logging
import os

from .clients import AppStoreClient
from .enums import Endpoint
from .exceptions import ConfigurationError, InvalidEndpoint, TransportError
from .response import Response

APPSTORE_ENDPOINT = os.environ.get('APPSTORE_VERIFY_RECEIPT_ENDPOINT') or Endpoint.PRODUCTION
APPSTORE_SHARED_SECRET = os.environ.get('APPSTORE_SHARED_SECRET')

logger = logging.getLogger()


class ReceiptValidator:
    def __init__(
        self,
        endpoint=APPSTORE_ENDPOINT,
        shared_secret=APPSTORE_SHARED_SECRET,
        exclude_old_transactions=False,
        appstore_client=None,
    ):
        self.endpoint = endpoint
        self.shared_secret = shared_secret
        self.exclude_old_transactions = exclude_old_transactions
        self._receipt_data = None
        if appstore_client is not None:
            self._appstore_client = appstore_client

    @property
    def appstore_client(self):
        if not hasattr(self, '_appstore_client'):
            self._appstore_client = AppStoreClient()
        return self._appstore_client

    @property
    def endpoint(self):
        return self._endpoint

    @endpoint.setter
    def endpoint(self, endpoint):
        if endpoint not in Endpoint._ALL:
            raise InvalidEndpoint(endpoint)
        self._endpoint = endpoint

    @property
    def receipt_data(self):
        "The receipt data, always base64 encoded"
        return self._receipt_data

    @receipt_data.setter
    def receipt_data(self, receipt_data):
        # anything that looks like json is a raw receipt, everything else is taken as already base64 encoded
        if receipt_data is not None and '{' in receipt_data:
            receipt_data = base64.b64encode(receipt_data.encode('utf-8')).decode('ascii')
        self._receipt_data = receipt_data

    @property
    def exclude_old_transactions(self):
        return self._exclude_old_transactions

    @exclude_old_transactions.setter
    def exclude_old_transactions(self, exclude):
        if not isinstance(exclude, bool):
            raise ConfigurationError(f'exclude_old_transactions must be a bool, got `{exclude!r}`')
        self._exclude_old_transactions = exclude

    # chainable setters, ex: ReceiptValidator().set_shared_secret('s').set_receipt_data('r').validate()

    def set_endpoint(self, endpoint):
        self.endpoint = endpoint
        return self

    def set_receipt_data(self, receipt_data):
        self.receipt_data = receipt_data
        return self

    def set_shared_secret(self, shared_secret):
        self.shared_secret = shared_secret
        return self

    def set_exclude_old_transactions(self, exclude):
        self.exclude_old_transactions = exclude
        return self

    def build_request(self):
        request = {'receipt-data': self.receipt_data}
        if self.shared_secret is not None:
            request['password'] = self.shared_secret
        request['exclude-old-transactions'] = self.exclude_old_transactions
        return request

    def encode_request(self):
        return json.dumps(self.build_request())

    def validate(self, receipt_data=None, shared_secret=None):
        """
        Verify the receipt with the AppStore and return the Response.

        Receipts from apple's review team are sandbox receipts, so per apple recommendation
        a 21007 from production gets exactly one more attempt against the sandbox.
        https://developer.apple.com/documentation/appstorereceipts/verifyreceipt#discussion
        """
        if receipt_data:
            self.receipt_data = receipt_data
        if shared_secret:
            self.shared_secret = shared_secret
        if self.receipt_data is None:
            raise ConfigurationError('Receipt data is required')

        body = self.encode_request()
        endpoint = self.endpoint
        response = self.post_receipt(endpoint, body)

        if endpoint == Endpoint.PRODUCTION and response.is_sandbox_redirect:
            logger.info('AppStore production reported a sandbox receipt, retrying against sandbox')
            response = self.post_receipt(Endpoint.SANDBOX, body)

        return response

    def post_receipt(self, url, body):
        logger.debug(f'Posting receipt to AppStore `{url}`', extra={'url': url})
        status_code, text = self.appstore_client.post(url, body)
        if status_code != 200:
            raise TransportError(url, status_code=status_code)
        response = Response.from_body(text)
        logger.debug(
            f'AppStore `{url}` responded with status `{response.result_code}`',
            extra={'url': url, 'resultCode': response.result_code},
        )
        return response

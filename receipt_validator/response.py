# https://developer.apple.com/documentation/appstorereceipts/responsebody

import copy
import json

import pendulum

from .enums import ResultCategory, ResultCode, classify_result_code
from .exceptions import MalformedResponseError


class Response:
    "A parsed verifyReceipt reply. Non-zero result codes are classified here, never raised."

    def __init__(self, data):
        status = data.get('status') if isinstance(data, dict) else None
        # bool is a subclass of int, but `true` is not a result code
        if not isinstance(status, int) or isinstance(status, bool):
            raise MalformedResponseError(data, 'missing integer `status`')
        self._data = copy.deepcopy(data)

    @classmethod
    def from_body(cls, body):
        try:
            data = json.loads(body)
        except ValueError as err:
            raise MalformedResponseError(body, 'not json') from err
        if not isinstance(data, dict):
            raise MalformedResponseError(body, 'not a json object')
        return cls(data)

    def __repr__(self):
        return f'<Response result_code={self.result_code} category={self.category}>'

    @property
    def raw(self):
        return copy.deepcopy(self._data)

    def get(self, key, default=None):
        return copy.deepcopy(self._data.get(key, default))

    @property
    def result_code(self):
        return self._data['status']

    @property
    def category(self):
        return classify_result_code(self.result_code)

    @property
    def is_valid(self):
        return self.result_code == ResultCode.VALID

    @property
    def is_sandbox_redirect(self):
        return self.result_code == ResultCode.SANDBOX_RECEIPT_SENT_TO_PRODUCTION

    @property
    def is_retryable(self):
        # apple also sends an explicit `is-retryable` flag for the 21100-21199 range
        return self._data.get('is-retryable') is True or self.category in ResultCategory._RETRYABLE

    @property
    def environment(self):
        return self._data.get('environment')

    @property
    def receipt(self):
        return copy.deepcopy(self._receipt)

    @property
    def _receipt(self):
        receipt = self._data.get('receipt')
        return receipt if isinstance(receipt, dict) else {}

    @property
    def bundle_id(self):
        # iOS 6 style receipts use `bid`
        return self._receipt.get('bundle_id') or self._receipt.get('bid')

    @property
    def purchases(self):
        in_app = self._receipt.get('in_app')
        return copy.deepcopy(in_app) if isinstance(in_app, list) else []

    @property
    def latest_receipt(self):
        return self._data.get('latest_receipt')

    @property
    def latest_receipt_info(self):
        return copy.deepcopy(self._latest_receipt_info)

    @property
    def _latest_receipt_info(self):
        info = self._data.get('latest_receipt_info')
        # iOS 6 style receipts report a single dict rather than a list
        if isinstance(info, dict):
            return [info]
        if isinstance(info, list):
            return [i for i in info if isinstance(i, dict)]
        return []

    @property
    def pending_renewal_info(self):
        info = self._data.get('pending_renewal_info')
        return copy.deepcopy(info) if isinstance(info, list) else []

    @property
    def latest_expires_at(self):
        "The latest subscription expiry across latest_receipt_info, or None"
        # apple's API reports datetimes as strings of milliseconds
        expires_ms = [
            float(info['expires_date_ms'])
            for info in self._latest_receipt_info
            if info.get('expires_date_ms') not in (None, '')
        ]
        if not expires_ms:
            return None
        return pendulum.from_timestamp(max(expires_ms) / 1000)

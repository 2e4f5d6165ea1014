# https://developer.apple.com/documentation/appstorereceipts/status


class Endpoint:
    PRODUCTION = 'https://buy.itunes.apple.com/verifyReceipt'
    SANDBOX = 'https://sandbox.itunes.apple.com/verifyReceipt'

    _ALL = (PRODUCTION, SANDBOX)


class ResultCode:
    VALID = 0
    MALFORMED_JSON = 21000
    MALFORMED_RECEIPT_DATA = 21002
    RECEIPT_NOT_AUTHENTICATED = 21003
    SHARED_SECRET_MISMATCH = 21004
    SERVER_UNAVAILABLE = 21005
    # only returned for iOS 6 style transaction receipts for auto-renewable subscriptions
    SUBSCRIPTION_EXPIRED = 21006
    SANDBOX_RECEIPT_SENT_TO_PRODUCTION = 21007
    PRODUCTION_RECEIPT_SENT_TO_SANDBOX = 21008
    INTERNAL_ERROR = 21009
    UNAUTHORIZED_RECEIPT = 21010

    INTERNAL_DATA_ACCESS_ERROR_MIN = 21100
    INTERNAL_DATA_ACCESS_ERROR_MAX = 21199


class ResultCategory:
    VALID = 'VALID'
    SANDBOX_REDIRECT = 'SANDBOX_REDIRECT'
    PRODUCTION_REDIRECT = 'PRODUCTION_REDIRECT'
    MALFORMED_JSON = 'MALFORMED_JSON'
    MALFORMED_RECEIPT_DATA = 'MALFORMED_RECEIPT_DATA'
    UNAUTHENTICATED = 'UNAUTHENTICATED'
    SHARED_SECRET_MISMATCH = 'SHARED_SECRET_MISMATCH'
    SERVER_UNAVAILABLE = 'SERVER_UNAVAILABLE'
    SUBSCRIPTION_EXPIRED = 'SUBSCRIPTION_EXPIRED'
    UNAUTHORIZED = 'UNAUTHORIZED'
    UNKNOWN = 'UNKNOWN'

    _ALL = (
        VALID,
        SANDBOX_REDIRECT,
        PRODUCTION_REDIRECT,
        MALFORMED_JSON,
        MALFORMED_RECEIPT_DATA,
        UNAUTHENTICATED,
        SHARED_SECRET_MISMATCH,
        SERVER_UNAVAILABLE,
        SUBSCRIPTION_EXPIRED,
        UNAUTHORIZED,
        UNKNOWN,
    )

    # apple says a request that got one of these may succeed if resubmitted later
    _RETRYABLE = (SERVER_UNAVAILABLE,)


_result_code_categories = {
    ResultCode.VALID: ResultCategory.VALID,
    ResultCode.MALFORMED_JSON: ResultCategory.MALFORMED_JSON,
    ResultCode.MALFORMED_RECEIPT_DATA: ResultCategory.MALFORMED_RECEIPT_DATA,
    ResultCode.RECEIPT_NOT_AUTHENTICATED: ResultCategory.UNAUTHENTICATED,
    ResultCode.SHARED_SECRET_MISMATCH: ResultCategory.SHARED_SECRET_MISMATCH,
    ResultCode.SERVER_UNAVAILABLE: ResultCategory.SERVER_UNAVAILABLE,
    ResultCode.SUBSCRIPTION_EXPIRED: ResultCategory.SUBSCRIPTION_EXPIRED,
    ResultCode.SANDBOX_RECEIPT_SENT_TO_PRODUCTION: ResultCategory.SANDBOX_REDIRECT,
    ResultCode.PRODUCTION_RECEIPT_SENT_TO_SANDBOX: ResultCategory.PRODUCTION_REDIRECT,
    ResultCode.INTERNAL_ERROR: ResultCategory.SERVER_UNAVAILABLE,
    ResultCode.UNAUTHORIZED_RECEIPT: ResultCategory.UNAUTHORIZED,
}

# inclusive (low, high, category) triples, consulted only when the exact code isn't registered
_result_code_range_categories = [
    (
        ResultCode.INTERNAL_DATA_ACCESS_ERROR_MIN,
        ResultCode.INTERNAL_DATA_ACCESS_ERROR_MAX,
        ResultCategory.SERVER_UNAVAILABLE,
    ),
]


def register_result_code(code, category):
    """
    Teach the classifier about a result code apple has started returning.
    `code` is either a single int or an inclusive (low, high) tuple.
    """
    if category not in ResultCategory._ALL:
        raise ValueError(f'Unrecognized result category `{category}`')
    if isinstance(code, tuple):
        low, high = code
        if low > high:
            raise ValueError(f'Invalid result code range `{low}`-`{high}`')
        _result_code_range_categories.append((low, high, category))
    else:
        _result_code_categories[code] = category


def classify_result_code(code):
    "Map a result code to its ResultCategory, falling back to UNKNOWN"
    if code in _result_code_categories:
        return _result_code_categories[code]
    for low, high, category in _result_code_range_categories:
        if low <= code <= high:
            return category
    return ResultCategory.UNKNOWN

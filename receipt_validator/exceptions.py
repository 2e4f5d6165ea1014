class ReceiptValidatorException(Exception):
    pass


class ConfigurationError(ReceiptValidatorException):
    pass


class InvalidEndpoint(ConfigurationError):
    def __init__(self, endpoint):
        self.endpoint = endpoint

    def __str__(self):
        return f'Invalid endpoint `{self.endpoint}`'


class TransportError(ReceiptValidatorException):
    def __init__(self, url, status_code=None, message=None):
        self.url = url
        self.status_code = status_code
        self.message = message

    def __str__(self):
        if self.status_code is None:
            return f'Unable to get response from AppStore `{self.url}`: {self.message}'
        return f'AppStore `{self.url}` responded with non-200 status code `{self.status_code}`'


class MalformedResponseError(ReceiptValidatorException):
    def __init__(self, body, reason):
        self.body = body
        self.reason = reason

    def __str__(self):
        return f'Unable to parse AppStore response ({self.reason}) with body: `{self.body}`'

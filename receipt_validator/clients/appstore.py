import requests

from ..exceptions import TransportError


class AppStoreClient:
    def __init__(self, timeout=None):
        self.timeout = timeout
        self.session = requests.Session()

    def post(self, url, body):
        """
        POST the already-encoded json `body` to `url`.
        Returns the (status code, response text) pair, or raises TransportError if no response arrived.
        """
        try:
            resp = self.session.post(url, data=body, timeout=self.timeout)
        except requests.RequestException as err:
            raise TransportError(url, message=str(err)) from err
        return resp.status_code, resp.text

    def close(self):
        "Release the session's pooled connections"
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, et, ev, tb):
        self.close()

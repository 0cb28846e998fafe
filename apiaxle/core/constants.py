"""
Constants shared by the client, the resource proxies and the tests.
"""

# Path prefix of the ApiAxle v1 management API
VERSION_ENDPOINT = "/v1/"

DEFAULT_TIMEOUT_SECONDS = 10.0
USER_AGENT = "apiaxle-python-client/1.0"


class EnvelopeKeys:
    """Keys of the JSON envelope wrapped around every ApiAxle response"""
    RESULTS = "results"
    NEW = "new"
    ERROR = "error"


class QuotaDefaults:
    """Server-side defaults for key and keyless quotas"""
    QPS = 2
    QPM = -1
    QPD = 172800


class PageDefaults:
    """Default window for paginated collection requests"""
    FROM = 0
    TO = 10

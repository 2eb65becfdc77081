"""Wire-protocol constants for the document database REST API.

Header names are kept lower-case because ``ResponseEnvelope`` normalises
response header names to lower case.
"""

from __future__ import annotations

API_VERSION = "2018-12-31"
USER_AGENT = "cosmosrest.python.sdk/0.1.0"

# Authorization token parts
AUTH_TYPE = "master"
AUTH_TOKEN_VERSION = "1.0"

# Signed dates are pushed forward to absorb small clock drift
DATE_SKEW_SECONDS = 120

# Request headers
HEADER_DATE = "x-ms-date"
HEADER_VERSION = "x-ms-version"
HEADER_AUTHORIZATION = "authorization"
HEADER_MAX_ITEM_COUNT = "x-ms-max-item-count"
HEADER_IS_QUERY = "x-ms-documentdb-isquery"
HEADER_ENABLE_CROSS_PARTITION = "x-ms-documentdb-query-enablecrosspartition"
HEADER_PARTITION_KEY = "x-ms-documentdb-partitionkey"
HEADER_PARTITION_KEY_RANGE_ID = "x-ms-documentdb-partitionkeyrangeid"
HEADER_CONTINUATION = "x-ms-continuation"

# Response-only headers
HEADER_RETRY_AFTER_MS = "x-ms-retry-after-ms"
HEADER_REQUEST_CHARGE = "x-ms-request-charge"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_QUERY = "application/query+json"

# "-1" lets the server pick its own page size
MAX_ITEM_COUNT_SERVER_DEFAULT = "-1"

CROSS_PARTITION_ERROR_CODE = "BadRequest"
CROSS_PARTITION_GATEWAY_MESSAGE = "cross partition query can not be directly served by the gateway"

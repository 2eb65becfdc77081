"""Core enumerations for the REST resource model.

Architecture:
    Resource type tags and HTTP verbs are closed sets on the wire. Keeping
    them as string enums means a typo fails at import time instead of
    producing a signature the server rejects.

Key Types:
    - ResourceType: Resource type tag used in the string-to-sign
    - HttpVerb: Request methods accepted by the REST API
"""

from enum import Enum


class ResourceType(str, Enum):
    """Resource type tags understood by the REST API.

    ``ACCOUNT`` is the empty tag used when signing requests against the
    account root (``GET /``).
    """

    ACCOUNT = ""
    DATABASES = "dbs"
    COLLECTIONS = "colls"
    DOCUMENTS = "docs"
    USERS = "users"
    PERMISSIONS = "permissions"
    OFFERS = "offers"
    STORED_PROCEDURES = "sprocs"
    USER_DEFINED_FUNCTIONS = "udfs"
    TRIGGERS = "triggers"
    ATTACHMENTS = "attachments"
    PARTITION_KEY_RANGES = "pkranges"

    def __str__(self) -> str:
        return self.value


class HttpVerb(str, Enum):
    """HTTP methods used by the client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value

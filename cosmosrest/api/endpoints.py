"""Endpoint definitions for every resource type.

Each endpoint is "sign with (verb, type, id), issue request, return body".
The signed id is the resource's own id for item operations and the parent's
id for feed (list) and create operations.

Params used by the builders:
    db, coll, doc, user, permission, attachment, sproc, udf, trigger, offer:
        resource ids
    body: request body
    partition_key: optional partition key value for document operations
    headers: optional caller headers for document operations
    content_type, filename: attachment media metadata
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote_plus

from ..core.constants import (
    CONTENT_TYPE_QUERY,
    HEADER_IS_QUERY,
    HEADER_PARTITION_KEY,
)
from ..core.enums import HttpVerb, ResourceType
from ..runtime.rest import ResourceEndpoint

GET, POST, PUT, DELETE = HttpVerb.GET, HttpVerb.POST, HttpVerb.PUT, HttpVerb.DELETE


def _param(name: str):
    def build(params: dict[str, Any]) -> str:
        return params[name]

    return build


def _empty(_params: dict[str, Any]) -> str:
    return ""


def _db_path(p: dict[str, Any]) -> str:
    return f"/dbs/{p['db']}"


def _coll_path(p: dict[str, Any]) -> str:
    return f"{_db_path(p)}/colls/{p['coll']}"


def _doc_path(p: dict[str, Any]) -> str:
    return f"{_coll_path(p)}/docs/{p['doc']}"


def _user_path(p: dict[str, Any]) -> str:
    return f"{_db_path(p)}/users/{p['user']}"


def _document_headers(p: dict[str, Any]) -> dict[str, str]:
    headers = dict(p.get("headers") or {})
    if p.get("partition_key") is not None:
        headers[HEADER_PARTITION_KEY] = json.dumps([p["partition_key"]])
    return headers


def _media_headers(p: dict[str, Any]) -> dict[str, str]:
    return {"Content-Type": p["content_type"], "Slug": quote_plus(p["filename"])}


def _query_headers(_p: dict[str, Any]) -> dict[str, str]:
    return {"Content-Type": CONTENT_TYPE_QUERY, HEADER_IS_QUERY: "True"}


def _crud(
    prefix: str,
    resource_type: ResourceType,
    feed_path,
    item_path,
    parent_id,
    item_id,
    *,
    verbs: tuple[str, ...] = ("list", "get", "create", "replace", "delete"),
    build_headers=None,
) -> dict[str, ResourceEndpoint]:
    """Build the standard feed/item endpoints of one resource type."""
    table = {
        "list": ResourceEndpoint(f"list_{prefix}", GET, resource_type, feed_path, parent_id),
        "get": ResourceEndpoint(f"get_{prefix}", GET, resource_type, item_path, item_id),
        "create": ResourceEndpoint(
            f"create_{prefix}",
            POST,
            resource_type,
            feed_path,
            parent_id,
            build_headers=build_headers,
            body_param="body",
        ),
        "replace": ResourceEndpoint(
            f"replace_{prefix}",
            PUT,
            resource_type,
            item_path,
            item_id,
            build_headers=build_headers,
            body_param="body",
        ),
        "delete": ResourceEndpoint(
            f"delete_{prefix}", DELETE, resource_type, item_path, item_id, build_headers=build_headers
        ),
    }
    return {f"{verb}_{prefix}": table[verb] for verb in verbs}


ENDPOINTS: dict[str, ResourceEndpoint] = {
    "get_info": ResourceEndpoint("get_info", GET, ResourceType.ACCOUNT, lambda p: "", _empty),
    **_crud(
        "database",
        ResourceType.DATABASES,
        lambda p: "/dbs",
        _db_path,
        _empty,
        _param("db"),
    ),
    **_crud(
        "user",
        ResourceType.USERS,
        lambda p: f"{_db_path(p)}/users",
        _user_path,
        _param("db"),
        _param("user"),
    ),
    **_crud(
        "collection",
        ResourceType.COLLECTIONS,
        lambda p: f"{_db_path(p)}/colls",
        _coll_path,
        _param("db"),
        _param("coll"),
        verbs=("list", "get", "create", "delete"),
    ),
    **_crud(
        "document",
        ResourceType.DOCUMENTS,
        lambda p: f"{_coll_path(p)}/docs",
        _doc_path,
        _param("coll"),
        _param("doc"),
        build_headers=_document_headers,
    ),
    **_crud(
        "attachment",
        ResourceType.ATTACHMENTS,
        lambda p: f"{_doc_path(p)}/attachments",
        lambda p: f"{_doc_path(p)}/attachments/{p['attachment']}",
        _param("doc"),
        _param("attachment"),
    ),
    **_crud(
        "permission",
        ResourceType.PERMISSIONS,
        lambda p: f"{_user_path(p)}/permissions",
        lambda p: f"{_user_path(p)}/permissions/{p['permission']}",
        _param("user"),
        _param("permission"),
    ),
    **_crud(
        "stored_procedure",
        ResourceType.STORED_PROCEDURES,
        lambda p: f"{_coll_path(p)}/sprocs",
        lambda p: f"{_coll_path(p)}/sprocs/{p['sproc']}",
        _param("coll"),
        _param("sproc"),
        verbs=("list", "create", "replace", "delete"),
    ),
    **_crud(
        "user_defined_function",
        ResourceType.USER_DEFINED_FUNCTIONS,
        lambda p: f"{_coll_path(p)}/udfs",
        lambda p: f"{_coll_path(p)}/udfs/{p['udf']}",
        _param("coll"),
        _param("udf"),
        verbs=("list", "create", "replace", "delete"),
    ),
    **_crud(
        "trigger",
        ResourceType.TRIGGERS,
        lambda p: f"{_coll_path(p)}/triggers",
        lambda p: f"{_coll_path(p)}/triggers/{p['trigger']}",
        _param("coll"),
        _param("trigger"),
        verbs=("list", "create", "replace", "delete"),
    ),
    **_crud(
        "offer",
        ResourceType.OFFERS,
        lambda p: "/offers",
        lambda p: f"/offers/{p['offer']}",
        _empty,
        _param("offer"),
        verbs=("list", "get", "replace"),
    ),
    "execute_stored_procedure": ResourceEndpoint(
        "execute_stored_procedure",
        POST,
        ResourceType.STORED_PROCEDURES,
        lambda p: f"{_coll_path(p)}/sprocs/{p['sproc']}",
        _param("sproc"),
        body_param="body",
    ),
    "query_offers": ResourceEndpoint(
        "query_offers",
        POST,
        ResourceType.OFFERS,
        lambda p: "/offers",
        _empty,
        build_headers=_query_headers,
        body_param="body",
    ),
}

# Attachment create/replace carry raw media instead of JSON
ENDPOINTS["create_attachment"] = ResourceEndpoint(
    "create_attachment",
    POST,
    ResourceType.ATTACHMENTS,
    lambda p: f"{_doc_path(p)}/attachments",
    _param("doc"),
    build_headers=_media_headers,
    body_param="body",
)
ENDPOINTS["replace_attachment"] = ResourceEndpoint(
    "replace_attachment",
    PUT,
    ResourceType.ATTACHMENTS,
    lambda p: f"{_doc_path(p)}/attachments/{p['attachment']}",
    _param("attachment"),
    build_headers=_media_headers,
    body_param="body",
)


def get_endpoint(endpoint_id: str) -> ResourceEndpoint:
    try:
        return ENDPOINTS[endpoint_id]
    except KeyError:
        raise ValueError(f"Unknown endpoint: {endpoint_id}") from None

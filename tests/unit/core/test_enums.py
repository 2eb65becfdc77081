"""Unit tests for core enumerations."""

from cosmosrest.core import HttpVerb, ResourceType


def test_resource_type_values():
    """Test ResourceType covers every resource tag."""
    assert {r.value for r in ResourceType} == {
        "",
        "dbs",
        "colls",
        "docs",
        "users",
        "permissions",
        "offers",
        "sprocs",
        "udfs",
        "triggers",
        "attachments",
        "pkranges",
    }


def test_str_is_wire_value():
    """Test str() yields the wire value."""
    assert str(ResourceType.DOCUMENTS) == "docs"
    assert f"{ResourceType.PARTITION_KEY_RANGES}" == "pkranges"
    assert str(HttpVerb.POST) == "POST"

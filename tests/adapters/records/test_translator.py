from __future__ import annotations

import pytest

from mcpcatalog.adapters.records import (
    RecordPayload,
    entity_to_record,
    kind_from_type,
    parse_records,
    payload_to_entity,
)
from mcpcatalog.adapters.records.schema import parse_star_count
from mcpcatalog.domain.model import EntityKind, Origin


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("client", EntityKind.CLIENT),
        ("MCP_CLIENT", EntityKind.CLIENT),
        ("ai_agent", EntityKind.AGENT),
        ("ai-agent", EntityKind.AGENT),
        ("agent", EntityKind.AGENT),
        ("mcp_server", EntityKind.SERVER),
        ("course", EntityKind.SERVER),
        (None, EntityKind.SERVER),
    ],
)
def test_kind_from_type(value: str | None, expected: EntityKind) -> None:
    assert kind_from_type(value) is expected


def test_backfill_fills_display_defaults() -> None:
    long_description = "x" * 200
    payload = RecordPayload.model_validate(
        {"name": "Browser Use", "description": long_description, "stars_str": "61,004"}
    )

    entity = payload_to_entity(
        payload, kind=EntityKind.SERVER, origin=Origin.FIXTURES, backfill=True
    )

    assert entity.id == "browser-use"
    assert entity.category == "General"
    assert entity.short_description == "x" * 150 + "..."
    assert entity.long_description == long_description
    assert entity.keywords == ("browser", "use")
    assert entity.stars == 61004
    assert entity.official is False


def test_backfill_without_description() -> None:
    payload = RecordPayload.model_validate({"name": "Memory", "tag_on_card": "Knowledge"})

    entity = payload_to_entity(
        payload, kind=EntityKind.SERVER, origin=Origin.FIXTURES, backfill=True
    )

    assert entity.short_description == "No description available."
    assert entity.category == "Knowledge"


def test_tag_on_card_wins_over_category() -> None:
    payload = RecordPayload.model_validate(
        {"name": "Ollama", "tag_on_card": "AI Development", "category": "Other"}
    )

    entity = payload_to_entity(payload, kind=EntityKind.SERVER, origin=Origin.REMOTE)

    assert entity.category == "AI Development"


def test_client_ids_are_prefixed() -> None:
    payload = RecordPayload.model_validate({"id": "Cherry-Studio", "name": "Cherry Studio"})

    entity = payload_to_entity(payload, kind=EntityKind.CLIENT, origin=Origin.LOCAL)

    assert entity.id == "client-cherry-studio"


def test_camel_case_fields_are_accepted() -> None:
    payload = RecordPayload.model_validate(
        {
            "id": 42,
            "name": "  Zed  ",
            "productType": "mcp_client",
            "shortDescription": "Fast editor",
            "keyFeatures": ["multiplayer", " "],
            "useCases": "pairing, reviews",
            "githubUrl": "https://github.com/zed-industries/zed",
        }
    )

    assert payload.id == "42"
    assert payload.name == "Zed"
    assert payload.type == "mcp_client"
    assert payload.short_description == "Fast editor"
    assert payload.key_features == ["multiplayer"]
    assert payload.use_cases == ["pairing", "reviews"]


def test_parse_records_drops_invalid_items() -> None:
    records = parse_records(
        [
            {"name": "Valid", "type": "agent"},
            {"name": "   "},
            {"description": "no name"},
            "not a record",
            {"name": "!!!"},
        ],
        origin=Origin.REMOTE,
    )

    assert [(entity.id, entity.kind) for entity in records] == [("valid", EntityKind.AGENT)]


def test_entity_to_record_round_trips_through_payload() -> None:
    (entity,) = parse_records(
        [
            {
                "id": "n8n",
                "name": "n8n",
                "category": "Workflow Automation",
                "stars": 12,
                "githubUrl": "https://github.com/n8n-io/n8n",
            }
        ],
        origin=Origin.LOCAL,
        kind=EntityKind.SERVER,
    )

    record = entity_to_record(entity)
    (again,) = parse_records([record], origin=Origin.LOCAL, kind=EntityKind.SERVER)

    assert record["github_url"] == "https://github.com/n8n-io/n8n"
    assert "description" not in record
    assert again == entity


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1,234", 1234.0), ("1.5k", 1500.0), (" 7 ", 7.0), ("lots", None)],
)
def test_parse_star_count(raw: str, expected: float | None) -> None:
    assert parse_star_count(raw) == expected


def test_unknown_fields_round_trip_through_extra() -> None:
    (entity,) = parse_records(
        [{"name": "Dify", "npmUrl": "https://www.npmjs.com/package/dify-client", "faq": []}],
        origin=Origin.LOCAL,
        kind=EntityKind.SERVER,
    )

    record = entity_to_record(entity)

    assert entity.extra["npmUrl"] == "https://www.npmjs.com/package/dify-client"
    assert record["npmUrl"] == "https://www.npmjs.com/package/dify-client"
    assert record["faq"] == []

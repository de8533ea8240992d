from __future__ import annotations

from mcpcatalog.domain.catalog import merge_sources
from mcpcatalog.domain.model import EntityKind, Origin
from tests.helpers.catalog import make_entity


def test_merge_keeps_highest_priority_record_wholesale() -> None:
    local = make_entity("ollama", "Ollama (edited)", origin=Origin.LOCAL, category=None)
    remote = make_entity(
        "Ollama",
        "Ollama",
        origin=Origin.REMOTE,
        category="AI Development",
        description="from the API",
    )

    catalog = merge_sources([(local,), (remote,)])

    assert len(catalog.entities) == 1
    merged = catalog.entities[0]
    assert merged.name == "Ollama (edited)"
    assert merged.origin is Origin.LOCAL
    assert merged.description is None
    assert merged.category_slug == "uncategorized"


def test_merge_distinguishes_kinds_sharing_an_id() -> None:
    server = make_entity("cursor", "Cursor", kind=EntityKind.SERVER)
    client = make_entity("client-cursor", "Cursor", kind=EntityKind.CLIENT)

    catalog = merge_sources([(client,), (server,)])

    assert {entity.kind for entity in catalog.entities} == {EntityKind.SERVER, EntityKind.CLIENT}


def test_merge_preserves_catalog_order() -> None:
    first = make_entity("a-one")
    second = make_entity("b-two")
    third = make_entity("c-three")

    catalog = merge_sources([(second,), (first, third)])

    assert [entity.id for entity in catalog.entities] == ["b-two", "a-one", "c-three"]


def test_merge_folds_category_spellings_into_one_category() -> None:
    entities = (
        make_entity("one", category="AI & ML"),
        make_entity("two", category="ai and ml"),
        make_entity("three", category="Databases"),
    )

    catalog = merge_sources([entities])

    category = catalog.category("ai-and-ml")
    assert category is not None
    assert category.name == "AI & ML"
    assert category.count == 2
    assert category.original_forms == frozenset({"AI & ML", "ai and ml"})
    assert [entity.category_slug for entity in catalog.entities] == [
        "ai-and-ml",
        "ai-and-ml",
        "databases",
    ]


def test_merge_counts_missing_categories_as_uncategorized() -> None:
    records = (make_entity("lonely", category=None), make_entity("blank", category=" "))

    catalog = merge_sources([records])

    category = catalog.category("uncategorized")
    assert category is not None
    assert category.name == "Uncategorized"
    assert category.count == 2


def test_merge_of_no_sources_is_empty() -> None:
    catalog = merge_sources([])

    assert len(catalog) == 0
    assert catalog.counts() == {"server": 0, "client": 0, "agent": 0, "category": 0}

from __future__ import annotations

import pytest

from mcpcatalog.domain.model import (
    CatalogEntity,
    CategoryEntity,
    EntityKind,
    InvalidEntityError,
    KindHint,
)


def test_entity_rejects_blank_id() -> None:
    with pytest.raises(InvalidEntityError):
        CatalogEntity(id="  ", kind=EntityKind.SERVER, name="Thing")


def test_entity_rejects_blank_name() -> None:
    with pytest.raises(InvalidEntityError):
        CatalogEntity(id="thing", kind=EntityKind.SERVER, name="")


def test_entity_rejects_category_kind() -> None:
    with pytest.raises(InvalidEntityError):
        CatalogEntity(id="tools", kind=EntityKind.CATEGORY, name="Tools")


def test_with_kind_returns_a_copy() -> None:
    entity = CatalogEntity(id="ollama", kind=EntityKind.SERVER, name="Ollama")

    copy = entity.with_kind(EntityKind.CLIENT)

    assert copy.kind is EntityKind.CLIENT
    assert entity.kind is EntityKind.SERVER
    assert copy.id == entity.id


def test_category_entity_description_and_id() -> None:
    category = CategoryEntity(
        slug="ai-and-ml",
        name="AI & ML",
        count=2,
        original_forms=frozenset({"AI & ML", "ai and ml"}),
    )

    assert category.id == "ai-and-ml"
    assert category.kind is EntityKind.CATEGORY
    assert category.description == "Collection of AI & ML items"


def test_kind_hint_maps_to_entity_kind() -> None:
    assert KindHint.CLIENT.kind is EntityKind.CLIENT
    assert KindHint.UNKNOWN.kind is None


def test_with_kind_can_replace_the_id() -> None:
    entity = CatalogEntity(id="ollama", kind=EntityKind.SERVER, name="Ollama")

    copy = entity.with_kind(EntityKind.CLIENT, entity_id="client-ollama")

    assert (copy.id, copy.kind) == ("client-ollama", EntityKind.CLIENT)
    assert entity.id == "ollama"

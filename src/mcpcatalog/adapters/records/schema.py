"""Pydantic models describing catalog record payloads.

The same record shape arrives from three places (bundled JSON, the products
API and locally edited arrays) with a mix of snake_case and camelCase keys.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _string_list(value: object) -> object:
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, list | tuple):
        return [str(item).strip() for item in value if item is not None and str(item).strip()]
    return value


class CatalogBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RecordPayload(CatalogBaseModel):
    """One catalog record; unknown keys are kept in ``model_extra``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    name: str
    type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("type", "product_type", "productType"),
    )
    description: str | None = None
    short_description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("short_description", "shortDescription"),
    )
    long_description: str | None = Field(
        default=None,
        validation_alias=AliasChoices("long_description", "longDescription"),
    )
    category: str | None = None
    tag_on_card: str | None = None
    key_features: list[str] = Field(
        default_factory=list[str],
        validation_alias=AliasChoices("key_features", "keyFeatures"),
    )
    use_cases: list[str] = Field(
        default_factory=list[str],
        validation_alias=AliasChoices("use_cases", "useCases"),
    )
    tags: list[str] = Field(default_factory=list[str])
    keywords: list[str] = Field(default_factory=list[str])
    stars: float | None = None
    stars_numeric: float | None = None
    stars_str: str | None = None
    official: bool = False
    image_path: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "image_path", "imagePath", "local_image_path", "image_url", "icon"
        ),
    )
    github_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("github_url", "githubUrl"),
    )
    installation_command: str | None = Field(
        default=None,
        validation_alias=AliasChoices("installation_command", "installationCommand"),
    )

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return _blank_to_none(value)

    @field_validator("name", mode="after")
    @classmethod
    def _require_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("record name must not be blank")
        return stripped

    @field_validator("key_features", "use_cases", "tags", "keywords", mode="before")
    @classmethod
    def _coerce_lists(cls, value: object) -> object:
        return _string_list(value)

    @field_validator("official", mode="before")
    @classmethod
    def _coerce_official(cls, value: object) -> object:
        if value is None:
            return False
        return value

    @field_validator("stars", "stars_numeric", mode="before")
    @classmethod
    def _coerce_stars(cls, value: object) -> object:
        if isinstance(value, str):
            return parse_star_count(value)
        return value

    _normalize_optional_text = field_validator(
        "type",
        "description",
        "short_description",
        "long_description",
        "category",
        "tag_on_card",
        "stars_str",
        "image_path",
        "github_url",
        "installation_command",
        mode="before",
    )(_blank_to_none)

    @property
    def star_count(self) -> float:
        if self.stars_numeric is not None:
            return self.stars_numeric
        if self.stars is not None:
            return self.stars
        if self.stars_str is not None:
            return parse_star_count(self.stars_str) or 0
        return 0


class ProductsResponse(CatalogBaseModel):
    """Envelope of ``GET /products``; records are validated one by one."""

    products: list[object]


def parse_star_count(raw: str) -> float | None:
    """``"1,234"`` -> ``1234.0``; ``"1.2k"`` -> ``1200.0``; junk -> ``None``."""

    text = raw.replace(",", "").strip().lower()
    multiplier = 1.0
    if text.endswith("k"):
        text, multiplier = text[:-1], 1000.0
    try:
        return float(text) * multiplier
    except ValueError:
        return None

from __future__ import annotations

import pytest

from site_blocks.models.blocks import (
    Block,
    BlockType,
    ControlKind,
    GenericContent,
    HeroContent,
    ServicesContent,
    content_model_for,
    create_block,
    field_control,
    get_default_content,
    label_for,
    palette,
    search_palette,
)


def test_default_content_matches_known_types() -> None:
    hero = get_default_content(BlockType.HERO)
    assert hero["title"] == "Welcome to Our Website"
    assert hero["subtitle"] == "Create amazing experiences with our platform"
    assert hero["buttonText"] == "Get Started"
    assert hero["buttonUrl"] == "#"
    assert hero["backgroundImage"].startswith("https://")

    contact = get_default_content("contact")
    assert contact == {
        "title": "Contact Us",
        "email": "hello@example.com",
        "phone": "+1 (555) 123-4567",
        "address": "123 Main St, City, State 12345",
    }

    services = get_default_content(BlockType.SERVICES)
    assert [item["name"] for item in services["services"]] == ["Web Design", "Development", "SEO"]

    assert get_default_content(BlockType.FOOTER) == {
        "companyName": "Your Company",
        "description": "Building amazing digital experiences",
    }


def test_default_content_is_total_and_fresh() -> None:
    assert get_default_content("newsletter") == {}

    first = get_default_content(BlockType.GALLERY)
    first["images"].clear()
    first["title"] = "changed"
    second = get_default_content(BlockType.GALLERY)
    assert second["title"] == "Gallery"
    assert len(second["images"]) == 3


@pytest.mark.parametrize("block_type", list(BlockType))
def test_create_block_seeds_defaults(block_type: BlockType) -> None:
    block = create_block(block_type)

    assert block.type == block_type.value
    assert block.block_type is block_type
    assert block.visible is True
    assert block.name == label_for(block_type)
    assert block.content == get_default_content(block_type)


def test_create_block_ids_are_unique() -> None:
    ids = {create_block(BlockType.HERO).id for _ in range(200)}
    assert len(ids) == 200


def test_create_block_for_unknown_type_uses_type_as_name() -> None:
    block = create_block("newsletter")

    assert block.name == "newsletter"
    assert block.content == {}
    assert block.block_type is None
    assert isinstance(block.resolved_content(), GenericContent)


def test_block_name_falls_back_to_type() -> None:
    assert Block(id="a", type="about").name == "about"
    assert Block(id="a", type=BlockType.ABOUT, name="  ").name == "about"
    assert Block(id="a", type="about", name="Our story").name == "Our story"


def test_resolved_content_fills_missing_and_malformed_fields() -> None:
    block = Block(
        id="h1",
        type="hero",
        content={"title": "Hello", "subtitle": None, "buttonText": ["not", "text"], "extra": 1},
    )

    content = block.resolved_content()

    assert isinstance(content, HeroContent)
    assert content.title == "Hello"
    assert content.subtitle == "Create amazing experiences with our platform"
    assert content.button_text == "Get Started"
    assert content.button_url == "#"


def test_resolved_content_replaces_non_list_repeaters() -> None:
    block = Block(id="s1", type="services", content={"services": "Web Design"})

    content = block.resolved_content()

    assert isinstance(content, ServicesContent)
    assert [service.name for service in content.services] == ["Web Design", "Development", "SEO"]


def test_resolved_content_drops_only_malformed_list_entries() -> None:
    block = Block(
        id="s1",
        type="services",
        content={"services": [{"name": "Mine", "description": "Custom"}, "junk", 7]},
    )

    content = block.resolved_content()

    assert [service.name for service in content.services] == ["Mine"]
    assert block.content["services"][1:] == ["junk", 7]


def test_value_or_default_treats_blank_strings_as_absent() -> None:
    content = HeroContent.model_validate({"title": "   "})

    assert content.title == "   "
    assert content.value_or_default("title") == "Welcome to Our Website"


def test_content_models_expose_editor_controls() -> None:
    controls = {wire: field_control(info) for _, wire, info in content_model_for("hero").schema_fields()}

    assert controls["subtitle"] is ControlKind.TEXTAREA
    assert controls["buttonUrl"] is ControlKind.URL
    assert controls["backgroundImage"] is ControlKind.IMAGE
    assert controls["backgroundColor"] is ControlKind.COLOR
    assert content_model_for("unknown") is GenericContent


def test_palette_groups_and_search() -> None:
    entries = palette()
    assert [entry.type for entry in entries][:4] == [
        BlockType.HERO,
        BlockType.ABOUT,
        BlockType.CONTACT,
        BlockType.FOOTER,
    ]
    assert {entry.category for entry in entries} == {"basic", "content"}

    grouped = search_palette("gallery")
    assert list(grouped) == ["content"]
    assert [entry.type for entry in grouped["content"]] == [BlockType.GALLERY]

    assert search_palette("REVIEWS")["content"][0].type is BlockType.TESTIMONIALS
    assert search_palette("nothing matches this") == {}
    assert sum(len(items) for items in search_palette("").values()) == len(entries)

import pytest

from pie_items.core import ItemType, MenuItem
from pie_items.item_types import (
    BUILTIN_ITEM_TYPES,
    CommandItemType,
    HotkeyItemType,
    SubmenuItemType,
    URIItemType,
)
from pie_items.item_types.utils import DEFAULT_ICON_THEME

pytestmark = [pytest.mark.unit_item_types]

MALFORMED_PAYLOADS = [None, "text", 42, [], {}, {"command": None, "hotkey": 3, "uri": ["x"]}]


@pytest.mark.parametrize(("name", "cls"), BUILTIN_ITEM_TYPES)
def test_builtins_satisfy_protocol(name, cls):
    descriptor = cls()

    assert isinstance(descriptor, ItemType)
    assert descriptor.default_icon_theme == DEFAULT_ICON_THEME
    assert descriptor.default_display_name
    assert descriptor.generic_description


@pytest.mark.parametrize(("name", "cls"), BUILTIN_ITEM_TYPES)
def test_default_payload_is_fresh_each_access(name, cls):
    descriptor = cls()

    assert descriptor.default_payload == descriptor.default_payload
    assert descriptor.default_payload is not descriptor.default_payload


def test_command_defaults_and_description():
    descriptor = CommandItemType()

    assert descriptor.is_container is False
    assert descriptor.default_display_name == "Launch Application"
    assert descriptor.default_icon == "terminal"
    assert descriptor.default_payload == {"command": "", "delayed": False}
    assert descriptor.generic_description == "Runs any command."

    item = MenuItem(kind="command", payload={"command": "gimp %f", "delayed": True})
    assert descriptor.describe_instance(item) == "gimp %f"
    assert descriptor.describe_instance(MenuItem(kind="command", payload={"command": ""})) == "Not defined."


def test_hotkey_defaults_and_description():
    descriptor = HotkeyItemType()

    assert descriptor.is_container is False
    assert descriptor.default_display_name == "Simulate Hotkey"
    assert descriptor.default_icon == "keyboard"
    assert descriptor.default_payload == {"hotkey": "", "delayed": False}

    item = MenuItem(kind="hotkey", payload={"hotkey": "Control+Alt+T"})
    assert descriptor.describe_instance(item) == "Control+Alt+T"
    assert descriptor.describe_instance(MenuItem(kind="hotkey", payload={})) == "Not bound."


def test_uri_defaults_and_description():
    descriptor = URIItemType()

    assert descriptor.is_container is False
    assert descriptor.default_display_name == "Open URI"
    assert descriptor.default_icon == "public"
    assert descriptor.default_payload == {"uri": ""}

    item = MenuItem(kind="uri", payload={"uri": " https://example.com "})
    assert descriptor.describe_instance(item) == "https://example.com"


@pytest.mark.parametrize(
    ("children", "expected"),
    [(None, "0 items"), ([], "0 items"), ([MenuItem(kind="uri")], "1 item"), ([MenuItem(kind="uri")] * 3, "3 items")],
)
def test_submenu_description_counts_children(children, expected):
    descriptor = SubmenuItemType()

    assert descriptor.is_container is True
    assert descriptor.default_payload == {}
    assert descriptor.describe_instance(MenuItem(kind="submenu", children=children)) == expected


@pytest.mark.parametrize(("name", "cls"), BUILTIN_ITEM_TYPES)
@pytest.mark.parametrize("payload", MALFORMED_PAYLOADS)
def test_describe_instance_tolerates_malformed_payload(name, cls, payload):
    description = cls().describe_instance(MenuItem(kind=name, payload=payload))

    assert isinstance(description, str)
    assert description

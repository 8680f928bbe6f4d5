"""Tests for node classification and normalization."""

import pytest

from templatebridge.reconcile import (
    CallbackNode,
    CallbackRegistry,
    PlainNode,
    classify,
    explicit_id,
    normalize_action,
    normalize_button,
)


# ============================================================================
# Classification
# ============================================================================

@pytest.mark.unit
def test_classify_callback_with_id():
    def handler():
        pass

    node = classify({"id": "save", "title": "Save", "onPress": handler})

    assert isinstance(node, CallbackNode)
    assert node.id == "save"
    assert node.callback is handler
    assert node.data == {"id": "save", "title": "Save"}


@pytest.mark.unit
def test_classify_callback_without_id():
    node = classify({"title": "Go", "onPress": lambda: None})

    assert isinstance(node, CallbackNode)
    assert node.id is None


@pytest.mark.unit
def test_classify_plain():
    node = classify({"id": "info", "title": "Info"})

    assert isinstance(node, PlainNode)
    assert node.id == "info"


@pytest.mark.unit
def test_classify_non_callable_press_is_plain():
    """A callback field holding data is pass-through, not an error."""
    node = classify({"title": "Broken", "onPress": "not-a-function"})

    assert isinstance(node, PlainNode)
    assert node.data["onPress"] == "not-a-function"


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "text", 3, ["a"]])
def test_classify_non_mapping(value):
    node = classify(value)

    assert isinstance(node, PlainNode)
    assert node.data == value
    assert node.id is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "node,expected",
    [
        ({"id": "a"}, "a"),
        ({"id": ""}, None),
        ({"id": None}, None),
        ({"id": 7}, None),
        ({}, None),
        ("a", None),
    ],
)
def test_explicit_id(node, expected):
    assert explicit_id(node) == expected


# ============================================================================
# normalize_action
# ============================================================================

@pytest.mark.unit
def test_action_explicit_id_reused(registry, counter_ids):
    def handler():
        pass

    result = normalize_action({"id": "x", "title": "X", "onPress": handler}, registry, counter_ids)

    assert result.id == "x"
    assert result.bound is True
    assert result.descriptor == {"id": "x", "title": "X"}
    assert registry.resolve("x") is handler


@pytest.mark.unit
def test_action_without_id_gets_generated_id(registry, counter_ids):
    result = normalize_action({"title": "Go", "onPress": lambda: None}, registry, counter_ids)

    assert result.id == "id-1"
    assert result.descriptor == {"title": "Go", "id": "id-1"}
    assert "id-1" in registry


@pytest.mark.unit
def test_action_empty_id_replaced(registry, counter_ids):
    result = normalize_action({"id": "", "onPress": lambda: None}, registry, counter_ids)

    assert result.id == "id-1"
    assert result.descriptor["id"] == "id-1"


@pytest.mark.unit
def test_plain_action_with_id_passes_through(registry, counter_ids):
    node = {"id": "info", "title": "Info"}
    result = normalize_action(node, registry, counter_ids)

    assert result.id == "info"
    assert result.bound is False
    assert result.descriptor == node
    assert len(registry) == 0


@pytest.mark.unit
def test_plain_action_without_id_yields_nothing(registry, counter_ids):
    node = {"title": "Static"}
    result = normalize_action(node, registry, counter_ids)

    assert result.id is None
    assert result.descriptor == node
    assert "id" not in result.descriptor
    assert len(registry) == 0


@pytest.mark.unit
def test_action_input_not_mutated(registry, counter_ids):
    node = {"title": "Go", "onPress": lambda: None}
    normalize_action(node, registry, counter_ids)

    assert set(node) == {"title", "onPress"}


@pytest.mark.unit
def test_action_upsert_replaces(registry, counter_ids):
    first, second = (lambda: 1), (lambda: 2)
    normalize_action({"id": "x", "onPress": first}, registry, counter_ids)
    normalize_action({"id": "x", "onPress": second}, registry, counter_ids)

    assert registry.resolve("x") is second
    assert len(registry) == 1


# ============================================================================
# normalize_button
# ============================================================================

@pytest.mark.unit
def test_button_without_id_or_callback_gets_id(registry, counter_ids):
    result = normalize_button({}, registry, counter_ids)

    assert result.descriptor == {"id": "id-1"}
    assert result.id == "id-1"
    assert result.bound is False
    assert len(registry) == 0


@pytest.mark.unit
def test_button_keeps_explicit_id(registry, counter_ids):
    result = normalize_button({"id": "grid-1", "title": "A"}, registry, counter_ids)

    assert result.descriptor == {"id": "grid-1", "title": "A"}


@pytest.mark.unit
def test_button_with_callback(registry, counter_ids):
    def handler():
        pass

    result = normalize_button({"title": "B", "onPress": handler}, registry, counter_ids)

    assert result.bound is True
    assert "onPress" not in result.descriptor
    assert registry.resolve(result.id) is handler


@pytest.mark.unit
def test_button_non_mapping_passes_through(registry, counter_ids):
    result = normalize_button(None, registry, counter_ids)

    assert result.descriptor is None
    assert result.id is None


@pytest.mark.unit
def test_default_factory_generates_callback_ids():
    registry = CallbackRegistry()
    result = normalize_action({"onPress": lambda: None}, registry)

    assert result.id.startswith("cb_")

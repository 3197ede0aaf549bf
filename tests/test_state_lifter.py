"""Tests for the state lifting preprocessor."""

import logging

from pagegen.ir import Action, Literal, StateSetter, VariableRef
from pagegen.parser import SchemaParser
from pagegen.preprocessors import DEFAULT_PREPROCESSORS, StateLifter, run_preprocessors

from factories import node, page


def _open_modal_schema(method="open", target=3):
    return page(
        node(
            "Button",
            id=2,
            props={
                "text": "Open",
                "onClick": {"actions": [{"type": "componentMethod", "config": {"componentId": target, "method": method}}]},
            },
        ),
        node("Modal", id=3, props={"title": "Dialog", "open": False}),
    )


def _lifted(registry, schema):
    project = SchemaParser(registry).parse(schema)
    return StateLifter(registry)(project).pages[0]


def test_component_method_becomes_state_and_methods(registry):
    result = _lifted(registry, _open_modal_schema())
    button, modal = result.root_node.children

    assert result.states == {"open_3": Literal(False)}
    assert result.methods["handleOpen_3"] == StateSetter("open_3", True)
    assert result.methods["handleClose_3"] == StateSetter("open_3", False)
    assert result.methods["handleOk_3"] == StateSetter("open_3", False)
    assert button.props["onClick"] == Action("callMethod", {"methodName": "this.methods.handleOpen_3"})
    assert modal.props["open"] == VariableRef("open_3")
    assert modal.props["onCancel"] == VariableRef("handleClose_3")
    assert modal.props["onOk"] == VariableRef("handleOk_3")


def test_open_change_event_forwards_value(registry):
    schema = page(
        node(
            "Button",
            id=2,
            props={"onClick": {"actions": [{"type": "componentMethod", "componentId": 4, "method": "open"}]}},
        ),
        node("Tooltip", id=4, props={"title": "tip"}),
    )
    result = _lifted(registry, schema)
    tooltip = result.root_node.children[1]

    assert result.methods["handleOpenChange_4"] == StateSetter("open_4", from_event=True)
    assert tooltip.props["onOpenChange"] == VariableRef("handleOpenChange_4")
    assert tooltip.props["open"] == VariableRef("open_4")


def test_other_actions_keep_their_order(registry):
    schema = page(
        node(
            "Button",
            id=2,
            props={
                "onClick": {
                    "actions": [
                        {"type": "showMessage", "config": {"text": "opening"}},
                        {"type": "componentMethod", "config": {"componentId": 3, "method": "open"}},
                    ]
                }
            },
        ),
        node("Modal", id=3),
    )
    result = _lifted(registry, schema)
    assert result.root_node.children[0].props["onClick"] == [
        Action("showMessage", {"text": "opening"}),
        Action("callMethod", {"methodName": "this.methods.handleOpen_3"}),
    ]


def test_unresolved_target_is_left_unchanged(registry, caplog):
    with caplog.at_level(logging.WARNING):
        result = _lifted(registry, _open_modal_schema(target=99))
    action = result.root_node.children[0].props["onClick"]
    assert action.action_type == "componentMethod"
    assert result.states == {}
    assert "no node with id 99" in caplog.text


def test_unknown_method_is_left_unchanged(registry, caplog):
    with caplog.at_level(logging.WARNING):
        result = _lifted(registry, _open_modal_schema(method="explode"))
    assert result.root_node.children[0].props["onClick"].action_type == "componentMethod"
    assert result.methods == {}


def test_run_preprocessors_uses_default_order(registry):
    assert DEFAULT_PREPROCESSORS == (StateLifter,)
    project = SchemaParser(registry).parse(_open_modal_schema())
    result = run_preprocessors(project, registry)
    assert "open_3" in result.pages[0].states


def test_run_preprocessors_with_empty_list(registry):
    project = SchemaParser(registry).parse(_open_modal_schema())
    result = run_preprocessors(project, registry, preprocessors=())
    assert result.pages[0].states == {}

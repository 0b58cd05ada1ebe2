"""Tests for StateMap and IdAckState."""

from __future__ import annotations

from idack.models.flowfile import FlowFile
from idack.models.state import IdAckState, StateMap


def test_empty_state_map_loads_as_empty_record():
    state = IdAckState.from_state_map(StateMap())
    assert state == IdAckState()
    assert state.is_fully_acknowledged


def test_loads_state_keys():
    state = IdAckState.from_state_map({
        "lastSentId": "a", "lastSentTime": "T1",
        "lastAcknowledgedId": "b", "lastAcknowledgedTime": "T2",
        "unrelated": "x",
    })
    assert state.last_sent_id == "a"
    assert state.last_acknowledged_time == "T2"
    assert not state.is_fully_acknowledged


def test_to_state_values_omits_absent_fields():
    assert IdAckState(last_sent_id="a").to_state_values() == {"lastSentId": "a"}


def test_merged_into_keeps_unrelated_keys():
    prior = StateMap(values={"lastSentId": "old", "note": "x"}, version=3)
    merged = IdAckState(last_sent_id="new", last_sent_time="T").merged_into(prior)
    assert merged == {"lastSentId": "new", "lastSentTime": "T", "note": "x"}
    assert prior.values["lastSentId"] == "old"


def test_flow_file_with_attribute_returns_new_instance():
    original = FlowFile(attributes={"a": "1"})
    updated = original.with_attribute("b", "2")
    assert updated.uuid == original.uuid
    assert updated.attributes == {"a": "1", "b": "2"}
    assert original.attributes == {"a": "1"}

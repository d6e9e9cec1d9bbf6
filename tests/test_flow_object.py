"""
Unit tests for the FlowObject model.

Tests covering:
- Identity and kind coercion
- Finalization (read-only after finalize)
- Default token forwarding (fan-out along every outgoing flow)
- Composed forwarders and rule sets
"""

from unittest.mock import Mock

import pytest
from pydantic import ValidationError as PydanticValidationError

from bpmn_flow.exceptions import FlowObjectFinalizedError
from bpmn_flow.execution.forwarding import forward_to_all_outgoing
from bpmn_flow.models.flow_objects import BPMNElementType, FlowObject, SequenceFlow
from bpmn_flow.validation.rules import assert_name, assert_outgoing_sequence_flows


def make_context(flows):
    context = Mock()
    context.get_outgoing_sequence_flows.return_value = flows
    return context


class TestFlowObjectIdentity:
    """Tests for id, name and type."""

    def test_fields(self, task):
        assert task.id == "fo_1"
        assert task.name == "Task A"
        assert task.type == "task"

    def test_enum_type_is_stored_as_plain_string(self):
        gateway = FlowObject(id="gw", name="Decide", type=BPMNElementType.EXCLUSIVE_GATEWAY)
        assert gateway.type == "exclusiveGateway"
        assert type(gateway.type) is str

    def test_name_defaults_to_empty(self):
        assert FlowObject(id="x", type="task").name == ""

    def test_none_name_becomes_empty(self):
        assert FlowObject(id="x", name=None, type="task").name == ""

    def test_whitespace_name_is_accepted_at_construction(self):
        assert FlowObject(id="x", name="   ", type="task").name == "   "

    def test_id_and_type_are_immutable(self, task):
        with pytest.raises(PydanticValidationError):
            task.id = "other"
        with pytest.raises(PydanticValidationError):
            task.type = "endEvent"

    def test_default_behavior(self, task):
        assert task.forwarder is forward_to_all_outgoing
        assert task.validation_rules == ()

    def test_serialization_excludes_behavior(self, task):
        assert task.model_dump() == {"id": "fo_1", "name": "Task A", "type": "task"}


class TestFinalization:
    """Tests for the read-only state after finalize()."""

    def test_name_is_mutable_before_finalize(self, task):
        task.name = "Renamed"
        assert task.name == "Renamed"
        assert not task.is_finalized

    def test_name_is_read_only_after_finalize(self, task):
        task.finalize()
        assert task.is_finalized
        with pytest.raises(FlowObjectFinalizedError):
            task.name = "Renamed"
        assert task.name == "Task A"

    def test_finalize_is_idempotent(self, task):
        task.finalize()
        task.finalize()
        assert task.is_finalized


class TestDefaultForwarding:
    """Tests for emit_tokens with the default forwarder."""

    def test_no_outgoing_flows_emits_nothing(self, task):
        context = make_context([])

        task.emit_tokens(context, {"order": 1})

        context.get_outgoing_sequence_flows.assert_called_once_with(task)
        context.emit_token_along.assert_not_called()

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_one_token_per_outgoing_flow(self, task, count):
        flows = [SequenceFlow(id=f"f{i}", source_ref="fo_1", target_ref=f"t{i}") for i in range(count)]
        context = make_context(flows)
        payload = {"order": 42}

        task.emit_tokens(context, payload)

        assert context.emit_token_along.call_count == count
        emitted_flows = {call.args[0].id for call in context.emit_token_along.call_args_list}
        assert emitted_flows == {flow.id for flow in flows}
        for call in context.emit_token_along.call_args_list:
            assert call.args[1] is payload

    def test_payload_defaults_to_none(self, task):
        flow = SequenceFlow(id="f1", source_ref="fo_1", target_ref="t1")
        context = make_context([flow])

        task.emit_tokens(context)

        context.emit_token_along.assert_called_once_with(flow, None)

    def test_finalized_object_still_forwards(self, task):
        flow = SequenceFlow(id="f1", source_ref="fo_1", target_ref="t1")
        context = make_context([flow])
        task.finalize()

        task.emit_tokens(context, "data")

        context.emit_token_along.assert_called_once_with(flow, "data")


class TestComposedBehavior:
    """Tests for forwarders and rules chosen at construction."""

    def test_custom_forwarder_replaces_default(self):
        forwarder = Mock()
        gateway = FlowObject(id="gw", name="Choose", type="exclusiveGateway", forwarder=forwarder)
        context = make_context([])

        gateway.emit_tokens(context, "data")

        forwarder.assert_called_once_with(gateway, context, "data")
        context.get_outgoing_sequence_flows.assert_not_called()

    def test_validate_structure_runs_rules_in_order(self, connectivity_factory, error_queue):
        flow_object = FlowObject(
            id="fo_1",
            name="",
            type="task",
            validation_rules=(assert_name, assert_outgoing_sequence_flows),
        )

        flow_object.validate_structure(connectivity_factory(outgoing=0), error_queue)

        assert [error.code for error in error_queue.errors] == ["FO1", "FO2"]

    def test_no_rules_reports_nothing(self, task, connectivity_factory, error_queue):
        task.validate_structure(connectivity_factory(), error_queue)
        assert not error_queue.has_errors()

"""Pytest configuration for bpmn-flow tests."""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest
from loguru import logger as loguru_logger

# Add the project root to the path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from bpmn_flow.core.observability import InterceptHandler, ObservabilityManager  # noqa: E402
from bpmn_flow.models.flow_objects import FlowObject, SequenceFlow  # noqa: E402
from bpmn_flow.models.process_definition import ProcessDefinition  # noqa: E402
from bpmn_flow.models.registry import create_flow_object  # noqa: E402
from bpmn_flow.validation.error_queue import ErrorQueue  # noqa: E402


@pytest.fixture(autouse=True)
def reset_observability():
    """Undo logging/telemetry setup done by the CLI between tests."""
    root = logging.getLogger()
    level = root.level
    yield
    ObservabilityManager.reset()
    loguru_logger.remove()
    for handler in list(root.handlers):
        if isinstance(handler, InterceptHandler):
            root.removeHandler(handler)
    root.setLevel(level)


def make_flows(source_id: str, count: int, outgoing: bool = True):
    """Build ``count`` sequence flows leaving (or entering) ``source_id``."""
    flows = []
    for i in range(count):
        if outgoing:
            flows.append(SequenceFlow(id=f"flow_{i}", source_ref=source_id, target_ref=f"node_{i}"))
        else:
            flows.append(SequenceFlow(id=f"flow_{i}", source_ref=f"node_{i}", target_ref=source_id))
    return flows


@pytest.fixture
def connectivity_factory():
    """Create a mocked connectivity collaborator with fixed flow counts."""

    def _create(flow_object_id: str = "fo_1", outgoing: int = 0, incoming: int = 0) -> Mock:
        outgoing_flows = make_flows(flow_object_id, outgoing)
        incoming_flows = make_flows(flow_object_id, incoming, outgoing=False)
        connectivity = Mock()
        connectivity.get_outgoing_sequence_flows.return_value = outgoing_flows
        connectivity.has_outgoing_sequence_flows.return_value = bool(outgoing_flows)
        connectivity.get_incoming_sequence_flows.return_value = incoming_flows
        connectivity.has_incoming_sequence_flows.return_value = bool(incoming_flows)
        return connectivity

    return _create


@pytest.fixture
def task():
    """A plain task with no registered behavior beyond the defaults."""
    return FlowObject(id="fo_1", name="Task A", type="task")


@pytest.fixture
def error_queue():
    return ErrorQueue()


@pytest.fixture
def linear_definition():
    """start -> task -> end, not finalized."""
    return ProcessDefinition(
        id="order_process",
        name="Order Process",
        flow_objects=[
            create_flow_object("start", "Order received", "startEvent"),
            create_flow_object("check", "Check order", "userTask"),
            create_flow_object("end", "Order handled", "endEvent"),
        ],
        sequence_flows=[
            SequenceFlow(id="f1", source_ref="start", target_ref="check"),
            SequenceFlow(id="f2", source_ref="check", target_ref="end"),
        ],
    )


LINEAR_BPMN = """<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="http://www.omg.org/spec/BPMN/20100524/MODEL"
             id="defs" targetNamespace="http://example.com/bpmn">
  <process id="order_process" name="Order Process" isExecutable="true">
    <startEvent id="start" name="Order received"/>
    <userTask id="check" name="Check order"/>
    <exclusiveGateway id="decide" name="Valid?"/>
    <endEvent id="done" name="Order handled"/>
    <endEvent id="rejected" name="Order rejected"/>
    <textAnnotation id="note"><text>Ignored</text></textAnnotation>
    <sequenceFlow id="f1" sourceRef="start" targetRef="check"/>
    <sequenceFlow id="f2" sourceRef="check" targetRef="decide"/>
    <sequenceFlow id="f3" sourceRef="decide" targetRef="done">
      <conditionExpression>valid == true</conditionExpression>
    </sequenceFlow>
    <sequenceFlow id="f4" sourceRef="decide" targetRef="rejected"/>
  </process>
</definitions>
"""

BROKEN_BPMN = """<?xml version="1.0" encoding="UTF-8"?>
<definitions xmlns="http://www.omg.org/spec/BPMN/20100524/MODEL" id="defs">
  <process id="broken_process">
    <startEvent id="start" name=""/>
    <task id="orphan" name="   "/>
    <endEvent id="end" name="End"/>
    <sequenceFlow id="f1" sourceRef="start" targetRef="end"/>
    <sequenceFlow id="f2" sourceRef="end" targetRef="start"/>
  </process>
</definitions>
"""


@pytest.fixture
def linear_bpmn():
    return LINEAR_BPMN


@pytest.fixture
def broken_bpmn():
    return BROKEN_BPMN

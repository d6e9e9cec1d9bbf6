"""
BPMN 2.0 XML Loader

Builds finalized process definitions from BPMN 2.0 XML documents. Flow nodes
are created through the kind registry, so each gets the forwarder and
validation rules of its kind. Flow nodes of kinds the registry does not know
(complexGateway, transaction, ...) get the default forwarder and no rules.
Elements that are not flow nodes (data objects, annotations, lanes, ...) are
skipped.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from lxml import etree

from bpmn_flow.exceptions import BPMNFlowError, ProcessDefinitionParseError
from bpmn_flow.models.flow_objects import BPMNElementType, SequenceFlow
from bpmn_flow.models.process_definition import ProcessDefinition
from bpmn_flow.models.registry import create_flow_object, is_registered

logger = logging.getLogger(__name__)

BPMN_MODEL_NS = "http://www.omg.org/spec/BPMN/20100524/MODEL"

# Children of <process> that are not flow nodes
NON_FLOW_NODE_ELEMENTS = frozenset(
    {
        "association",
        "auditing",
        "category",
        "correlationSubscription",
        "dataObject",
        "dataObjectReference",
        "dataStoreReference",
        "documentation",
        "extensionElements",
        "group",
        "humanPerformer",
        "ioBinding",
        "ioSpecification",
        "laneSet",
        "monitoring",
        "performer",
        "potentialOwner",
        "property",
        "resourceRole",
        "textAnnotation",
    }
)


def _local_name(element: etree._Element) -> Optional[str]:
    if not isinstance(element.tag, str):
        # comments and processing instructions
        return None
    return etree.QName(element).localname


def _parse_document(source: Union[str, bytes, Path]) -> etree._Element:
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    try:
        if isinstance(source, Path):
            return etree.parse(str(source), parser).getroot()
        if isinstance(source, str):
            source = source.encode("utf-8")
        return etree.fromstring(source, parser)
    except (etree.XMLSyntaxError, OSError) as e:
        raise ProcessDefinitionParseError(f"Cannot parse BPMN document: {e}") from e


def _find_processes(root: etree._Element) -> List[etree._Element]:
    if _local_name(root) == BPMNElementType.PROCESS.value:
        return [root]
    processes = root.findall(f".//{{{BPMN_MODEL_NS}}}process")
    if not processes:
        processes = root.findall(".//process")
    return processes


def _condition_text(element: etree._Element) -> Optional[str]:
    for child in element:
        if _local_name(child) == "conditionExpression":
            text = (child.text or "").strip()
            return text or None
    return None


def _load_process(process_element: etree._Element) -> ProcessDefinition:
    process_id = process_element.get("id")
    if not process_id:
        raise ProcessDefinitionParseError("Found a process element without an id")

    definition = ProcessDefinition(
        id=process_id,
        name=process_element.get("name", ""),
        is_executable=process_element.get("isExecutable", "true").lower() == "true",
    )
    sequence_flow_elements = []

    for element in process_element:
        tag = _local_name(element)
        if tag is None:
            continue
        if tag == BPMNElementType.SEQUENCE_FLOW.value:
            sequence_flow_elements.append(element)
        elif tag not in NON_FLOW_NODE_ELEMENTS:
            element_id = element.get("id")
            if not element_id:
                raise ProcessDefinitionParseError(
                    f"Found a {tag} without an id in process '{process_id}'"
                )
            if not is_registered(tag):
                logger.debug(f"Loading unregistered kind '{tag}' ('{element_id}') with the default spec")
            definition.add_flow_object(create_flow_object(element_id, element.get("name", ""), tag))
        else:
            logger.debug(f"Skipping non-flow-node element '{tag}' in process '{process_id}'")

    for element in sequence_flow_elements:
        if not element.get("id"):
            raise ProcessDefinitionParseError(
                f"Found a sequenceFlow without an id in process '{process_id}'"
            )
        source_ref = element.get("sourceRef")
        target_ref = element.get("targetRef")
        for ref in (source_ref, target_ref):
            if definition.get_flow_object(ref or "") is None:
                raise ProcessDefinitionParseError(
                    f"Sequence flow '{element.get('id')}' in process '{process_id}' "
                    f"references unknown flow object '{ref}'"
                )
        definition.add_sequence_flow(
            SequenceFlow(
                id=element.get("id"),
                name=element.get("name", ""),
                source_ref=source_ref,
                target_ref=target_ref,
                condition_expression=_condition_text(element),
            )
        )

    return definition.finalize()


def load_process_definitions(source: Union[str, bytes, Path]) -> List[ProcessDefinition]:
    """
    Load every process of a BPMN 2.0 document.

    Args:
        source: XML text, raw bytes, or a path to a ``.bpmn`` file

    Returns:
        Finalized process definitions, in document order

    Raises:
        ProcessDefinitionParseError: If the document is malformed or inconsistent
    """
    root = _parse_document(source)
    processes = _find_processes(root)
    if not processes:
        raise ProcessDefinitionParseError("BPMN document contains no process element")

    definitions = []
    for process_element in processes:
        try:
            definitions.append(_load_process(process_element))
        except ProcessDefinitionParseError:
            raise
        except BPMNFlowError as e:
            # duplicate ids and similar structural problems surface as parse errors
            raise ProcessDefinitionParseError(str(e)) from e

    logger.info(f"Loaded {len(definitions)} process definition(s)")
    return definitions


def load_process_definitions_from_file(path: Union[str, Path]) -> List[ProcessDefinition]:
    """Load every process of a BPMN 2.0 file."""
    return load_process_definitions(Path(path))


__all__ = [
    "BPMN_MODEL_NS",
    "NON_FLOW_NODE_ELEMENTS",
    "load_process_definitions",
    "load_process_definitions_from_file",
]

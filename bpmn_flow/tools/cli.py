"""
bpmn-flow CLI Interface

Command-line tool for loading BPMN 2.0 files, checking their structure and
inspecting the flow objects they define.
"""

import json
import logging
import sys
from typing import List

import click

from bpmn_flow.config import ValidationConfig
from bpmn_flow.core.observability import LogLevel, ObservabilityManager, Timer
from bpmn_flow.exceptions import ProcessDefinitionParseError
from bpmn_flow.models.process_definition import ProcessDefinition
from bpmn_flow.parsing.loader import load_process_definitions_from_file
from bpmn_flow.validation.error_queue import ErrorQueue

logger = logging.getLogger(__name__)

EXIT_VALIDATION_FAILED = 1
EXIT_PARSE_ERROR = 2


@click.group()
def cli():
    """bpmn-flow CLI - Structural checks for BPMN process definitions."""
    pass


def _setup_observability(config: ValidationConfig, verbose: bool) -> None:
    if verbose:
        config.log_level = LogLevel.DEBUG.value
    obs_config = config.to_observability_config()
    ObservabilityManager.reset()
    ObservabilityManager.initialize(obs_config)


def _load_or_exit(bpmn_file: str) -> List[ProcessDefinition]:
    try:
        return load_process_definitions_from_file(bpmn_file)
    except ProcessDefinitionParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_PARSE_ERROR)


@cli.command()
@click.argument("bpmn_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--json-output",
    is_flag=True,
    help="Output errors in JSON format",
)
@click.option(
    "--fail-on-error",
    is_flag=True,
    help="Exit with status 1 when validation finds errors (also set by BPMN_FLOW_FAIL_ON_ERROR)",
)
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Verbose logging output",
)
def validate(bpmn_file: str, json_output: bool, fail_on_error: bool, verbose: bool) -> None:
    """
    Validate the flow objects of every process in a BPMN file.

    \b
    Examples:
        bpmn-flow validate order.bpmn
        bpmn-flow validate order.bpmn --json-output --fail-on-error
    """
    config = ValidationConfig.from_env()
    if fail_on_error:
        config.fail_on_error = True
    _setup_observability(config, verbose)

    definitions = _load_or_exit(bpmn_file)

    error_queue = ErrorQueue()
    with Timer("validate_file"):
        for definition in definitions:
            definition.validate_structure(error_queue)

    errors = error_queue.errors
    if json_output:
        output = {
            "file": bpmn_file,
            "valid": not errors,
            "processes": [definition.id for definition in definitions],
            "errors": [
                {"code": error.code, "message": error.message, "element_id": error.element_id}
                for error in errors
            ],
        }
        click.echo(json.dumps(output, indent=2))
    else:
        for error in errors:
            click.echo(str(error))
        if errors:
            click.echo(f"{len(errors)} error(s) found in {bpmn_file}", err=True)
        else:
            click.echo(f"{bpmn_file}: no errors found")

    if errors and config.fail_on_error:
        sys.exit(EXIT_VALIDATION_FAILED)


@cli.command()
@click.argument("bpmn_file", type=click.Path(exists=True, dir_okay=False))
def inspect(bpmn_file: str) -> None:
    """
    List the flow objects of every process in a BPMN file.

    \b
    Examples:
        bpmn-flow inspect order.bpmn
    """
    _setup_observability(ValidationConfig.from_env(), verbose=False)
    definitions = _load_or_exit(bpmn_file)

    for definition in definitions:
        click.echo(f"Process '{definition.id}' ({definition.name or 'unnamed'})")
        for flow_object in definition.flow_objects:
            incoming = len(definition.get_incoming_sequence_flows(flow_object))
            outgoing = len(definition.get_outgoing_sequence_flows(flow_object))
            click.echo(
                f"  {flow_object.id}: {flow_object.type} '{flow_object.name}' "
                f"in={incoming} out={outgoing}"
            )


if __name__ == "__main__":
    cli()

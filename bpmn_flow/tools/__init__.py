"""
bpmn-flow Tools

Command-line tools for bpmn-flow.
"""

from bpmn_flow.tools.cli import cli

__all__ = ["cli"]

"""
MCP tool implementations.

Tools are organized by domain:
- theory - Scale, chord and progression vocabulary
- generation - Melody and harmony generation
- export - MIDI and project file export
"""

from chuk_mcp_songwriter.tools.export import register_export_tools
from chuk_mcp_songwriter.tools.generation import register_generation_tools
from chuk_mcp_songwriter.tools.theory import register_theory_tools

__all__ = [
    "register_export_tools",
    "register_generation_tools",
    "register_theory_tools",
]

"""
Non-fatal parse diagnostics.

Public API:
    - Severity, Diagnostic, ParseReport: Core result types
    - DiagnosticRule: Rule definition with message template
    - BRUSH_001, FORMAT_001: Rules emitted by the parser
"""

from .core import Severity, Diagnostic, ParseReport
from .rules import DiagnosticRule, BRUSH_001, FORMAT_001

__all__ = [
    'Severity',
    'Diagnostic',
    'ParseReport',
    'DiagnosticRule',
    'BRUSH_001',
    'FORMAT_001',
]

"""
Diagnostic rule definitions.

Each rule has:
- Code: Unique identifier (e.g., "BRUSH-001")
- Severity: FAIL, WARN, or INFO
- Message template: Human-readable description

Rules are organized by category:
- BRUSH: Brush assembly
- FORMAT: Dialect detection
"""

from dataclasses import dataclass
from typing import Optional

from .core import Diagnostic, Severity


@dataclass(frozen=True)
class DiagnosticRule:
    """Definition of a diagnostic rule.

    Attributes:
        code: Unique rule code (e.g., "BRUSH-001")
        severity: Severity of diagnostics created from this rule
        message_template: Template for the message (use {placeholders})
        description: Full description of the rule
    """
    code: str
    severity: Severity
    message_template: str
    description: Optional[str] = None

    def format_message(self, **kwargs) -> str:
        return self.message_template.format(**kwargs)

    def diagnostic(self, line: Optional[int] = None, **kwargs) -> Diagnostic:
        """Create a Diagnostic for this rule."""
        return Diagnostic(
            severity=self.severity,
            code=self.code,
            message=self.format_message(line=line, **kwargs),
            line=line,
        )


# =============================================================================
# BRUSH RULES
# =============================================================================

BRUSH_001 = DiagnosticRule(
    code="BRUSH-001",
    severity=Severity.FAIL,
    message_template="Error parsing brush at line {line}: {reason}",
    description="The brush planes do not bound a valid finite region; the brush was skipped"
)

# =============================================================================
# FORMAT RULES
# =============================================================================

FORMAT_001 = DiagnosticRule(
    code="FORMAT-001",
    severity=Severity.WARN,
    message_template="Could not detect map format, nothing was parsed",
    description="The first face of the document does not match any known dialect"
)

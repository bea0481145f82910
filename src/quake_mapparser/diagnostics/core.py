"""
Core data structures for parse diagnostics.

Defines the types a caller receives for problems that do not abort parsing:
- Severity: Issue severity levels (INFO, WARN, FAIL)
- Diagnostic: Individual finding with its source line
- ParseReport: Collection of diagnostics, usable as the parser's sink
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class Severity(Enum):
    """Diagnostic severity levels.

    - INFO: Informational
    - WARN: Something was ignored, the result may be incomplete
    - FAIL: An object was rejected and is missing from the result
    """
    INFO = auto()
    WARN = auto()
    FAIL = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Diagnostic:
    """A single non-fatal parse finding.

    Attributes:
        severity: Issue severity (INFO, WARN, FAIL)
        code: Rule code (e.g., "BRUSH-001")
        message: Human-readable description
        line: Source line the finding refers to, if known
    """
    severity: Severity
    code: str
    message: str
    line: Optional[int] = None

    def format(self) -> str:
        """Format for display: ``[SEVERITY] CODE line=N :: message``."""
        line = self.line if self.line is not None else '-'
        return f"[{self.severity}] {self.code} line={line} :: {self.message}"

    def __str__(self) -> str:
        return self.format()


@dataclass
class ParseReport:
    """Collection of diagnostics emitted during one or more parse calls.

    Pass an instance as ``diagnostics=`` to any ``MapParser`` entry point.

    Properties:
        passed: True if no FAIL severity issues
        failed: True if any FAIL severity issues
        warnings: List of WARN severity issues
        errors: List of FAIL severity issues
        infos: List of INFO severity issues
    """
    issues: List[Diagnostic] = field(default_factory=list)
    source: Optional[str] = None

    @property
    def passed(self) -> bool:
        return not any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def failed(self) -> bool:
        return any(i.severity == Severity.FAIL for i in self.issues)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [i for i in self.issues if i.severity == Severity.WARN]

    @property
    def errors(self) -> List[Diagnostic]:
        return [i for i in self.issues if i.severity == Severity.FAIL]

    @property
    def infos(self) -> List[Diagnostic]:
        return [i for i in self.issues if i.severity == Severity.INFO]

    def add_issue(self, issue: Diagnostic) -> None:
        self.issues.append(issue)

    def merge(self, other: 'ParseReport') -> 'ParseReport':
        """Merge another report into this one and return self."""
        self.issues.extend(other.issues)
        return self

    def report(self) -> str:
        """Generate a formatted multi-line report of all issues."""
        if not self.issues:
            return "Parse clean: No issues found"

        lines = []
        source_str = f" ({self.source})" if self.source else ""
        lines.append(f"Parse diagnostics{source_str}: {len(self.issues)} issue(s)")
        lines.append("-" * 60)

        for severity in [Severity.FAIL, Severity.WARN, Severity.INFO]:
            severity_issues = [i for i in self.issues if i.severity == severity]
            if severity_issues:
                lines.append(f"\n{severity.name} ({len(severity_issues)}):")
                for issue in severity_issues:
                    lines.append(issue.format())

        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'passed': self.passed,
            'source': self.source,
            'issue_count': len(self.issues),
            'fail_count': len(self.errors),
            'warn_count': len(self.warnings),
            'info_count': len(self.infos),
            'issues': [
                {
                    'severity': str(issue.severity),
                    'code': issue.code,
                    'message': issue.message,
                    'line': issue.line,
                }
                for issue in self.issues
            ]
        }

"""Result objects and diagnostic types for XML document building.

Object conversion is partial-failure tolerant: fields that cannot be read are
skipped, and the reason is kept here rather than raised.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from simple_xml_builder.shared.config import RenderConfig
    from simple_xml_builder.tree.node import XmlNode


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()      # Debug-level information
    INFO = auto()       # Informational messages
    WARNING = auto()    # Recovered problems, e.g. a skipped field
    ERROR = auto()      # Error conditions that were recovered
    CRITICAL = auto()   # Critical errors that impact the output


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


@dataclass
class ConversionResult:
    """Outcome of converting an object into an XML node tree."""

    node: "XmlNode"
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    skipped_fields: List[str] = field(default_factory=list)
    correlation_id: Optional[str] = None

    @property
    def success(self) -> bool:
        """True when every field was converted."""
        return not self.skipped_fields

    @property
    def field_count(self) -> int:
        """Number of fields that made it into the tree."""
        return len(self.node.children or [])

    def add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        component: str,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Add diagnostic entry to result."""
        self.diagnostics.append(
            DiagnosticEntry(
                severity=severity,
                message=message,
                component=component,
                details=details,
                correlation_id=self.correlation_id,
            )
        )

    def get_diagnostics_by_severity(
        self,
        severity: DiagnosticSeverity
    ) -> List[DiagnosticEntry]:
        """Get diagnostics of specific severity level."""
        return [diag for diag in self.diagnostics if diag.severity == severity]

    def render(self, config: Optional["RenderConfig"] = None) -> str:
        """Render the converted tree without an XML declaration."""
        return self.node.render(0, config)

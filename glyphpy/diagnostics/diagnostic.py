"""Diagnostics core types."""

from dataclasses import dataclass

from glyphpy.diagnostics.codes import DiagnosticSpec, ErrorKind, Severity
from glyphpy.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser.

    `context` lists the elements enclosing the failure as `"Kind name"`, outermost first.
    """

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: ErrorKind | None = None
    context: tuple[str, ...] = ()

    @staticmethod
    def from_spec(
        spec: DiagnosticSpec,
        range: TextRange,
        *,
        message: str | None = None,
        context: tuple[str, ...] = (),
    ) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=message if message is not None else spec.message,
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
            context=context,
        )

    @property
    def offset(self) -> int:
        return self.range.start.value

    @property
    def kind(self) -> ErrorKind | None:
        if self.context:
            return ErrorKind.COMPOSITION
        return self.category

    def __str__(self) -> str:
        location = f"{self.range.start.value}..{self.range.end.value}"
        inside = f" (in {' > '.join(self.context)})" if self.context else ""
        return f"{self.severity} {self.code} at {location}: {self.message}{inside}"

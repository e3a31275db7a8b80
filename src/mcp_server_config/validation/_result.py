from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..errors import ConfigValidationError


@dataclass(frozen=True)
class ValidationIssue:
    """One finding against a servers document.

    Attributes:
        level: "error" for a rule failure, "warning" for a value normalization will replace.
        path: Dotted location, e.g. "mcpServers.api.dev.cwd".
        message: Same text the matching exception carries.
        server: Server entry the finding belongs to; None for document-level findings.
        error: The exception validate_config would raise for this finding, if any.
    """

    level: Literal["error", "warning"]
    path: str
    message: str
    server: str | None = None
    error: ConfigValidationError | None = field(default=None, compare=False, repr=False)


@dataclass
class ValidationResult:
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def failing_servers(self) -> list[str]:
        """Names of servers with at least one error, in document order."""
        names: list[str] = []
        for issue in self.errors:
            if issue.server is not None and issue.server not in names:
                names.append(issue.server)
        return names

    def for_server(self, name: str) -> list[ValidationIssue]:
        return [i for i in self.issues if i.server == name]

    def raise_for_errors(self) -> None:
        """Raise the first error as its validation exception; do nothing when valid."""
        for issue in self.errors:
            if issue.error is not None:
                raise issue.error
            raise ConfigValidationError(issue.message, server=issue.server)

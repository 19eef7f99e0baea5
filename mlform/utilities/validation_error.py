from dataclasses import dataclass

import pydantic


@dataclass(frozen=True)
class ValidationIssue:
    """ A single failed constraint. path is the location of the offending value within the validated input. """
    path: tuple[str | int, ...]
    message: str
    code: str

    def __str__(self) -> str:
        location = ".".join(str(part) for part in self.path) or "<root>"
        return f"{location}: {self.message}"


class ValidationError(Exception):
    """Exception raised when payload validation fails.
    NOTE: Messages in these errors should be shareable to the user.
    The issues list carries one entry per failed constraint so callers can point at the offending field. """

    def __init__(self, message: str, issues: list[ValidationIssue] | None = None) -> None:
        self.message = message
        self.issues: list[ValidationIssue] = issues or []
        super().__init__(self.message)

    @classmethod
    def from_pydantic(cls, error: pydantic.ValidationError) -> 'ValidationError':
        """ Converts a pydantic ValidationError into a ValidationError with one issue per pydantic error. """
        issues = [
            ValidationIssue(path=tuple(e["loc"]), message=e["msg"], code=e["type"])
            for e in error.errors()
        ]
        summary = "; ".join(str(issue) for issue in issues)
        return cls(f"{len(issues)} validation issue(s): {summary}", issues)

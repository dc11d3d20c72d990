"""Moho Exceptions

Custom exceptions for the template compiler and its CLI.
"""

from __future__ import annotations


class MohoError(Exception):
    """Base exception for all moho errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ParseError(MohoError):
    """Raised when template source cannot be parsed."""

    pass


class NestedVariableError(ParseError):
    """Raised when a placeholder opens inside another placeholder."""

    def __init__(self) -> None:
        super().__init__("nested variables are not allowed")


class UnfinishedVariableError(ParseError):
    """Raised when the source ends inside an open placeholder."""

    def __init__(self) -> None:
        super().__init__("variable was unfinished")


class InvalidIdentifierError(ParseError):
    """Raised when a variable or filter name is not a legal identifier."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(reason)


class EmptyFilterChainError(ParseError):
    """Raised when a filter chain has no identifiers at all."""

    def __init__(self, body: str):
        self.body = body
        super().__init__(f"variable should have at least one ident: {body!r}")


class ConflictingVariableError(ParseError):
    """Raised when a filtered placeholder's derived name is already taken."""

    def __init__(self, name: str, taken_by: str):
        self.name = name
        self.taken_by = taken_by
        super().__init__(
            f"filtered variable {name} clashes with {taken_by}, rename one of them"
        )


class TemplateNotFoundError(MohoError):
    """Raised when a named template does not exist in the store."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Template not found: {name}")


class TemplateReadError(MohoError):
    """Raised when a stored script can't describe itself."""

    def __init__(self, name: str, stderr: str = ""):
        self.name = name
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr.strip() else ""
        super().__init__(f"Failed to read template {name}{detail}")


class EditAborted(MohoError):
    """Raised when the editor is closed without saving."""

    def __init__(self) -> None:
        super().__init__("Editing aborted, nothing was saved")


class InvalidVarsError(MohoError):
    """Raised when a get-vars payload can't be decoded."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Invalid template vars: {detail}")


class InvalidTemplateNameError(MohoError):
    """Raised when a template name can't be used as a file name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid template name: {name!r}")

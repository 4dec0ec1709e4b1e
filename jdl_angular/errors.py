"""
Exceptions and warnings raised while building a JDL model.

The parser is permissive: nothing here is raised unless strict mode is
requested, except for I/O problems reading the model file.
"""


class JdlError(Exception):
    """Base class for all errors raised by jdl_angular."""


class JdlSemanticError(JdlError):
    """
    A construct that parses structurally but makes no sense.

    Carries an optional line/col/filename location so the CLI can report
    every failure the same way.
    """

    def __init__(self, message, line=None, col=None, filename=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.col = col
        self.filename = filename

    def __str__(self):
        where = []
        if self.filename:
            where.append(str(self.filename))
        if self.line is not None:
            where.append(f"line {self.line}")
        if self.col is not None:
            where.append(f"col {self.col}")
        if where:
            return f"{self.message} ({', '.join(where)})"
        return self.message


class MalformedFieldError(JdlSemanticError):
    """A line inside an entity body that is not `<name> <type> [rules]`."""

    def __init__(self, entity_name, line_text, line=None, col=None, filename=None):
        super().__init__(
            f"Malformed field '{line_text}' in entity '{entity_name}'.",
            line=line,
            col=col,
            filename=filename,
        )
        self.entity_name = entity_name
        self.line_text = line_text


class DanglingReferenceError(JdlSemanticError):
    """A relationship endpoint names an entity that was never declared."""

    def __init__(self, relationship, missing):
        super().__init__(
            f"Relationship {relationship} references unknown entity '{missing}'."
        )
        self.relationship = relationship
        self.missing = missing


class DanglingReferenceWarning(UserWarning):
    """Non-fatal counterpart of DanglingReferenceError."""

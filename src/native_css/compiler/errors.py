"""Compiler error types."""


class CompileError(Exception):
    """Base class for fatal compile errors."""


class AnimationValueError(CompileError):
    """Raised when a keyframe value is a structured object instead of a primitive."""

    def __init__(self, keyframes: str, property: str, value: object) -> None:
        self.keyframes = keyframes
        self.property = property
        self.value = value
        super().__init__(
            f"@keyframes {keyframes}: animated property {property!r} resolved to "
            f"a structured value {value!r}; only primitive values can be animated"
        )


class StylesheetParseError(CompileError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)

"""Errors raised by the sequence record codec."""


class SeqError(Exception):
    """Base error for this package."""


class ParseError(SeqError):
    """Raised when record text cannot be parsed."""


class FormatError(ParseError):
    """Raised when a line breaks the fixed column layout."""

    def __init__(self, line: str) -> None:
        super().__init__(f"format: {line!r}")
        self.line = line


class NumericParseError(ParseError):
    """Raised when an offset or term token is not a base-10 integer."""

    def __init__(self, token: str, what: str = "value") -> None:
        super().__init__(f"invalid {what}: {token!r}")
        self.token = token


class OffsetArityError(ParseError):
    """Raised when an offset line does not hold exactly two values."""

    def __init__(self, content: str) -> None:
        super().__init__(f"invalid offset: {content!r}")
        self.content = content


class UnknownTagError(ParseError):
    """Raised when a keyword token is not in the closed vocabulary."""

    def __init__(self, token: str) -> None:
        super().__init__(f"invalid keyword: {token!r}")
        self.token = token


class ValidationError(SeqError):
    """Raised when a parsed record breaks the required-field contract."""


class MissingFieldError(ValidationError):
    def __init__(self, code: str) -> None:
        super().__init__(f"missing required field: {code}")
        self.code = code


class InvalidIdentityError(ValidationError):
    def __init__(self, identity: str) -> None:
        super().__init__(f"invalid identity: {identity!r}")
        self.identity = identity


class MissingContentError(ValidationError):
    def __init__(self, field: str) -> None:
        super().__init__(f"missing {field}")
        self.field = field


class UnsupportedFieldCodeError(SeqError):
    """Raised when a field code has no slot in the record."""

    def __init__(self, code: str) -> None:
        super().__init__(f"invalid field code: {code!r}")
        self.code = code

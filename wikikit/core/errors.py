"""
Error types raised by WikiKit.

Every failure maps to exactly one ErrorKind. Each error carries a technical
message (str(error), meant for logs) and a separate user_message meant for
display to end users.
"""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    ARTICLE_NOT_FOUND = "article_not_found"
    NETWORK_ERROR = "network_error"
    INVALID_QUERY = "invalid_query"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    INVALID_LANGUAGE = "invalid_language"
    PARSE_ERROR = "parse_error"


USER_MESSAGES = {
    ErrorKind.ARTICLE_NOT_FOUND: "Article not found. Try checking the spelling or searching for a similar topic.",
    ErrorKind.NETWORK_ERROR: "Unable to connect to Wikipedia. Please check your internet connection.",
    ErrorKind.INVALID_QUERY: "Please enter a valid search term.",
    ErrorKind.RATE_LIMITED: "Too many requests. Please wait a moment and try again.",
    ErrorKind.SERVER_ERROR: "Wikipedia is temporarily unavailable. Please try again later.",
    ErrorKind.INVALID_LANGUAGE: "This language is not supported.",
    ErrorKind.PARSE_ERROR: "Unable to process the response from Wikipedia.",
}


class WikipediaError(Exception):
    """
    Base class for all WikiKit errors.
    """
    kind: ErrorKind

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(self.technical_message)

    @property
    def technical_message(self) -> str:
        return self.detail

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


class ArticleNotFound(WikipediaError):
    kind = ErrorKind.ARTICLE_NOT_FOUND

    def __init__(self, title: str):
        self.title = title
        super().__init__(title)

    @property
    def technical_message(self) -> str:
        return f"Article '{self.title}' not found"


class NetworkError(WikipediaError):
    """
    Transport failure or unexpected HTTP status.

    status is set when the server answered; it is None when no response
    was received at all (connection failure, timeout).
    """
    kind = ErrorKind.NETWORK_ERROR

    def __init__(self, detail: str, status: Optional[int] = None):
        self.status = status
        super().__init__(detail)

    @property
    def technical_message(self) -> str:
        return f"Network error: {self.detail}"

    @property
    def is_not_found(self) -> bool:
        return self.status == 404


class InvalidQuery(WikipediaError):
    kind = ErrorKind.INVALID_QUERY

    @property
    def technical_message(self) -> str:
        return f"Invalid search query: '{self.detail}'"


class RateLimited(WikipediaError):
    kind = ErrorKind.RATE_LIMITED

    def __init__(self, status: Optional[int] = None):
        self.status = status
        super().__init__("" if status is None else f"HTTP {status}")

    @property
    def technical_message(self) -> str:
        return "Rate limited - please try again later"


class ServerError(WikipediaError):
    kind = ErrorKind.SERVER_ERROR

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}")

    @property
    def technical_message(self) -> str:
        return f"Wikipedia server error: {self.status_code}"


class InvalidLanguage(WikipediaError):
    kind = ErrorKind.INVALID_LANGUAGE

    def __init__(self, code: str):
        self.code = code
        super().__init__(code)

    @property
    def technical_message(self) -> str:
        return f"Unsupported language: {self.code}"


class ParseError(WikipediaError):
    kind = ErrorKind.PARSE_ERROR

    @property
    def technical_message(self) -> str:
        return f"Failed to parse response: {self.detail}"

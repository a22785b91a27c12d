from fastapi import HTTPException


class ChatAPIException(HTTPException):
    """Base for errors rendered to the browser as {"error": detail}."""


class InvalidBodyException(ChatAPIException):
    def __init__(self, detail: str = "Invalid request: body must be a JSON object"):
        super().__init__(status_code=400, detail=detail)

class InvalidMessageException(ChatAPIException):
    def __init__(self, detail: str = "Invalid request: message is required"):
        super().__init__(status_code=400, detail=detail)

class MessageTooLongException(ChatAPIException):
    def __init__(self, limit: int = 4000):
        super().__init__(status_code=400, detail=f"Message too long. Maximum {limit} characters.")

class RateLimitedException(ChatAPIException):
    def __init__(self, detail: str = "Too many requests. Please wait a moment."):
        super().__init__(status_code=429, detail=detail)

class UpstreamFailedException(ChatAPIException):
    def __init__(self, detail: str = "AI service temporarily unavailable"):
        super().__init__(status_code=500, detail=detail)

class UnexpectedErrorException(ChatAPIException):
    def __init__(self, detail: str = "An unexpected error occurred"):
        super().__init__(status_code=500, detail=detail)

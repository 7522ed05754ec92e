class AppException(Exception):
    """Base exception for all jirakit errors."""

    def __init__(self, message: str = "A jirakit error occurred"):
        self.message = message
        super().__init__(self.message)

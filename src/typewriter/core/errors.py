class TypewriterError(Exception):
    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.args[0]} (caused by: {self.cause})"
        return str(self.args[0])


class ConfigurationError(TypewriterError):
    pass


class RedefinitionError(TypewriterError):
    def __init__(
        self,
        message: str,
        keypath: str,
        original_batch: int,
        conflicting_batch: int,
        field_name: str,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.keypath = keypath
        self.original_batch = original_batch
        self.conflicting_batch = conflicting_batch
        self.field_name = field_name

class SnsToSlackError(Exception):
    def __init__(self, message: str, stage: str = "") -> None:
        super().__init__(message)
        self.stage = stage


class DecodeError(SnsToSlackError):
    def __init__(self, message: str) -> None:
        super().__init__(message, stage="Decode")


class ConfigurationError(SnsToSlackError):
    def __init__(self, message: str, stage: str = "LoadSecret") -> None:
        super().__init__(message, stage=stage)


class SecretFetchError(SnsToSlackError):
    def __init__(self, message: str, secret_name: str = "") -> None:
        super().__init__(message, stage="LoadSecret")
        self.secret_name = secret_name


class MalformedMessageError(SnsToSlackError):
    def __init__(self, message: str) -> None:
        super().__init__(message, stage="RenderBlocks")


class DeliveryError(SnsToSlackError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, stage="Deliver")
        self.status_code = status_code

class YelpAIError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        raw: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.raw = raw
        super().__init__(message)


class MissingCredentialError(YelpAIError):
    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"Missing {env_var}")


class YelpFusionError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")

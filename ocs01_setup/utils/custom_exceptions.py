class BaseSetupError(Exception):
    def __init__(self, message: str, hints: list[str] | None = None):
        super().__init__(message)
        self.message = message
        self.hints = hints or []


class MissingPrerequisiteError(BaseSetupError):
    pass


class UserInputError(BaseSetupError):
    pass


class SetupCancelledError(BaseSetupError):
    pass


class ExternalCommandError(BaseSetupError):
    pass


class RepositoryStructureError(BaseSetupError):
    pass


class ConfigError(BaseSetupError):
    def __init__(self, reason: str):
        super().__init__(f"Failed to load settings: {reason}")

class SwitchboardError(Exception):
    pass


class ConfigError(SwitchboardError):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"invalid config {path}: {reason}")

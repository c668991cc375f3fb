from typing import List, Optional


class ConfigError(ValueError):
    """Base exception for generator configuration errors."""
    pass


class UnknownConfigKeyError(ConfigError):
    """Exception for keys the configuration does not recognize."""

    def __init__(self, section: str, key: str, valid_keys: List[str], suggestion: Optional[str] = None):
        self.section = section
        self.key = key
        self.valid_keys = valid_keys
        self.suggestion = suggestion
        message = f"Unknown key '{key}' in section '{section}'"
        if suggestion:
            message += f". Did you mean '{suggestion}'?"
        message += f"\nValid keys: {', '.join(valid_keys)}"
        super().__init__(message)

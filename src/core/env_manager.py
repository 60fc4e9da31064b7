import os
from typing import Optional


class EnvManager:
    """Read configuration values from the process environment."""

    @staticmethod
    def get_env_variable(name: str, default: Optional[str] = None) -> str:
        """Return the variable's value, falling back to ``default``."""
        value = os.getenv(name, default)
        if value is None:
            raise ValueError(f"Environment variable '{name}' is not set")
        return value

    @staticmethod
    def get_env_float(name: str, default: float) -> float:
        value = os.getenv(name)
        if value is None or value == "":
            return default
        try:
            return float(value)
        except ValueError as e:
            raise ValueError(
                f"Environment variable '{name}' must be a number, got {value!r}"
            ) from e

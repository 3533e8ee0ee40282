import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls) -> 'Settings':
        """
        read the settings from the process environment, with NUMTOWER_LOG_LEVEL overriding the default log level
        """
        return cls(log_level=os.getenv('NUMTOWER_LOG_LEVEL', cls.log_level))

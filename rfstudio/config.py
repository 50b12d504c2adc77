"""Runtime settings read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from rfstudio.components import E_SERIES


@dataclass(frozen=True)
class Settings:
    """Library-wide defaults."""

    # Preferred-value series used for BOM suggestions
    e_series: str = 'E24'

    def __post_init__(self):
        if self.e_series not in E_SERIES:
            raise ValueError(
                f"Unknown series '{self.e_series}'. Must be one of: {list(E_SERIES)}"
            )


def load_settings() -> Settings:
    """Build Settings from RFSTUDIO_* environment variables."""
    load_dotenv()
    return Settings(
        e_series=os.getenv('RFSTUDIO_E_SERIES', Settings.e_series).upper(),
    )

"""Package settings and configuration."""

from __future__ import annotations

from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated, Literal

from loguru import logger
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

OutputVerify = Literal["exception", "ignore", "fix", "silentfix", "warn"]


class Settings(BaseSettings):
    """
    Configuration of the FITS input/output.

    Settings can be configured via:

    1. Environment variables (e.g., RAWIMAGE_OVERWRITE=false)
    2. .env file in the project root
    3. Default values defined below

    All settings use the RAWIMAGE_ prefix for environment variables.

    .. rubric:: Examples

    Refuse to replace existing files, write checksums and log every call::

        export RAWIMAGE_OVERWRITE=false
        export RAWIMAGE_CHECKSUM=true
        export RAWIMAGE_VERBOSE=true
    """

    overwrite: Annotated[
        bool,
        Field(
            default=True,
            description="If True, an existing file at the output path is replaced.",
        ),
    ]

    checksum: Annotated[
        bool,
        Field(
            default=False,
            description="If True, CHECKSUM and DATASUM cards are written to the header.",
        ),
    ]

    output_verify: Annotated[
        OutputVerify,
        Field(
            default="exception",
            description="Verification applied by astropy before writing a file.",
        ),
    ]

    verbose: Annotated[
        bool,
        Field(
            default=False,
            description="If True, every logged railway call is logged with its arguments.",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="RAWIMAGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="forbid",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def package_version(self) -> str:
        """
        Get the package version from package metadata.

        :return: The package version from pyproject.toml.
                 Falls back to "0.0.0" if the package is not installed.
        """
        try:
            return version("rawimage")
        except PackageNotFoundError:
            logger.warning("Could not determine package version, using fallback '0.0.0'")
            return "0.0.0"

    def log_startup_config(self) -> None:
        """Log the configuration in a readable format."""
        logger.info("=" * 60)
        logger.info("rawimage configuration:")
        logger.info(f"  Version: {self.package_version}")
        logger.info(f"  Overwrite existing files: {self.overwrite}")
        logger.info(f"  Write checksums: {self.checksum}")
        logger.info(f"  Output verification: {self.output_verify}")
        logger.info(f"  Verbose logging: {self.verbose}")
        logger.info("=" * 60)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    The configuration is logged once, when the settings are first loaded.

    :return: The settings instance.
    """
    settings = Settings()  # type: ignore
    settings.log_startup_config()
    return settings

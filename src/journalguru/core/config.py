"""Configuration management for Journal Guru.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the JOURNALGURU_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (JOURNALGURU_* prefix)
2. .env file in the project root
3. Default values defined in JournalGuruConfig

The Anthropic credential is the one exception to the prefix rule: it is read
from ``JOURNALGURU_ANTHROPIC_API_KEY`` or, failing that, from the conventional
``ANTHROPIC_API_KEY`` variable used by the Anthropic SDK.

Example .env file:
    ANTHROPIC_API_KEY=sk-ant-...
    JOURNALGURU_MODEL_ID=claude-sonnet-4-20250514
    JOURNALGURU_MAX_TOKENS=2048
    JOURNALGURU_SERVER_PORT=7860

Mock Mode
---------
When no credential is configured the application does not fail.  The
generation endpoint switches to mock mode and fabricates a deterministic
response locally after ``mock_delay_seconds``.  See :attr:`JournalGuruConfig.mock_mode`.

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
The API factory and the Gradio UI accept an explicit instance instead, so
tests can force mock mode or supply a fake credential deterministically.

Usage Example
-------------
    from journalguru.core.config import config

    print(config.model_id)
    print(config.mock_mode)
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from journalguru.core.models import DEFAULT_FIELD_NAMES


class JournalGuruConfig(BaseSettings):
    """Main configuration for Journal Guru.

    Attributes
    ----------
    Text Generation Settings:
        anthropic_api_key : str | None
            Credential for the hosted text-generation service.  ``None`` or
            blank selects mock mode.
        model_id : str
            Model identifier sent with every generation request
        max_tokens : int
            Output-length budget for a single generation
        include_output_directive : bool
            Append the "prompts only" output directive to generator-facing
            instruction strings

    Mock Mode Settings:
        mock_delay_seconds : float
            Artificial latency before a mock response is returned

    Request Settings:
        field_names : dict[str, str]
            Mapping of PromptRequest role -> JSON field name accepted by the
            generation endpoint

    UI Settings:
        copy_indicator_seconds : float
            How long the "Copied!" indicator stays visible
        ui_path : str
            Path the Gradio UI is mounted at

    Server Settings:
        server_host : str
            Server bind address (0.0.0.0 for local network)
        server_port : int
            Server port (1024-65535)
        log_level : str
            Root logging level for the CLI entry point

    Examples
    --------
    Force mock mode with no delay:

        >>> cfg = JournalGuruConfig(anthropic_api_key=None, mock_delay_seconds=0)
        >>> cfg.mock_mode
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JOURNALGURU_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Text generation settings
    anthropic_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices(
            "anthropic_api_key",
            "JOURNALGURU_ANTHROPIC_API_KEY",
            "ANTHROPIC_API_KEY",
        ),
        description="Anthropic API key; absence selects mock mode",
    )
    model_id: str = Field(
        default="claude-sonnet-4-20250514",
        description="Model identifier for prompt generation",
    )
    max_tokens: int = Field(
        default=2048,
        description="Maximum number of generated tokens",
        ge=1,
        le=8192,
    )
    include_output_directive: bool = Field(
        default=True,
        description="Append the prompts-only output directive for the generator",
    )

    # Mock mode settings
    mock_delay_seconds: float = Field(
        default=1.5,
        description="Artificial delay before a mock response is returned",
        ge=0.0,
    )

    # Request settings
    field_names: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_FIELD_NAMES),
        description="PromptRequest role -> JSON field name",
    )

    # UI settings
    copy_indicator_seconds: float = Field(
        default=2.0,
        description="Seconds the copied indicator stays visible",
        ge=0.0,
    )
    ui_path: str = Field(
        default="/ui",
        description="Mount path of the Gradio UI",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )

    @property
    def mock_mode(self) -> bool:
        """True when no usable credential is configured."""
        return not (self.anthropic_api_key and self.anthropic_api_key.strip())


# Global configuration instance
# Loads values from environment variables (JOURNALGURU_* prefix) and .env file.
config = JournalGuruConfig()

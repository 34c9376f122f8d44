"""Configuration and logging setup for codebase-query."""

import os
import sys
from pathlib import Path
from typing import Literal, Optional

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from codebase_query.embedding.models import EmbeddingModel
from codebase_query.embedding.ollama_provider import OLLAMA_EMBEDDINGS_URL
from codebase_query.embedding.openai_provider import OPENAI_EMBEDDINGS_URL

DATA_DIR_NAME = ".codebase-query"
LOG_FILENAME = "codebase-query.log"

Environment = Literal["test", "dev", "user"]


class CodebaseQueryConfig(BaseSettings):
    """Settings for embedding providers, excerpt search and logging.

    Values come from ``CODEBASE_QUERY_*`` environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEBASE_QUERY_",
        extra="ignore",
    )

    env: Environment = Field(default="dev", description="Environment name")

    embedding_model: EmbeddingModel = Field(
        default=EmbeddingModel.OLLAMA_NOMIC_EMBED_TEXT,
        description="Embedding model; also selects the provider that serves it",
    )
    ollama_url: str = Field(
        default=OLLAMA_EMBEDDINGS_URL, description="Ollama embeddings endpoint"
    )
    openai_url: str = Field(
        default=OPENAI_EMBEDDINGS_URL, description="OpenAI embeddings endpoint"
    )
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key. Falls back to OPENAI_API_KEY when unset.",
    )
    request_timeout: float = Field(
        default=30.0, gt=0, description="Timeout in seconds for embedding requests"
    )

    search_limit: int = Field(
        default=10, ge=1, description="Maximum number of hits requested from the index"
    )
    project_index: Optional[str] = Field(
        default=None,
        description="Import string 'module:attribute' of a factory returning the project index",
    )

    log_level: str = Field(default="INFO", description="Log level for loguru sinks")
    log_dir: Path = Field(
        default_factory=lambda: Path.home() / DATA_DIR_NAME,
        description="Directory for log files",
    )

    @property
    def is_test_env(self) -> bool:
        return self.env == "test" or os.getenv("PYTEST_CURRENT_TEST") is not None


class ConfigManager:
    """Loads and caches the process configuration."""

    _config: Optional[CodebaseQueryConfig] = None

    @property
    def config(self) -> CodebaseQueryConfig:
        if ConfigManager._config is None:
            ConfigManager._config = CodebaseQueryConfig()
        return ConfigManager._config

    @classmethod
    def reset(cls) -> None:
        cls._config = None


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    console: bool = True,
) -> None:
    """Configure loguru sinks.

    Args:
        log_level: Minimum level for every sink
        log_file: Optional rotating log file
        console: Log to stderr
    """
    logger.remove()

    if console:
        logger.add(sys.stderr, level=log_level, backtrace=True, diagnose=True)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(log_file),
            level=log_level,
            rotation="10 MB",
            retention="10 days",
            backtrace=True,
            diagnose=True,
            enqueue=True,
        )


def init_cli_logging() -> None:
    """CLI logging: stderr only."""
    config = ConfigManager().config
    setup_logging(log_level=config.log_level, console=True)


def init_mcp_logging() -> None:
    """MCP logging: file only, the stdio transport owns stdout."""
    config = ConfigManager().config
    setup_logging(
        log_level=config.log_level,
        log_file=config.log_dir / LOG_FILENAME,
        console=False,
    )

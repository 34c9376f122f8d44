"""Composition root for the MCP entrypoint.

This module owns:
- Reading ConfigManager + environment variables
- Loading the project index collaborator
- Providing the filesystem used to load excerpts
- Initializing logging for MCP
"""

import importlib
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from codebase_query.config import CodebaseQueryConfig, ConfigManager, init_mcp_logging
from codebase_query.file_utils import Fs, LocalFs
from codebase_query.services.excerpt_service import ExcerptService, ProjectIndex


def load_project_index(import_string: str) -> ProjectIndex:
    """Build the project index named by a ``module:attribute`` import string.

    The attribute must be a zero-argument callable returning the index.
    """
    module_name, sep, attribute = import_string.partition(":")
    if not sep or not module_name or not attribute:
        raise ValueError(
            f"Invalid project index '{import_string}', expected 'module:attribute'"
        )

    module = importlib.import_module(module_name)
    factory = getattr(module, attribute)
    logger.info(f"Loading project index from {import_string}")
    return factory()


@dataclass
class MCPContainer:
    """Dependencies of the MCP tools.

    The container is built once at startup; tests build it directly with
    a stub index.
    """

    config: CodebaseQueryConfig
    project_index: ProjectIndex
    fs: Fs = field(default_factory=LocalFs)

    @classmethod
    def create(cls) -> "MCPContainer":
        """Build container from configuration.

        Logging is initialized first (MCP: file only, never stdout).

        Raises:
            RuntimeError: If no project index is configured
        """
        init_mcp_logging()
        config = ConfigManager().config

        if not config.project_index:
            raise RuntimeError(
                "No project index configured. Set CODEBASE_QUERY_PROJECT_INDEX "
                "to a 'module:attribute' factory."
            )

        return cls(config=config, project_index=load_project_index(config.project_index))

    def excerpt_service(self) -> ExcerptService:
        return ExcerptService(self.project_index, self.fs)


_container: Optional[MCPContainer] = None


def get_container() -> MCPContainer:
    if _container is None:
        raise RuntimeError("MCP container is not initialized")
    return _container


def set_container(container: Optional[MCPContainer]) -> None:
    global _container
    _container = container

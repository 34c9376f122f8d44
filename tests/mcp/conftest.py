"""Fixtures for MCP tool tests."""

import pytest

from codebase_query.file_utils import LocalFs
from codebase_query.mcp.container import MCPContainer, set_container


@pytest.fixture
def install_container(app_config):
    """Install an MCP container built around the given project index."""

    def _install(project_index) -> MCPContainer:
        container = MCPContainer(config=app_config, project_index=project_index, fs=LocalFs())
        set_container(container)
        return container

    yield _install
    set_container(None)

"""This module provides the tools available to the execution agent.

It includes:
- Web Search: For general web results using Tavily.
"""

from typing import Any, Callable, List, Optional

from langchain_community.tools.tavily_search import TavilySearchResults

from role_cooperation.configuration import Configuration


def create_tavily_tool(configuration: Optional[Configuration] = None):
    """Create the Tavily search tool.

    Requires the TAVILY_API_KEY environment variable.

    Args:
        configuration: Configuration to read the result limit from; defaults
            to the active run's configuration

    Returns:
        Configured TavilySearchResults tool
    """
    configuration = configuration or Configuration.from_context()
    return TavilySearchResults(max_results=configuration.max_search_results)


def create_tools(configuration: Optional[Configuration] = None) -> List[Callable[..., Any]]:
    """Return the list of tools handed to the execution agent."""
    return [create_tavily_tool(configuration)]

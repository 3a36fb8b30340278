"""Tool, resource and prompt modules and their registration on FastMCP.

Modules are plain values built by factory functions that inject
dependencies through closures, so middleware can wrap handlers before
anything is registered:

    def create_export_tool(config: FileServingConfig) -> ToolModule:
        async def export_text(filename: str, content: str) -> str:
            return write_file(content.encode(), filename, config).stored_name

        return ToolModule(name="export_text", description="Store text as a file", handler=export_text)
"""

from collections.abc import Callable, Iterable
from typing import Any

from fastmcp import FastMCP
from pydantic import BaseModel, Field


class ToolModule(BaseModel):
    """A tool and its registration metadata."""

    name: str = Field(..., description="Tool name")
    handler: Callable[..., Any] = Field(..., description="Tool function; its signature defines the input schema")
    title: str | None = Field(None, description="Display title")
    description: str | None = Field(None, description="Tool description (defaults to the handler docstring)")
    tags: set[str] = Field(default_factory=set, description="Tags for filtering")
    annotations: dict[str, Any] | None = Field(None, description="MCP tool annotations")


class ResourceModule(BaseModel):
    """A resource (or resource template when the URI has {params})."""

    name: str = Field(..., description="Resource name")
    handler: Callable[..., Any] = Field(..., description="Resource function")
    uri: str | None = Field(None, description="Resource URI or URI template")
    description: str | None = Field(None, description="Resource description")
    mime_type: str | None = Field(None, description="MIME type of the resource content")


class PromptModule(BaseModel):
    """A prompt and its registration metadata."""

    name: str = Field(..., description="Prompt name")
    handler: Callable[..., Any] = Field(..., description="Prompt function")
    description: str | None = Field(None, description="Prompt description")


def register_tools(server: FastMCP, tools: Iterable[ToolModule]) -> None:
    for tool in tools:
        server.tool(
            name=tool.name,
            title=tool.title,
            description=tool.description,
            tags=tool.tags or None,
            annotations=tool.annotations,
        )(tool.handler)


def register_resources(server: FastMCP, resources: Iterable[ResourceModule]) -> None:
    """Register resources; every module needs a URI."""
    for resource in resources:
        if not resource.uri:
            raise ValueError(f'Resource "{resource.name}" must have a template')
        server.resource(
            resource.uri,
            name=resource.name,
            description=resource.description,
            mime_type=resource.mime_type,
        )(resource.handler)


def register_prompts(server: FastMCP, prompts: Iterable[PromptModule]) -> None:
    for prompt in prompts:
        server.prompt(name=prompt.name, description=prompt.description)(prompt.handler)

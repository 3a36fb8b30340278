"""Ordered application of middleware layers to module collections."""

from collections.abc import Callable, Sequence

from pydantic import BaseModel, Field

from ..register_modules import PromptModule, ResourceModule, ToolModule


class MiddlewareLayer(BaseModel):
    """Wrappers for the module kinds a layer cares about; missing ones pass through."""

    with_tool: Callable[[ToolModule], ToolModule] | None = None
    with_resource: Callable[[ResourceModule], ResourceModule] | None = None
    with_prompt: Callable[[PromptModule], PromptModule] | None = None


class ModuleCollections(BaseModel):
    tools: list[ToolModule] = Field(default_factory=list)
    resources: list[ResourceModule] = Field(default_factory=list)
    prompts: list[PromptModule] = Field(default_factory=list)


def compose_middleware(modules: ModuleCollections, layers: Sequence[MiddlewareLayer]) -> ModuleCollections:
    """Apply ``layers`` in order; the first layer wraps innermost."""
    for layer in layers:
        modules = ModuleCollections(
            tools=[layer.with_tool(t) for t in modules.tools] if layer.with_tool else modules.tools,
            resources=[layer.with_resource(r) for r in modules.resources] if layer.with_resource else modules.resources,
            prompts=[layer.with_prompt(p) for p in modules.prompts] if layer.with_prompt else modules.prompts,
        )
    return modules

"""
Skill System
============
A skill is a named, typed async tool an agent can call.

Usage:
    skill = create_skill(
        name="signalgate-sentiment",
        description="...",
        input_model=SentimentQuery,
        output_model=SentimentResult,
        execute=fetch,
    )

    registry = SkillRegistry()
    registry.register(skill)
    tools = registry.get_tool_schemas()          # hand these to the LLM

    result = await registry.execute_tool("signalgate-sentiment", {"ticker": "BTC"})
"""

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Type

from pydantic import BaseModel

logger = logging.getLogger("SkillLoader")


@dataclass(frozen=True)
class Skill:
    name: str
    description: str
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]
    execute: Callable[[BaseModel], Awaitable[Any]]

    def tool_schema(self) -> Dict[str, Any]:
        """OpenAI function-tool schema."""
        parameters = self.input_model.model_json_schema()
        parameters.pop("title", None)
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": parameters,
            },
        }

    def output_schema(self) -> Dict[str, Any]:
        return self.output_model.model_json_schema()

    async def invoke(self, args: Dict[str, Any]) -> Dict[str, Any]:
        """Validate args, run the skill, validate what it returned."""
        params = self.input_model.model_validate(args)
        raw = await self.execute(params)
        if isinstance(raw, self.output_model):
            output = raw
        elif isinstance(raw, BaseModel):
            output = self.output_model.model_validate(raw.model_dump())
        else:
            output = self.output_model.model_validate(raw)
        return output.model_dump(exclude_none=True)


def create_skill(name, description, input_model, output_model, execute) -> Skill:
    if not name:
        raise ValueError("Skill name is required")
    return Skill(
        name=name,
        description=description,
        input_model=input_model,
        output_model=output_model,
        execute=execute,
    )


class SkillRegistry:
    def __init__(self, skills=None):
        self.skills: Dict[str, Skill] = {}
        for skill in skills or []:
            self.register(skill)

    def register(self, skill: Skill) -> Skill:
        if skill.name in self.skills:
            logger.warning(f"Replacing already registered skill: {skill.name}")
        self.skills[skill.name] = skill
        logger.debug(f"  🔧 Registered tool: {skill.name}")
        return skill

    def get(self, name: str) -> Skill:
        if name not in self.skills:
            raise KeyError(f"Tool '{name}' not found.")
        return self.skills[name]

    def get_tool_schemas(self) -> List[Dict[str, Any]]:
        return [skill.tool_schema() for skill in self.skills.values()]

    async def execute_tool(self, tool_name: str, args: Dict[str, Any]) -> Dict[str, Any]:
        skill = self.get(tool_name)
        logger.info(f"🛠️ Executing skill: {tool_name}({args})")
        return await skill.invoke(args)

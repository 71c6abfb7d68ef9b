"""
Prompt definitions for AI CLI Tool.

Each supported task owns a fixed system prompt and user prompt template.
"""

from .registry import (
    DEFAULT_TARGET_LANGUAGE,
    TaskKind,
    TaskPrompt,
    get_all_task_prompts,
    get_task_prompt,
)

__all__ = [
    "DEFAULT_TARGET_LANGUAGE",
    "TaskKind",
    "TaskPrompt",
    "get_all_task_prompts",
    "get_task_prompt",
]

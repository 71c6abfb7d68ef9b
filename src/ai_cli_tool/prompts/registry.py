"""
Task prompt registry for AI CLI Tool.

Every task the CLI offers maps to one fixed prompt pair: a system prompt
describing the assistant's job and a user prompt template the input text
is interpolated into. Model and temperature are part of the record so that
a task fully describes the request it produces.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List
import logging

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.8
DEFAULT_TARGET_LANGUAGE = "en"


class TaskKind(Enum):
    """Tasks supported by the CLI."""
    SUMMARIZE = "summarize"
    TRANSLATE = "translate"
    SENTIMENT_ANALYSIS = "sentiment-analysis"


@dataclass(frozen=True)
class TaskPrompt:
    """A fixed prompt pair with the generation parameters for one task."""
    kind: TaskKind
    label: str
    system_prompt: str
    user_template: str
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE

    def render_user_prompt(self, text: str, language: str = DEFAULT_TARGET_LANGUAGE) -> str:
        """Render the user prompt.

        Args:
            text: Input text supplied on the command line
            language: Target language code, only used by templates that ask for it

        Returns:
            Rendered user prompt
        """
        return self.user_template.format(text=text, language=language)


_TASK_PROMPTS: Dict[TaskKind, TaskPrompt] = {
    TaskKind.SUMMARIZE: TaskPrompt(
        kind=TaskKind.SUMMARIZE,
        label="Summary",
        system_prompt=(
            "You are a helpful assistant that summarizes text, "
            "make it very easy to understand and make it concise."
        ),
        user_template="Please summarize the following text: {text}",
    ),
    TaskKind.TRANSLATE: TaskPrompt(
        kind=TaskKind.TRANSLATE,
        label="translation",
        system_prompt=(
            "You are a helpful assistant that translates text, "
            "make the translation completely accurate and maintain the meaning "
            "of the original text in the original language."
        ),
        user_template="Please translate the following text: {text} to {language}",
    ),
    TaskKind.SENTIMENT_ANALYSIS: TaskPrompt(
        kind=TaskKind.SENTIMENT_ANALYSIS,
        label="Sentiment Analysis",
        system_prompt=(
            "You are a helpful assistant that does sentiment analysis on text, "
            "analyze the sentiment/feelings behind this text with accuracy "
            "and give a detailed summary of your analysis"
        ),
        user_template="Please analyze the following text: {text}",
    ),
}


def get_task_prompt(kind: TaskKind) -> TaskPrompt:
    """Get the prompt record for a task."""
    return _TASK_PROMPTS[kind]


def get_all_task_prompts() -> List[TaskPrompt]:
    """Get the prompt records for every task, in declaration order."""
    return [_TASK_PROMPTS[kind] for kind in TaskKind]

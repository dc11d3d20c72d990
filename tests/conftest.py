"""Shared fixtures for moho application tests."""

from typing import Dict, List, Optional

import pytest


class ScriptedPrompter:
    """Answers prompts from a label -> answer mapping, recording every ask."""

    def __init__(self, answers: Optional[Dict[str, str]] = None):
        self.answers = answers or {}
        self.asked: List[tuple] = []

    def ask(self, label: str, default: Optional[str] = None) -> str:
        self.asked.append((label, default))
        for key, answer in self.answers.items():
            if key in label:
                return answer.strip()
        return (default or "").strip()


class ScriptedEditor:
    """Returns queued texts in order, recording each seed."""

    def __init__(self, *texts: str):
        self.texts = list(texts)
        self.seeds: List[str] = []

    def edit(self, seed: str) -> str:
        self.seeds.append(seed)
        return self.texts.pop(0)


@pytest.fixture
def prompter_factory():
    return ScriptedPrompter


@pytest.fixture
def editor_factory():
    return ScriptedEditor

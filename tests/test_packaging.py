"""Tests for the declared install requirements."""

import ast
from pathlib import Path

SETUP_PY = Path(__file__).resolve().parents[1] / "setup.py"


def install_requires() -> list[str]:
    tree = ast.parse(SETUP_PY.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.keyword) and node.arg == "install_requires":
            return [ast.literal_eval(element) for element in node.value.elts]
    raise AssertionError("setup.py declares no install_requires")


def test_openai_client_comes_through_langchain_openai():
    requirements = [requirement.split(">=")[0] for requirement in install_requires()]

    assert "openai" not in requirements
    assert "langchain-openai" in requirements

"""Shared test fixtures for gradlesync tests."""

from __future__ import annotations

import pytest

from gradlesync.contracts.configuration import DependencyConfiguration
from gradlesync.contracts.model import BuildModel, Dependency
from gradlesync.model.loader import ModelLoader
from tests.fakes.script_editor import FakeScriptEditor
from tests.fixtures import BUILD_SCRIPT, EFFECTIVE_XML


@pytest.fixture
def editor() -> FakeScriptEditor:
    return FakeScriptEditor()


@pytest.fixture
def loader(editor: FakeScriptEditor) -> ModelLoader:
    return ModelLoader(editor)


@pytest.fixture
def script() -> str:
    return BUILD_SCRIPT


@pytest.fixture
def loaded_model(loader: ModelLoader, script: str) -> BuildModel:
    """Model loaded from the sample script and effective build XML."""
    return loader.load(script, EFFECTIVE_XML)


@pytest.fixture
def guava() -> Dependency:
    return Dependency(
        group="com.google.guava",
        name="guava",
        version="18.0",
        configuration=DependencyConfiguration.COMPILE,
    )

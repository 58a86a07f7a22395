"""Shared pytest fixtures for HideField tests."""
import logging
from pathlib import Path
from typing import Any, Dict, List

import pytest
import yaml

from hidefield.core.logging import Logger, LogLevel, set_global_logger
from hidefield.schema.loader import schema_from_dict
from hidefield.schema.model import Attribute, AttributeArg, Field, Literal, Schema


class RecordingHandler(logging.Handler):
    """Logging handler that keeps every record it receives."""

    def __init__(self):
        super().__init__()
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def messages(self, level: int = logging.DEBUG) -> List[str]:
        return [r.getMessage() for r in self.records if r.levelno >= level]

    def warnings(self) -> List[str]:
        return [r.getMessage() for r in self.records if r.levelno == logging.WARNING]


@pytest.fixture
def log_handler() -> RecordingHandler:
    """A handler collecting log records."""
    return RecordingHandler()


@pytest.fixture
def logger(log_handler: RecordingHandler) -> Logger:
    """A debug-level logger writing only to ``log_handler``."""
    return Logger(name="hidefield.test", level=LogLevel.DEBUG, handlers=[log_handler])


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset the global logger and HIDEFIELD_* variables between tests."""
    import os

    for key in list(os.environ):
        if key.startswith("HIDEFIELD_"):
            monkeypatch.delenv(key)
    yield
    set_global_logger(None)


def _make_field(
    name: str = "field",
    type_name: str = "String",
    is_relation: bool = False,
    attributes: List[Attribute] = None,
    comments: List[str] = None,
    model: str = "Model",
) -> Field:
    """Build a field directly, without going through a document."""
    return Field(
        name=name,
        type=type_name,
        model=model,
        is_relation=is_relation,
        attributes=attributes or [],
        comments=comments or [],
    )


def _attribute(name: str, **flags: Any) -> Attribute:
    return Attribute(
        name=name,
        args=[AttributeArg(key, Literal.from_value(value)) for key, value in flags.items()],
    )


@pytest.fixture
def make_field():
    """Factory building a field directly, without going through a document."""
    return _make_field


@pytest.fixture
def attribute():
    """Factory building an attribute invocation from keyword flags."""
    return _attribute


@pytest.fixture
def show():
    """Factory for @graphql.show(...) invocations."""
    return lambda **flags: _attribute("graphql.show", **flags)


@pytest.fixture
def hide():
    """Factory for @graphql.hide(...) invocations."""
    return lambda **flags: _attribute("graphql.hide", **flags)


@pytest.fixture
def sample_schema_data() -> Dict[str, Any]:
    """A schema document covering every attribute form."""
    return {
        "enums": ["Role"],
        "models": [
            {
                "name": "Book",
                "fields": [
                    {"name": "id", "type": "String"},
                    {
                        "name": "author",
                        "type": "Author",
                        "attributes": ["@graphql.show(query: true)"],
                    },
                    {
                        "name": "stats",
                        "type": "Statistics?",
                        "attributes": ["@graphql.show(read: true)"],
                    },
                    {"name": "related", "type": "Book[]"},
                    {
                        "name": "price",
                        "type": "Float",
                        "attributes": ["@graphql.hide(create: true, update: true)"],
                    },
                    {
                        "name": "internalId",
                        "type": "String",
                        "attributes": ["@graphql.hide()"],
                    },
                    {"name": "tags", "type": "String[]"},
                ],
            },
            {
                "name": "Author",
                "fields": [
                    {"name": "name", "type": "String"},
                    {"name": "role", "type": "Role"},
                    {"name": "books", "type": "Book[]", "attributes": ["@graphql.show()"]},
                ],
            },
            {
                "name": "Statistics",
                "fields": [{"name": "views", "type": "Int"}],
            },
        ],
    }


@pytest.fixture
def sample_schema(sample_schema_data: Dict[str, Any]) -> Schema:
    return schema_from_dict(sample_schema_data)


@pytest.fixture
def schema_file(tmp_path: Path, sample_schema_data: Dict[str, Any]) -> Path:
    """Write the sample schema document to disk."""
    path = tmp_path / "schema.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(sample_schema_data, f, sort_keys=False)
    return path

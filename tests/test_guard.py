"""Tests for personal_data_hook/hook/guard.py."""
from __future__ import annotations

from uuid import uuid4

from personal_data_hook.hook.context import ChangeSet, Entity, ExecutionContext, MessageName
from personal_data_hook.hook.guard import should_proceed


def _context(*, depth: int = 1, target: object | None = None, logical_name: str = "personal_data") -> ExecutionContext:
    if target is None:
        target = Entity(logical_name=logical_name, attributes=ChangeSet({"phone": "1"}))
    return ExecutionContext(
        message_name=MessageName.CREATE,
        depth=depth,
        user_id=uuid4(),
        input_parameters={"Target": target},
    )


def test_top_level_personal_data_invocation_proceeds() -> None:
    assert should_proceed(_context()) is True


def test_entity_name_comparison_ignores_case() -> None:
    assert should_proceed(_context(logical_name="Personal_Data")) is True


def test_nested_invocation_is_skipped(caplog) -> None:
    with caplog.at_level("INFO", logger="personal_data_hook.hook.guard"):
        assert should_proceed(_context(depth=2)) is False
    assert "skipping to avoid recursion" in caplog.text


def test_missing_target_is_skipped() -> None:
    context = ExecutionContext(message_name=MessageName.UPDATE, depth=1)

    assert should_proceed(context) is False


def test_target_that_is_not_an_entity_is_skipped() -> None:
    assert should_proceed(_context(target={"phone": "1"})) is False


def test_other_entity_is_skipped() -> None:
    assert should_proceed(_context(logical_name="account")) is False

"""Tests for personal_data_hook/hook/plugin.py — the hook entry point."""
from __future__ import annotations

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from personal_data_hook.core.errors import DuplicateRecordError, HookExecutionError
from personal_data_hook.hook.context import ChangeSet, Entity, ExecutionContext, MessageName
from personal_data_hook.hook.plugin import PersonalDataValidationHook


TARGET_ID = uuid4()


@pytest.fixture()
def store() -> MagicMock:
    store = MagicMock()
    store.find_first.return_value = None
    return store


def _hook(store: MagicMock) -> tuple[PersonalDataValidationHook, MagicMock]:
    factory = MagicMock(return_value=store)
    return PersonalDataValidationHook(factory), factory


def _context(
    attributes: dict,
    *,
    message_name: str = MessageName.CREATE,
    depth: int = 1,
    pre_image: dict | None = None,
    logical_name: str = "personal_data",
) -> ExecutionContext:
    is_update = message_name == MessageName.UPDATE
    images = {}
    if pre_image is not None:
        images["PreImage"] = Entity(logical_name=logical_name, id=TARGET_ID, attributes=ChangeSet(pre_image))
    return ExecutionContext(
        message_name=message_name,
        depth=depth,
        user_id=uuid4(),
        primary_entity_id=TARGET_ID if is_update else None,
        input_parameters={"Target": Entity(logical_name=logical_name, attributes=ChangeSet(attributes))},
        pre_entity_images=images,
    )


def test_create_normalizes_phone_and_documents(store: MagicMock) -> None:
    hook, _ = _hook(store)
    context = _context({"phone": "(11) 98888-7777", "national_id": "123.456.789-00"})

    hook.execute(context)

    assert context.target.attributes.to_dict() == {"phone": "11988887777", "national_id": "12345678900"}
    store.find_first.assert_called_once()
    store.update.assert_not_called()


def test_nested_invocation_makes_no_store_calls(store: MagicMock) -> None:
    hook, factory = _hook(store)
    context = _context({"phone": "(11) 98888-7777"}, depth=2)

    hook.execute(context)

    factory.assert_not_called()
    assert context.target.attributes["phone"] == "(11) 98888-7777"


def test_other_entity_is_untouched(store: MagicMock) -> None:
    hook, factory = _hook(store)
    context = _context({"national_id": "123.456.789-00"}, logical_name="account")

    hook.execute(context)

    factory.assert_not_called()
    assert context.target.attributes["national_id"] == "123.456.789-00"


def test_fields_are_checked_in_order_and_stop_at_first_conflict(store: MagicMock) -> None:
    store.find_first.side_effect = [None, uuid4()]
    hook, _ = _hook(store)
    context = _context(
        {"name": "Ana"},
        message_name=MessageName.UPDATE,
        pre_image={"national_id": "123.456.789-00", "state_id": "12.345.678-9", "license_number": "999"},
    )

    with pytest.raises(DuplicateRecordError, match="a record with this stateID already exists"):
        hook.execute(context)

    assert [call.args[1] for call in store.find_first.call_args_list] == ["national_id", "state_id"]
    # the national ID backfill issued before the conflict is kept
    store.update.assert_called_once_with("personal_data", TARGET_ID, {"national_id": "12345678900"})


def test_update_with_all_fields_submitted_never_backfills(store: MagicMock) -> None:
    hook, _ = _hook(store)
    context = _context(
        {"national_id": "123.456.789-00", "state_id": "12.345.678-9", "license_number": "0123 4567 890"},
        message_name=MessageName.UPDATE,
        pre_image={"national_id": "x", "state_id": "y", "license_number": "z"},
    )

    hook.execute(context)

    assert store.find_first.call_count == 3
    store.update.assert_not_called()
    assert context.target.attributes.to_dict() == {
        "national_id": "12345678900",
        "state_id": "123456789",
        "license_number": "01234567890",
    }


def test_unexpected_failure_is_wrapped(store: MagicMock, caplog) -> None:
    store.find_first.side_effect = RuntimeError("store unavailable")
    hook, _ = _hook(store)

    with caplog.at_level("ERROR", logger="personal_data_hook.hook.plugin"):
        with pytest.raises(HookExecutionError) as exc_info:
            hook.execute(_context({"national_id": "123.456.789-00"}))

    assert not isinstance(exc_info.value, DuplicateRecordError)
    assert str(exc_info.value) == "error processing validations: store unavailable"
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert "Unexpected failure" in caplog.text


def test_business_rule_violation_is_not_wrapped(store: MagicMock) -> None:
    store.find_first.return_value = uuid4()
    hook, _ = _hook(store)

    with pytest.raises(DuplicateRecordError) as exc_info:
        hook.execute(_context({"license_number": "01234567890"}))

    assert str(exc_info.value) == "a record with this licenseNumber already exists"

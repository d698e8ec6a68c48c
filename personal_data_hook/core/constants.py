"""Fixed names shared by the validation hook and its host.

The governed record type and its attribute names are part of the storage
contract and are deliberately not exposed as settings.
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Record type and attributes
# ---------------------------------------------------------------------------

PERSONAL_DATA_ENTITY = "personal_data"
PERSONAL_DATA_ID_FIELD = "id"

PHONE_FIELD = "phone"
NATIONAL_ID_FIELD = "national_id"
STATE_ID_FIELD = "state_id"
LICENSE_NUMBER_FIELD = "license_number"

# ---------------------------------------------------------------------------
# Execution context keys
# ---------------------------------------------------------------------------

TARGET_PARAMETER = "Target"
PRE_IMAGE_NAME = "PreImage"

# Invocations nested deeper than this are skipped by the guard.
MAX_EXECUTION_DEPTH = 1

DUPLICATE_MESSAGE_TEMPLATE = "a record with this {label} already exists"
UNEXPECTED_ERROR_PREFIX = "error processing validations: "

import logging

from personal_data_hook.core.logging import PIISafeFilter


def test_pii_filter_redacts_documents_and_phone(caplog):
    logger = logging.getLogger("test.pii")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.pii"):
        logger.info("CPF 123.456.789-00 RG 12.345.678-9 phone (11) 98888-7777")

    assert "123.456.789-00" not in caplog.text
    assert "12.345.678-9" not in caplog.text
    assert "98888-7777" not in caplog.text
    assert "[REDACTED]" in caplog.text


def test_pii_filter_redacts_bare_document_numbers_in_args(caplog):
    logger = logging.getLogger("test.args")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.args"):
        logger.info("license %s normalized", "01234567890")

    assert "01234567890" not in caplog.text
    assert "license [REDACTED] normalized" in caplog.text


def test_pii_filter_redacts_raw_value_assignment(caplog):
    logger = logging.getLogger("test.raw")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.raw"):
        logger.info("processing raw_value=AB-XYZ for state ID")

    assert "AB-XYZ" not in caplog.text
    assert "raw_value=[REDACTED]" in caplog.text


def test_pii_filter_keeps_ordinary_messages(caplog):
    logger = logging.getLogger("test.plain")
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())

    with caplog.at_level(logging.INFO, logger="test.plain"):
        logger.info("Depth %d > %d: skipping to avoid recursion", 2, 1)

    assert "Depth 2 > 1: skipping to avoid recursion" in caplog.text

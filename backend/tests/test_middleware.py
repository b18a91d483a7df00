"""
ReliefHub Backend — Middleware Tests
======================================

What:  Tests for the access-log level mapping and request ID generation.
"""

import logging

from reliefhub.middleware.logging import level_for_status
from reliefhub.middleware.request_id import new_request_id


class TestLogLevels:

    def test_success_is_info(self):
        assert level_for_status(200) == logging.INFO
        assert level_for_status(201) == logging.INFO

    def test_client_error_is_warning(self):
        assert level_for_status(400) == logging.WARNING
        assert level_for_status(401) == logging.WARNING

    def test_server_error_is_error(self):
        assert level_for_status(500) == logging.ERROR


class TestRequestIds:

    def test_ids_are_short_and_unique(self):
        ids = {new_request_id() for _ in range(50)}
        assert len(ids) == 50
        assert all(len(rid) == 8 for rid in ids)

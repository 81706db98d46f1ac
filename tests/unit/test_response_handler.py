"""Tests for ResponseHandler."""
import pytest
from dataclasses import dataclass
from typing import Any, Dict
from unittest.mock import Mock

from netrequest.core.decoding import JSONDecoder
from netrequest.core.exceptions import DecodingError, HTTPResponseError, MissingDataError
from netrequest.core.request import ResponseHandler


@dataclass
class Item:
    id: int


class TestClassify:
    """Test suite for the status code table."""

    @pytest.mark.parametrize('status', [200, 201, 204, 299])
    def test_success(self, status):
        assert ResponseHandler.classify(status) is None

    def test_not_found(self):
        error = ResponseHandler.classify(404)

        assert error.status_code == 404
        assert error.message == "Route or resource not found"

    @pytest.mark.parametrize('status', [400, 402, 403, 405, 409, 422, 429, 499])
    def test_client_errors_without_message(self, status):
        error = ResponseHandler.classify(status)

        assert error.status_code == status
        assert error.message is None

    @pytest.mark.parametrize('status', [100, 301, 304, 401, 500, 502, 503])
    def test_other_codes(self, status):
        """Test 401, 1xx, 3xx and 5xx map to the catch-all error."""
        error = ResponseHandler.classify(status)

        assert error.status_code == status
        assert error.message == "Server not responding"


class TestHandle:
    """Test suite for ResponseHandler.handle."""

    @pytest.fixture
    def decoder(self):
        return JSONDecoder()

    def test_empty_body_decodes_as_object(self, decoder):
        """Test 204 with empty body decodes against {}."""
        result = ResponseHandler.handle(204, b'', decoder, Dict[str, Any])

        assert result == {}

    def test_decode_typed(self, decoder):
        result = ResponseHandler.handle(200, b'{"id":1}', decoder, Item)

        assert result == Item(id=1)

    def test_decode_mapping(self, decoder):
        result = ResponseHandler.handle(200, b'{"id":1}', decoder, Dict[str, int])

        assert result == {'id': 1}

    def test_missing_body(self, decoder):
        """Test absent body reference raises MissingDataError."""
        with pytest.raises(MissingDataError) as exc_info:
            ResponseHandler.handle(200, None, decoder, Item)

        assert exc_info.value.message == "Missing data"

    def test_error_status_raises(self, decoder):
        with pytest.raises(HTTPResponseError) as exc_info:
            ResponseHandler.handle(500, b'{"error": "boom"}', decoder)

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Server not responding"

    def test_error_status_skips_decoder(self):
        decoder = Mock()

        with pytest.raises(HTTPResponseError):
            ResponseHandler.handle(403, b'{}', decoder)

        decoder.decode.assert_not_called()

    def test_decode_error_propagates(self, decoder):
        with pytest.raises(DecodingError):
            ResponseHandler.handle(200, b'{"id": "one"}', decoder, Item)

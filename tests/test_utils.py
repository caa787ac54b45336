"""Tests for response, parser and logging utilities."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from osusearch.exceptions import ValidationError  # noqa: E402
from osusearch.utils.logging import (  # noqa: E402
    StructuredLogFormatter,
    clear_request_context,
    get_logger,
    set_request_context,
)
from osusearch.utils.parsers import query_params, require_param  # noqa: E402
from osusearch.utils.responses import proxy_response  # noqa: E402


class TestProxyResponse:
    """Tests for proxy_response."""

    def test_envelope_shape(self) -> None:
        response = proxy_response([{'id': '1'}])
        assert response == {
            'statusCode': 200,
            'headers': {'Access-Control-Allow-Origin': '*'},
            'body': '[{"id": "1"}]',
        }

    def test_empty_list(self) -> None:
        assert json.loads(proxy_response([])['body']) == []

    def test_headers_are_not_shared(self) -> None:
        first = proxy_response([])
        first['headers']['X-Extra'] = '1'
        assert 'X-Extra' not in proxy_response([])['headers']


class TestParsers:
    """Tests for query string helpers."""

    def test_query_params_handles_none(self) -> None:
        assert query_params({'queryStringParameters': None}) == {}

    def test_query_params_drops_null_values(self) -> None:
        event = {'queryStringParameters': {'q': 'x', 'page': None}}
        assert query_params(event) == {'q': 'x'}

    def test_require_param_returns_value_verbatim(self) -> None:
        assert require_param({'q': '  Kerr Admin '}, 'q') == '  Kerr Admin '

    def test_require_param_allows_empty_string(self) -> None:
        assert require_param({'q': ''}, 'q') == ''

    def test_require_param_missing(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            require_param({}, 'q')
        assert exc_info.value.field == 'q'


class TestStructuredLogging:
    """Tests for the JSON log formatter and context."""

    def _record(self, msg: str, level: int = logging.INFO, **extra) -> logging.LogRecord:
        record = logging.LogRecord('osusearch.test', level, __file__, 10, msg, None, None)
        if extra:
            record.extra = extra
        return record

    def teardown_method(self) -> None:
        clear_request_context()

    def test_formats_json(self) -> None:
        line = StructuredLogFormatter().format(self._record('hello'))
        data = json.loads(line)
        assert data['message'] == 'hello'
        assert data['level'] == 'INFO'
        assert data['logger'] == 'osusearch.test'

    def test_includes_request_context(self) -> None:
        set_request_context(req_id='req-1')
        data = json.loads(StructuredLogFormatter().format(self._record('x')))
        assert data['request_id'] == 'req-1'

    def test_clear_request_context(self) -> None:
        set_request_context(req_id='req-1')
        clear_request_context()
        data = json.loads(StructuredLogFormatter().format(self._record('x')))
        assert 'request_id' not in data

    def test_includes_extra(self) -> None:
        data = json.loads(
            StructuredLogFormatter().format(self._record('x', count=3))
        )
        assert data['extra'] == {'count': 3}

    def test_context_logger_nests_extra(self, caplog) -> None:
        logger = get_logger('osusearch.test', component='search')
        with caplog.at_level(logging.INFO, logger='osusearch.test'):
            logger.info('done', extra={'count': 2})
        record = caplog.records[-1]
        assert record.extra == {'component': 'search', 'count': 2}

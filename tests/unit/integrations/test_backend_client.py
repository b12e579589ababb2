"""
Unit Tests for the backend client
Tests for: envelope unwrapping, bearer token, error mapping
"""
import json

import httpx
import pytest

from hostelia.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
    ResourceNotFoundError,
    UpstreamServiceError,
    ValidationError,
)
from hostelia.integrations.backend_client import (
    BackendClient,
    extract_items,
    extract_object,
    extract_total,
)
from hostelia.integrations.token_store import TokenStore


def make_client(handler, token='tok-1'):
    http = httpx.AsyncClient(base_url='http://backend.test/api', transport=httpx.MockTransport(handler))
    return BackendClient(http, TokenStore(token=token))


class TestEnvelopeHelpers:

    def test_named_collection_first(self):
        payload = {'success': True, 'problems': [1, 2], 'data': [3]}

        assert extract_items(payload, 'problems') == [1, 2]

    def test_falls_back_to_data_then_items(self):
        assert extract_items({'data': [1]}, 'students') == [1]
        assert extract_items({'items': [2]}, 'students') == [2]
        assert extract_items({'data': {'items': [3]}}) == [3]

    def test_missing_payload_is_empty(self):
        assert extract_items({'success': True}, 'wardens') == []
        assert extract_items(None) == []

    def test_object_and_total(self):
        assert extract_object({'user': {'_id': 'x'}}, 'user') == {'_id': 'x'}
        assert extract_object({'data': {'_id': 'y'}}, 'user') == {'_id': 'y'}
        assert extract_total({'pagination': {'total': 42}}) == 42
        assert extract_total({'data': []}) is None


class TestBackendClient:

    @pytest.mark.asyncio
    async def test_sends_bearer_token(self):
        seen = {}

        def handler(request):
            seen['auth'] = request.headers.get('Authorization')
            seen['path'] = request.url.path
            return httpx.Response(200, json={'success': True, 'students': [{'_id': '1'}]})

        client = make_client(handler)
        items = await client.fetch_list('/user/students/all', 'students')

        assert items == [{'_id': '1'}]
        assert seen == {'auth': 'Bearer tok-1', 'path': '/api/user/students/all'}

    @pytest.mark.asyncio
    async def test_no_token_no_header(self):
        seen = {}

        def handler(request):
            seen['auth'] = request.headers.get('Authorization')
            return httpx.Response(200, json={'success': True})

        await make_client(handler, token=None).get('/announcement')

        assert seen['auth'] is None

    @pytest.mark.asyncio
    async def test_401_clears_current_token(self):
        client = make_client(lambda request: httpx.Response(401, json={'message': 'jwt expired'}))

        with pytest.raises(AuthenticationError) as exc_info:
            await client.get('/problem')

        assert exc_info.value.message == 'jwt expired'
        assert client.token_store.token is None

    @pytest.mark.asyncio
    async def test_401_keeps_token_replaced_mid_flight(self):
        store = TokenStore(token='old')

        def handler(request):
            store.set('fresh')
            return httpx.Response(401, json={})

        http = httpx.AsyncClient(base_url='http://backend.test/api', transport=httpx.MockTransport(handler))
        client = BackendClient(http, store)

        with pytest.raises(AuthenticationError):
            await client.get('/problem')

        assert store.token == 'fresh'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('status,exc_type,http_status', [
        (403, AuthorizationError, 403),
        (404, ResourceNotFoundError, 404),
        (400, ValidationError, 422),
        (500, UpstreamServiceError, 502),
        (503, UpstreamServiceError, 502),
    ])
    async def test_status_mapping(self, status, exc_type, http_status):
        client = make_client(lambda request: httpx.Response(status, json={'message': 'nope'}))

        with pytest.raises(exc_type) as exc_info:
            await client.get('/fee')

        assert exc_info.value.status_code == http_status
        assert exc_info.value.message == 'nope'

    @pytest.mark.asyncio
    async def test_success_false_in_ok_body(self):
        client = make_client(lambda request: httpx.Response(200, json={'success': False, 'message': 'No hostel'}))

        with pytest.raises(UpstreamServiceError) as exc_info:
            await client.get('/transit')

        assert exc_info.value.message == 'No hostel'

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout('slow', request=request)

        with pytest.raises(UpstreamServiceError) as exc_info:
            await make_client(handler).get('/fee')

        assert exc_info.value.status_code == 504
        assert exc_info.value.error_code == ErrorCode.TIMEOUT_ERROR

    @pytest.mark.asyncio
    async def test_connection_failure(self):
        def handler(request):
            raise httpx.ConnectError('refused', request=request)

        with pytest.raises(UpstreamServiceError) as exc_info:
            await make_client(handler).get('/fee')

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_patch_sends_json(self):
        seen = {}

        def handler(request):
            seen['method'] = request.method
            seen['body'] = request.content
            return httpx.Response(200, json={'success': True})

        await make_client(handler).patch('/problem/abc/status', json={'status': 'Resolved'})

        assert seen['method'] == 'PATCH'
        assert json.loads(seen['body']) == {'status': 'Resolved'}

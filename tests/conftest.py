"""
Hostelia - Test Configuration and Fixtures
"""
import json
import os
import re
from typing import AsyncGenerator, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from faker import Faker
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Keep test runs away from any developer .env
os.environ['ENVIRONMENT'] = 'testing'
os.environ['LOG_LEVEL'] = 'WARNING'

from hostelia.config.settings import Settings
from hostelia.main import create_app

fake = Faker()

BACKEND_URL = 'http://backend.test/api'


def object_id() -> str:
    return fake.hexify(text='^' * 24)


def campus_email(name: str) -> str:
    local = re.sub(r'[^a-z]+', '.', name.lower()).strip('.')
    return f'{local}@iiits.in'


class FakeBackend:
    """
    In-memory stand-in for the hostel REST backend.

    Collections are plain lists of camelCase documents. ``fail`` maps a
    ``(method, path)`` pair to a ``(status, body)`` response, and every
    request received is kept in ``requests``.
    """

    def __init__(self):
        self.complaints: List[dict] = []
        self.fees: List[dict] = []
        self.students: List[dict] = []
        self.wardens: List[dict] = []
        self.announcements: List[dict] = []
        self.feedbacks: List[dict] = []
        self.transit: List[dict] = []
        self.menu: object = {}
        self.fail: Dict[Tuple[str, str], Tuple[int, dict]] = {}
        self.requests: List[httpx.Request] = []

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path[len('/api'):]
        method = request.method

        if (method, path) in self.fail:
            status, body = self.fail[(method, path)]
            return httpx.Response(status, json=body)

        if method == 'GET':
            collections = {
                '/problem': ('problems', self.complaints),
                '/fee': ('feeSubmissions', self.fees),
                '/user/students/all': ('students', self.students),
                '/user/wardens/all': ('wardens', self.wardens),
                '/announcement': ('announcements', self.announcements),
                '/mess/feedback': ('feedbacks', self.feedbacks),
                '/transit': ('transitEntries', self.transit),
            }
            if path in collections:
                key, items = collections[path]
                return httpx.Response(200, json={'success': True, key: items})
            if path == '/mess/menu':
                return httpx.Response(200, json={'success': True, 'menu': self.menu})
            if path.startswith('/user/'):
                user_id = path.rsplit('/', 1)[-1]
                for user in self.students + self.wardens:
                    if user['_id'] == user_id:
                        return httpx.Response(200, json={'success': True, 'user': user})

        if method == 'POST' and path.startswith('/problem/') and path.endswith('/comments'):
            problem_id = path.split('/')[2]
            for problem in self.complaints:
                if problem['_id'] == problem_id:
                    message = json.loads(request.content)['message']
                    problem['comments'].append({'user': object_id(), 'role': 'student', 'message': message})
                    return httpx.Response(201, json={'success': True, 'message': 'Comment added', 'problem': problem})

        if method == 'PATCH':
            return httpx.Response(200, json={'success': True, 'message': 'Updated'})

        return httpx.Response(404, json={'success': False, 'message': 'Not found'})

    def last_request(self, method: str) -> Optional[httpx.Request]:
        matching = [r for r in self.requests if r.method == method]
        return matching[-1] if matching else None

    def last_json(self, method: str) -> dict:
        request = self.last_request(method)
        return json.loads(request.content) if request is not None else {}


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        ENVIRONMENT='testing',
        BACKEND_API_URL=BACKEND_URL,
        LOG_LEVEL='WARNING',
        TOKEN_STORE_PATH=None,
    )


@pytest.fixture
def app(backend: FakeBackend, test_settings: Settings) -> FastAPI:
    return create_app(test_settings, transport=httpx.MockTransport(backend.handle))


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """API client wired to the fake backend through the real app factory"""
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url='http://test') as ac:
            yield ac


@pytest.fixture
def auth_headers() -> dict:
    return {'Authorization': f'Bearer {fake.sha256()}'}


# --- Document factories ----------------------------------------------------------

@pytest.fixture
def make_student() -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        name = overrides.pop('name', fake.name())
        doc = {
            '_id': object_id(),
            'name': name,
            'email': campus_email(name),
            'role': 'student',
            'rollNo': f"S2023{fake.random_number(digits=4, fix_len=True)}",
            'hostel': 'BH-1',
            'roomNo': str(fake.random_int(min=100, max=450)),
            'year': 'UG-2',
        }
        doc.update(overrides)
        return doc
    return _make


@pytest.fixture
def make_complaint() -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        doc = {
            '_id': object_id(),
            'problemTitle': fake.sentence(nb_words=4),
            'problemDescription': fake.paragraph(),
            'problemImage': 'https://res.cloudinary.com/demo/image/upload/v1/problem.jpg',
            'category': 'Electrical',
            'hostel': 'BH-1',
            'roomNo': '204',
            'studentId': object_id(),
            'status': 'Pending',
            'studentStatus': 'NotResolved',
            'comments': [],
            'createdAt': '2024-03-01T09:00:00.000Z',
            'updatedAt': '2024-03-01T09:00:00.000Z',
        }
        doc.update(overrides)
        return doc
    return _make


@pytest.fixture
def make_fee() -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        name = overrides.pop('studentName', fake.name())
        doc = {
            '_id': object_id(),
            'studentId': object_id(),
            'studentName': name,
            'studentEmail': campus_email(name),
            'hostelFee': {'status': 'documentNotSubmitted'},
            'messFee': {'status': 'documentNotSubmitted'},
            'createdAt': '2024-02-01T08:00:00.000Z',
            'updatedAt': '2024-02-01T08:00:00.000Z',
        }
        doc.update(overrides)
        return doc
    return _make


@pytest.fixture
def make_feedback() -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        doc = {
            '_id': object_id(),
            'studentId': object_id(),
            'date': '2024-03-04T00:00:00.000Z',
            'day': 'Monday',
            'mealType': 'Lunch',
            'rating': 4,
            'comment': fake.sentence(),
            'createdAt': '2024-03-04T13:00:00.000Z',
        }
        doc.update(overrides)
        return doc
    return _make


@pytest.fixture
def make_transit() -> Callable[..., dict]:
    def _make(**overrides) -> dict:
        doc = {
            '_id': object_id(),
            'studentId': {'_id': object_id(), 'name': fake.name()},
            'purpose': 'Market',
            'transitStatus': 'EXIT',
            'date': '2024-03-04T00:00:00.000Z',
            'time': '18:30:00',
            'createdAt': '2024-03-04T18:30:00.000Z',
        }
        doc.update(overrides)
        return doc
    return _make

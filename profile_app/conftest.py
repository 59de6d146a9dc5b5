# profile_app/conftest.py
import pytest

from profile_app import create_app
from profile_app.services.store import COMMENTS, PROFILES, MemoryStore


@pytest.fixture
def app():
    """테스트 설정(인메모리 저장소)으로 만든 Flask 앱"""
    app = create_app('testing')
    yield app
    app.services['store'].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store():
    """준비(provision)까지 끝난 인메모리 저장소"""
    store = MemoryStore()
    store.connect()
    store.provision()
    yield store
    store.close()


@pytest.fixture
def make_profile(app, client):
    """프로필을 API 로 생성하고 발급된 ID 를 반환하는 헬퍼"""
    def _make(name, **extra):
        response = client.post('/profiles', json={"name": name, **extra})
        assert response.status_code == 201
        return app.services['store'].find_one(PROFILES, [('name', '==', name)])['id']

    return _make


@pytest.fixture
def make_comment(app, client):
    """댓글을 API 로 생성하고 발급된 ID 를 반환하는 헬퍼"""
    def _make(profile_id, user_id, **content):
        response = client.post(f'/profiles/{profile_id}/comment', json={"user_id": user_id, **content})
        assert response.status_code == 201
        comments = app.services['store'].find(COMMENTS, [('profile_id', '==', profile_id)])
        return max(comment['id'] for comment in comments)

    return _make

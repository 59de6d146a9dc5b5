# profile_app/api/comments/test_routes.py
"""댓글 작성 / 목록 API 테스트"""

from datetime import datetime, timedelta, timezone
from itertools import count

import pytest

from profile_app.services.store import COMMENTS, COUNTERS
from profile_app.utils.datetime_utils import DateTimeUtils


@pytest.fixture
def profiles(make_profile):
    """대상 프로필 1 과 작성자 프로필 2, 3, 4"""
    return [make_profile(f"profile {i}") for i in range(1, 5)]


@pytest.fixture
def ticking_clock(monkeypatch):
    """댓글마다 1초씩 증가하는 시각을 돌려주는 시계"""
    start = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
    ticks = count()
    monkeypatch.setattr(DateTimeUtils, 'now', lambda: start + timedelta(seconds=next(ticks)))


def test_create_comment(app, client, profiles):
    comment = {
        "user_id": 2,
        "title": "test comment - 1",
        "description": "Elon musk is a genious",
        "mbti": "ENTJ",
        "enneagram": "",
        "zodiac": ""
    }
    response = client.post('/profiles/1/comment', json=comment)

    assert response.status_code == 201
    assert response.get_json() == {"result": "comment created successfully"}

    saved = app.services['store'].find_one(COMMENTS, [('id', '==', 1)])
    assert saved['profile_id'] == 1
    assert saved['user_id'] == 2
    assert saved['likes'] == 0
    assert saved['title'] == "test comment - 1"
    datetime.fromisoformat(saved['created_at'])


def test_create_comment_unknown_user(app, client, profiles):
    response = client.post('/profiles/1/comment', json={"user_id": 1001, "title": "test comment"})

    assert response.status_code == 404
    assert response.get_json() == {"error": "either profile id or user id doesn't exist"}
    assert app.services['store'].find(COMMENTS) == []


def test_create_comment_unknown_profile(client, profiles):
    response = client.post('/profiles/999/comment', json={"user_id": 2, "title": "test comment"})
    assert response.status_code == 404


def test_create_comment_on_own_profile_is_rejected(client, profiles):
    response = client.post('/profiles/1/comment', json={"user_id": 1, "title": "self"})
    assert response.status_code == 404


def test_create_comment_without_content(app, client, profiles):
    comment = {"user_id": 2, "title": "", "description": "", "mbti": "", "enneagram": "", "zodiac": ""}
    response = client.post('/profiles/1/comment', json=comment)

    assert response.status_code == 400
    assert response.get_json() == {"error": "at least a voting or title or description is required"}
    # 검증 실패 시 댓글 시퀀스는 소비되지 않음
    assert app.services['store'].find_one_and_update(COUNTERS, 'comment', {'seq': 0})['seq'] == 0


def test_create_comment_with_invalid_user_id_type(client, profiles):
    response = client.post('/profiles/1/comment', json={"user_id": "abc", "title": "x"})

    assert response.status_code == 400
    assert response.get_json()["error_code"] == "VALIDATION_ERROR"


def test_create_comment_store_failure_keeps_id(app, client, profiles, monkeypatch):
    """댓글 저장 실패 시 ID 보상을 하지 않음 (프로필과 다른 기존 동작)"""
    store = app.services['store']

    def broken_insert(*args, **kwargs):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(store, '_insert', broken_insert)
    response = client.post('/profiles/1/comment', json={"user_id": 2, "title": "x"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "failed to create new comment"}
    assert store.find_one_and_update(COUNTERS, 'comment', {'seq': 0})['seq'] == 1


def test_list_comments(client, profiles, make_comment):
    make_comment(1, 2, title="test comment - 1", mbti="ENTJ")
    make_comment(1, 3, title="test comment", zodiac="cancer")
    make_comment(2, 3, title="other profile")

    response = client.get('/profiles/1/comments')

    assert response.status_code == 200
    result = response.get_json()['result']
    assert [c['id'] for c in result] == [1, 2]
    assert all(c['profile_id'] == 1 for c in result)


def test_list_comments_empty_returns_404(client, profiles):
    """댓글이 없는 프로필과 없는 프로필은 구분되지 않음"""
    for profile_id in (1, 10001):
        response = client.get(f'/profiles/{profile_id}/comments')
        assert response.status_code == 404
        assert response.get_json() == {"result": []}


def test_list_comments_sort_recent(client, profiles, make_comment, ticking_clock):
    make_comment(1, 2, title="first")
    make_comment(1, 3, title="second")
    make_comment(1, 4, title="test comment by profile 4", enneagram="1w2")

    result = client.get('/profiles/1/comments?sortby=recent').get_json()['result']

    assert result[0]['title'] == "test comment by profile 4"
    created = [datetime.fromisoformat(c['created_at']) for c in result]
    assert created == sorted(created, reverse=True)


def test_list_comments_sort_best(client, profiles, make_comment):
    make_comment(1, 2, title="test comment - 1")
    best = make_comment(1, 3, title="popular")
    for user_id in (2, 3, 4):
        assert client.post(f'/comments/{best}/like', json={"user_id": user_id}).status_code == 201

    result = client.get('/profiles/1/comments?sortby=best').get_json()['result']

    assert result[0]['likes'] == 3
    assert result[0]['title'] == "popular"
    assert [c['likes'] for c in result] == [3, 0]


def test_list_comments_unknown_sort_keeps_store_order(client, profiles, make_comment):
    make_comment(1, 2, title="a")
    make_comment(1, 3, title="b")

    result = client.get('/profiles/1/comments?sortby=oldest').get_json()['result']
    assert [c['title'] for c in result] == ["a", "b"]


@pytest.mark.parametrize('filter_by, expected', [
    ('all', 3),
    ('mbti', 1),
    ('zodiac', 1),
    ('enneagram', 1),
])
def test_list_comments_filter(client, profiles, make_comment, filter_by, expected):
    make_comment(1, 2, title="c1", mbti="ENTJ", enneagram="", zodiac="")
    make_comment(1, 3, title="c2", mbti="", enneagram="", zodiac="cancer")
    make_comment(1, 4, title="c3", mbti="", enneagram="1w2", zodiac="")

    result = client.get(f'/profiles/1/comments?filter={filter_by}').get_json()['result']

    assert len(result) == expected
    if filter_by != 'all':
        assert all(c[filter_by] for c in result)


def test_list_comments_invalid_filter(client, profiles, make_comment):
    make_comment(1, 2, title="c1")

    response = client.get('/profiles/1/comments?filter=sloan')

    assert response.status_code == 400
    assert response.get_json() == {"error": "invalid filter option provided"}

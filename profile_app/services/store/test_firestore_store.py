# profile_app/services/store/test_firestore_store.py
"""
Firestore 저장소 테스트 (에뮬레이터 필요)

사용법: FIRESTORE_EMULATOR_HOST=localhost:8080 python -m pytest profile_app/services/store/test_firestore_store.py -v
"""

import os
import uuid

import pytest

from profile_app.services.store import COMMENTS, COUNTERS, DESCENDING, PROFILES, DocumentValidationError, FirestoreStore

pytestmark = pytest.mark.skipif(
    not os.getenv('FIRESTORE_EMULATOR_HOST'),
    reason="FIRESTORE_EMULATOR_HOST 가 설정되지 않아 Firestore 테스트를 건너뜁니다.",
)


@pytest.fixture
def firestore_store():
    # 테스트마다 별도 프로젝트를 사용해 에뮬레이터 데이터를 분리합니다.
    store = FirestoreStore(project_id=f"test-{uuid.uuid4().hex[:8]}", app_name=f"test-{uuid.uuid4()}")
    store.connect()
    store.provision()
    yield store
    store.close()


def test_provision_and_counters(firestore_store):
    assert set(firestore_store.list_collections()) >= {COUNTERS}
    assert firestore_store.provision() is False
    assert firestore_store.find_one_and_update(COUNTERS, 'profile', {'seq': 1}) == {'seq': 1}
    assert firestore_store.find_one_and_update(COUNTERS, 'profile', {'seq': -1}) == {'seq': 0}


def test_insert_find_update_delete(firestore_store):
    firestore_store.insert_one(PROFILES, {"id": 1, "name": "p1"})
    firestore_store.insert_one(COMMENTS, {"id": 1, "profile_id": 1, "user_id": 2, "likes": 0, "mbti": "INTJ"})
    firestore_store.insert_one(COMMENTS, {"id": 2, "profile_id": 1, "user_id": 3, "likes": 0, "mbti": ""})

    assert firestore_store.update_one(COMMENTS, [('id', '==', 2)], {'likes': 1}) is True
    best = firestore_store.find(COMMENTS, [('profile_id', '==', 1)], order_by=('likes', DESCENDING))
    assert [c['id'] for c in best] == [2, 1]
    assert [c['id'] for c in firestore_store.find(COMMENTS, [('mbti', '!=', '')])] == [1]

    assert firestore_store.delete_one(COMMENTS, [('id', '==', 1)]) is True
    assert firestore_store.find_one(COMMENTS, [('id', '==', 1)]) is None


def test_insert_validation(firestore_store):
    with pytest.raises(DocumentValidationError):
        firestore_store.insert_one(PROFILES, {"id": 1})
    assert firestore_store.find(PROFILES) == []

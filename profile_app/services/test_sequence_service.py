# profile_app/services/test_sequence_service.py
"""시퀀스 발급기 테스트"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from profile_app.services.sequence_service import COMPENSATED_SEQUENCES, SequenceGenerator
from profile_app.services.store import COUNTERS


@pytest.fixture
def sequences(store):
    return SequenceGenerator(store)


def test_allocate_is_strictly_increasing(sequences):
    assert [sequences.allocate('profile') for _ in range(3)] == [1, 2, 3]
    # 엔티티마다 독립적인 카운터
    assert sequences.allocate('comment') == 1


def test_allocate_creates_missing_counter(sequences, store):
    assert sequences.allocate('brand-new') == 1
    assert store.find_one_and_update(COUNTERS, 'brand-new', {'seq': 0}) == {'seq': 1}


def test_compensate_decrements(sequences):
    sequences.allocate('profile')
    sequences.allocate('profile')
    assert sequences.compensate('profile') == 1
    # 보상 이후 같은 ID 가 다시 발급됨
    assert sequences.allocate('profile') == 2


@pytest.mark.parametrize('name', ['profile', 'comment', 'like'])
def test_concurrent_allocations_are_distinct(sequences, name):
    """N 개의 동시 호출은 중복 없는 N 개의 ID 를 받아야 함"""
    with ThreadPoolExecutor(max_workers=16) as executor:
        ids = list(executor.map(lambda _: sequences.allocate(name), range(200)))

    assert len(set(ids)) == 200
    assert sorted(ids) == list(range(1, 201))


def test_compensation_policy(sequences):
    """프로필만 ID 보상을 적용함"""
    assert COMPENSATED_SEQUENCES == {'profile': True, 'comment': False, 'like': False}
    assert sequences.is_compensated('profile') is True
    assert sequences.is_compensated('comment') is False
    assert sequences.is_compensated('like') is False
    assert sequences.is_compensated('unknown') is False

# profile_app/services/sequence_service.py
import logging

from profile_app.services.store.base import (
    COMMENT_SEQUENCE,
    COUNTERS,
    LIKE_SEQUENCE,
    PROFILE_SEQUENCE,
    DocumentStore,
)

logger = logging.getLogger(__name__)

# 후속 쓰기가 실패했을 때 발급한 ID 를 되돌리는지 여부 (엔티티별).
# 프로필만 보상하고 댓글/좋아요는 되돌리지 않습니다.
COMPENSATED_SEQUENCES = {
    PROFILE_SEQUENCE: True,
    COMMENT_SEQUENCE: False,
    LIKE_SEQUENCE: False,
}


class SequenceGenerator:
    """
    counters 컬렉션을 이용해 엔티티별 정수 ID 를 발급합니다.

    - allocate: 카운터를 원자적으로 1 증가시키고 새 값을 반환합니다. (없으면 1 로 생성)
    - compensate: 카운터를 원자적으로 1 감소시킵니다. 트랜잭션 롤백이 아닌 보상 동작이므로
      두 발급 사이에 끼어들면 ID 가 재사용될 수 있습니다.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    def allocate(self, name: str) -> int:
        counter = self.store.find_one_and_update(COUNTERS, name, {'seq': 1})
        return counter['seq']

    def compensate(self, name: str) -> int:
        counter = self.store.find_one_and_update(COUNTERS, name, {'seq': -1})
        logger.info(f"시퀀스 보상 처리 (name: {name}, seq: {counter['seq']})")
        return counter['seq']

    def is_compensated(self, name: str) -> bool:
        return COMPENSATED_SEQUENCES.get(name, False)

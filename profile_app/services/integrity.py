# profile_app/services/integrity.py
"""
외래 키가 없는 저장소를 위한 참조 무결성 검사.

모든 쓰기 전에 호출되며 결과를 ReferenceCheck 로 돌려줍니다. 검사와 쓰기 사이에는
락이 없으므로 동시 요청 간 경쟁 구간이 존재합니다.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from profile_app.services.store.base import COMMENTS, PROFILES, DocumentStore


@dataclass(frozen=True)
class ReferenceCheck:
    ok: bool
    missing: Tuple[str, ...] = field(default_factory=tuple)


class ReferenceChecker:

    def __init__(self, store: DocumentStore):
        self.store = store

    def check_comment_endpoints(self, profile_id: int, user_id: Optional[int]) -> ReferenceCheck:
        """
        댓글 대상 프로필과 작성자 프로필이 모두 존재하는지 한 번의 조회로 확인합니다.
        서로 다른 프로필 두 개가 조회되어야 통과합니다. (같은 ID 로 자기 자신에게 쓰는 댓글은 거부)
        """
        ids = list(dict.fromkeys(i for i in (profile_id, user_id) if i is not None))
        found = {doc.get('id') for doc in self.store.find(PROFILES, [('id', 'in', ids)])} if ids else set()
        if len(found) < 2:
            missing = tuple(name for name, value in (('profile_id', profile_id), ('user_id', user_id))
                            if value not in found)
            return ReferenceCheck(ok=False, missing=missing or ('user_id',))
        return ReferenceCheck(ok=True)

    def check_profile(self, profile_id: Optional[int]) -> ReferenceCheck:
        if profile_id is None or self.store.find_one(PROFILES, [('id', '==', profile_id)]) is None:
            return ReferenceCheck(ok=False, missing=('user_id',))
        return ReferenceCheck(ok=True)

    def check_comment(self, comment_id: int) -> ReferenceCheck:
        if self.store.find_one(COMMENTS, [('id', '==', comment_id)]) is None:
            return ReferenceCheck(ok=False, missing=('comment_id',))
        return ReferenceCheck(ok=True)

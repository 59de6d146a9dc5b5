# profile_app/api/comments/services.py

import logging
from typing import Any, Dict, List, Optional

from profile_app.core.errors import InternalError, InvalidInputError, NotFoundError
from profile_app.models.comment import Comment
from profile_app.services.integrity import ReferenceChecker
from profile_app.services.schema_validation import aggregate_schema_validation_errors
from profile_app.services.sequence_service import SequenceGenerator
from profile_app.services.store import COMMENTS, DESCENDING, DocumentStore, DocumentValidationError
from profile_app.services.store.base import COMMENT_SEQUENCE
from profile_app.utils.datetime_utils import DateTimeUtils

# 댓글 작성 시 최소 하나는 비어 있지 않아야 하는 필드
CONTENT_FIELDS = ('title', 'description', 'mbti', 'enneagram', 'zodiac')

FILTER_ALL = 'all'
FILTER_OPTIONS = ('mbti', 'enneagram', 'zodiac')

SORT_RECENT = 'recent'
SORT_BEST = 'best'
SORT_COLUMNS = {
    SORT_RECENT: 'created_at',
    SORT_BEST: 'likes',
}

class CommentService:
    """
    댓글 관련 비즈니스 로직을 담당하는 서비스 클래스.
    - 작성 전 대상 프로필과 작성자 프로필의 존재를 확인합니다.
    - 목록 조회 시 성격 유형 필터와 최신순/추천순 정렬을 지원합니다.
    """
    def __init__(self, store: DocumentStore, sequences: SequenceGenerator, references: ReferenceChecker):
        self.store = store
        self.sequences = sequences
        self.references = references

    def create_comment(self, profile_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
        """프로필에 새 댓글을 작성하고 저장된 문서를 반환합니다."""
        if not any(data.get(name) for name in CONTENT_FIELDS):
            raise InvalidInputError('at least a voting or title or description is required')

        user_id = data.get('user_id')
        try:
            check = self.references.check_comment_endpoints(profile_id, user_id)
        except Exception as e:
            logging.error(f"댓글 참조 확인 실패 (profile_id: {profile_id}): {e}", exc_info=True)
            raise InternalError('failed to create new comment') from e
        if not check.ok:
            raise NotFoundError("either profile id or user id doesn't exist")

        comment_id = None
        try:
            comment_id = self.sequences.allocate(COMMENT_SEQUENCE)
            comment = Comment(
                id=comment_id,
                profile_id=profile_id,
                user_id=user_id,
                created_at=DateTimeUtils.now_iso(),
                likes=0,
                **{name: data.get(name) for name in CONTENT_FIELDS},
            )
            self.store.insert_one(COMMENTS, comment.to_document())
        except DocumentValidationError as e:
            self._release_id(comment_id)
            raise aggregate_schema_validation_errors(e) from e
        except Exception as e:
            logging.error(f"댓글 생성 실패 (profile_id: {profile_id}, user_id: {user_id}): {e}", exc_info=True)
            self._release_id(comment_id)
            raise InternalError('failed to create new comment') from e

        logging.info(f"댓글 생성 완료 (id: {comment_id}, profile_id: {profile_id})")
        return comment.to_document()

    def _release_id(self, comment_id: Optional[int]) -> None:
        # 댓글 시퀀스는 보상 대상이 아니므로 기본 설정에서는 아무 일도 하지 않습니다.
        if comment_id is None or not self.sequences.is_compensated(COMMENT_SEQUENCE):
            return
        try:
            self.sequences.compensate(COMMENT_SEQUENCE)
        except Exception as e:
            logging.error(f"댓글 ID 보상 실패 (id: {comment_id}): {e}", exc_info=True)

    def list_comments(self, profile_id: int, filter_by: Optional[str] = None,
                      sort_by: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        프로필의 댓글 목록을 조회합니다.
        존재하지 않는 프로필과 댓글이 없는 프로필은 모두 빈 목록을 반환합니다.
        """
        filters = [('profile_id', '==', profile_id)]
        if filter_by and filter_by != FILTER_ALL:
            if filter_by not in FILTER_OPTIONS:
                raise InvalidInputError('invalid filter option provided')
            filters.append((filter_by, '!=', ''))

        column = SORT_COLUMNS.get(sort_by)
        order_by = (column, DESCENDING) if column else None

        try:
            return self.store.find(COMMENTS, filters, order_by=order_by)
        except Exception as e:
            logging.error(f"댓글 목록 조회 실패 (profile_id: {profile_id}): {e}", exc_info=True)
            raise InternalError('failed to fetch comments') from e

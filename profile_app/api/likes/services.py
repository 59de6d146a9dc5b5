# profile_app/api/likes/services.py

import logging
from typing import Any, Dict, List, Optional

from profile_app.core.errors import ConflictError, InternalError, NotFoundError, ServiceError
from profile_app.models.like import Like
from profile_app.services.integrity import ReferenceChecker
from profile_app.services.schema_validation import aggregate_schema_validation_errors
from profile_app.services.sequence_service import SequenceGenerator
from profile_app.services.store import COMMENTS, LIKES, DocumentStore, DocumentValidationError
from profile_app.services.store.base import LIKE_SEQUENCE
from profile_app.utils.datetime_utils import DateTimeUtils

class LikeService:
    """
    댓글 좋아요/좋아요 취소 로직.
    - (comment_id, user_id) 쌍당 좋아요는 하나만 허용합니다.
    - 댓글 문서의 likes 카운터는 좋아요 문서 쓰기와 별개의 쓰기로 갱신됩니다.
      둘 중 하나만 성공하면 카운터가 실제 좋아요 수와 어긋날 수 있습니다.
    """
    def __init__(self, store: DocumentStore, sequences: SequenceGenerator, references: ReferenceChecker):
        self.store = store
        self.sequences = sequences
        self.references = references

    @staticmethod
    def _like_filters(comment_id: int, user_id: Optional[int]):
        return [('comment_id', '==', comment_id), ('user_id', '==', user_id)]

    def find_like(self, comment_id: int, user_id: Optional[int]) -> Optional[Dict[str, Any]]:
        if user_id is None:
            return None
        return self.store.find_one(LIKES, self._like_filters(comment_id, user_id))

    def like(self, comment_id: int, user_id: Optional[int]) -> Dict[str, Any]:
        """댓글에 좋아요를 추가하고 저장된 좋아요 문서를 반환합니다."""
        try:
            if not self.references.check_comment(comment_id).ok:
                raise NotFoundError('comment not found')
            if not self.references.check_profile(user_id).ok:
                raise NotFoundError('user not found')
            if self.find_like(comment_id, user_id):
                raise ConflictError('comment already liked by the user')
            like_id = self.sequences.allocate(LIKE_SEQUENCE)
        except ServiceError:
            raise
        except Exception as e:
            logging.error(f"좋아요 사전 확인 실패 (comment_id: {comment_id}, user_id: {user_id}): {e}", exc_info=True)
            raise InternalError('failed to add the like') from e

        like = Like(id=like_id, comment_id=comment_id, user_id=user_id, created_at=DateTimeUtils.now_iso())

        # 두 쓰기는 서로 독립적으로 시도되며, 하나가 실패해도 나머지는 수행합니다.
        failures: List[Exception] = []
        for write in (
            lambda: self.store.insert_one(LIKES, like.to_document()),
            lambda: self.store.update_one(COMMENTS, [('id', '==', comment_id)], {'likes': 1}),
        ):
            try:
                write()
            except Exception as e:
                logging.error(f"좋아요 쓰기 실패 (comment_id: {comment_id}, user_id: {user_id}): {e}", exc_info=e)
                failures.append(e)

        if failures:
            self._release_id(like_id)
            validation_error = next((e for e in failures if isinstance(e, DocumentValidationError)), None)
            if validation_error is not None:
                raise aggregate_schema_validation_errors(validation_error) from validation_error
            raise InternalError('failed to add the like') from failures[0]

        logging.info(f"좋아요 추가 (id: {like_id}, comment_id: {comment_id}, user_id: {user_id})")
        return like.to_document()

    def _release_id(self, like_id: int) -> None:
        # 좋아요 시퀀스는 보상 대상이 아니므로 기본 설정에서는 아무 일도 하지 않습니다.
        if not self.sequences.is_compensated(LIKE_SEQUENCE):
            return
        try:
            self.sequences.compensate(LIKE_SEQUENCE)
        except Exception as e:
            logging.error(f"좋아요 ID 보상 실패 (id: {like_id}): {e}", exc_info=True)

    def unlike(self, comment_id: int, user_id: Optional[int]) -> None:
        """좋아요 문서를 삭제한 뒤 댓글의 likes 카운터를 1 감소시킵니다."""
        try:
            existing = self.find_like(comment_id, user_id)
        except Exception as e:
            logging.error(f"좋아요 조회 실패 (comment_id: {comment_id}): {e}", exc_info=True)
            raise InternalError('failed to remove the like') from e

        if not existing:
            message = f"no like found by user: {user_id} on comment: {comment_id}"
            raise NotFoundError(message, payload={"result": message})

        try:
            self.store.delete_one(LIKES, self._like_filters(comment_id, user_id))
            self.store.update_one(COMMENTS, [('id', '==', comment_id)], {'likes': -1})
        except Exception as e:
            logging.error(f"좋아요 취소 실패 (comment_id: {comment_id}, user_id: {user_id}): {e}", exc_info=True)
            raise InternalError('failed to remove the like') from e

        logging.info(f"좋아요 취소 (comment_id: {comment_id}, user_id: {user_id})")

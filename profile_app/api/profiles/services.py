# profile_app/api/profiles/services.py

import logging
from typing import Any, Dict

from profile_app.core.errors import InternalError, NotFoundError
from profile_app.models.profile import Profile
from profile_app.services.schema_validation import aggregate_schema_validation_errors
from profile_app.services.sequence_service import SequenceGenerator
from profile_app.services.store import PROFILES, DocumentStore, DocumentValidationError
from profile_app.services.store.base import PROFILE_SEQUENCE

class ProfileService:
    """
    프로필 생성/조회 비즈니스 로직.
    - 생성 시 발급한 ID 는 저장 실패 시 보상(compensate)됩니다.
    """
    def __init__(self, store: DocumentStore, sequences: SequenceGenerator):
        self.store = store
        self.sequences = sequences

    def create_profile(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """새 프로필을 저장하고 저장된 문서를 반환합니다."""
        try:
            profile_id = self.sequences.allocate(PROFILE_SEQUENCE)
        except Exception as e:
            logging.error(f"프로필 ID 발급 실패: {e}", exc_info=True)
            raise InternalError('failed to create new profile') from e

        profile = Profile(id=profile_id, **data)
        try:
            self.store.insert_one(PROFILES, profile.to_document())
        except DocumentValidationError as e:
            self._release_id(profile_id)
            raise aggregate_schema_validation_errors(e) from e
        except Exception as e:
            logging.error(f"프로필 저장 실패 (id: {profile_id}): {e}", exc_info=True)
            self._release_id(profile_id)
            raise InternalError('failed to create new profile') from e

        logging.info(f"프로필 생성 완료 (id: {profile_id})")
        return profile.to_document()

    def _release_id(self, profile_id: int) -> None:
        if not self.sequences.is_compensated(PROFILE_SEQUENCE):
            return
        try:
            self.sequences.compensate(PROFILE_SEQUENCE)
        except Exception as e:
            # 보상은 최선 노력이며, 원래 오류를 그대로 전달합니다.
            logging.error(f"프로필 ID 보상 실패 (id: {profile_id}): {e}", exc_info=True)

    def get_profile(self, profile_id: int) -> Dict[str, Any]:
        try:
            profile = self.store.find_one(PROFILES, [('id', '==', profile_id)])
        except Exception as e:
            logging.error(f"프로필 조회 실패 (id: {profile_id}): {e}", exc_info=True)
            raise InternalError('failed to fetch the profile') from e
        if profile is None:
            raise NotFoundError('profile not found')
        return profile

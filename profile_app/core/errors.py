# profile_app/core/errors.py
"""
서비스 계층이 던지는 예외 정의.

각 예외는 `kind` 태그를 가지며, HTTP 경계(app/__init__.py 의 에러 핸들러)는
예외 클래스가 아니라 이 태그만 보고 상태 코드를 결정합니다.
"""
from typing import Any, Dict, Optional

SCHEMA_VALIDATION = 'schema_validation'
INVALID_INPUT = 'invalid_input'
NOT_FOUND = 'not_found'
CONFLICT = 'conflict'
INTERNAL = 'internal'

# kind 태그 -> HTTP 상태 코드
STATUS_BY_KIND = {
    SCHEMA_VALIDATION: 400,
    INVALID_INPUT: 400,
    NOT_FOUND: 404,
    CONFLICT: 409,
    INTERNAL: 500,
}


class ServiceError(Exception):
    """모든 서비스 오류의 기반 클래스."""
    kind = INTERNAL

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self._payload = payload

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_payload(self) -> Dict[str, Any]:
        """응답 본문으로 내보낼 딕셔너리를 반환합니다."""
        if self._payload is not None:
            return self._payload
        return {"error": self.message}


class SchemaValidationError(ServiceError):
    """저장소 스키마 규칙 위반 (필수 필드 누락, 타입 불일치)."""
    kind = SCHEMA_VALIDATION

    def to_payload(self) -> Dict[str, Any]:
        return {"error": {"description": self.message, "type": SCHEMA_VALIDATION}}


class InvalidInputError(ServiceError):
    """애플리케이션 수준의 입력 조건 위반 (빈 댓글, 잘못된 필터 등)."""
    kind = INVALID_INPUT


class NotFoundError(ServiceError):
    kind = NOT_FOUND


class ConflictError(ServiceError):
    kind = CONFLICT


class InternalError(ServiceError):
    kind = INTERNAL

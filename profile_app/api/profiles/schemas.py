# profile_app/api/profiles/schemas.py
from marshmallow import Schema, fields, EXCLUDE

class ProfileCreateSchema(Schema):
    """
    POST /profiles 요청 본문 스키마.
    name 의 필수 여부와 타입은 저장소 스키마 검증에서 확인하므로 여기서는 값을 그대로 받습니다.
    (null 인 필드는 저장하지 않으므로 누락으로 보고됩니다.)
    """
    class Meta:
        unknown = EXCLUDE

    name = fields.Raw(allow_none=True)
    description = fields.Raw(allow_none=True)
    mbti = fields.Raw(allow_none=True)
    enneagram = fields.Raw(allow_none=True)
    variant = fields.Raw(allow_none=True)
    tritype = fields.Raw(allow_none=True)
    socionics = fields.Raw(allow_none=True)
    sloan = fields.Raw(allow_none=True)
    psyche = fields.Raw(allow_none=True)
    image = fields.Raw(allow_none=True)

class ProfileResponseSchema(Schema):
    """프로필 조회 응답 형식."""
    id = fields.Int(required=True)
    name = fields.Str(required=True)
    description = fields.Str()
    mbti = fields.Str()
    enneagram = fields.Str()
    variant = fields.Str()
    tritype = fields.Raw()
    socionics = fields.Str()
    sloan = fields.Str()
    psyche = fields.Str()
    image = fields.Str()

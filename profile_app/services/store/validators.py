# profile_app/services/store/validators.py
"""컬렉션별 문서 스키마 검증기 (marshmallow)."""
from marshmallow import Schema, fields, validate, INCLUDE


class ProfileDocumentSchema(Schema):
    """profiles: name 은 비어 있지 않은 문자열이어야 합니다."""
    class Meta:
        unknown = INCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1))


class CommentDocumentSchema(Schema):
    class Meta:
        unknown = INCLUDE

    user_id = fields.Int(required=True, strict=True)


class LikeDocumentSchema(Schema):
    class Meta:
        unknown = INCLUDE

    comment_id = fields.Int(required=True, strict=True)
    user_id = fields.Int(strict=True)

# profile_app/api/comments/schemas.py
from marshmallow import Schema, fields, EXCLUDE

class CommentCreateSchema(Schema):
    """
    POST /profiles/{profile_id}/comment
    최소 하나의 내용 필드가 필요하다는 조건은 서비스에서 검사합니다.
    """
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Int(allow_none=True)
    title = fields.Str(allow_none=True)
    description = fields.Str(allow_none=True)
    mbti = fields.Str(allow_none=True)
    enneagram = fields.Str(allow_none=True)
    zodiac = fields.Str(allow_none=True)

class CommentListQuerySchema(Schema):
    """GET /profiles/{profile_id}/comments 쿼리 스트링. 허용 값 검사는 서비스 몫입니다."""
    class Meta:
        unknown = EXCLUDE

    filter = fields.Str(load_default=None)
    sortby = fields.Str(load_default=None)

class CommentResponseSchema(Schema):
    """댓글 응답 형식."""
    id = fields.Int(required=True)
    profile_id = fields.Int(required=True)
    user_id = fields.Int(required=True)
    title = fields.Str()
    description = fields.Str()
    mbti = fields.Str()
    enneagram = fields.Str()
    zodiac = fields.Str()
    likes = fields.Int(required=True)
    created_at = fields.Str(required=True)

# profile_app/api/likes/schemas.py
from marshmallow import Schema, fields, EXCLUDE

class LikeRequestSchema(Schema):
    """POST /comments/{id}/like, DELETE /comments/{id}/unlike 요청 본문."""
    class Meta:
        unknown = EXCLUDE

    user_id = fields.Int(load_default=None, allow_none=True)

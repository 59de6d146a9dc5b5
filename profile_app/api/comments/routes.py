# profile_app/api/comments/routes.py
from flask import Blueprint, current_app, jsonify, request

from profile_app.api.comments.schemas import CommentCreateSchema, CommentListQuerySchema, CommentResponseSchema

comments_bp = Blueprint('comments_bp', __name__)

@comments_bp.route('/profiles/<int:profile_id>/comment', methods=['POST'])
def create_comment(profile_id: int):
    """
    특정 프로필에 새 댓글을 작성합니다.
    - 작성자(user_id)도 프로필이어야 합니다.
    """
    comment_service = current_app.services['comments']
    data = CommentCreateSchema().load(request.get_json(silent=True) or {})
    comment_service.create_comment(profile_id, data)
    return jsonify({"result": "comment created successfully"}), 201

@comments_bp.route('/profiles/<int:profile_id>/comments', methods=['GET'])
def get_comments(profile_id: int):
    """
    특정 프로필의 댓글 목록을 조회합니다.
    - ?filter=all|mbti|enneagram|zodiac, ?sortby=recent|best
    - 결과가 없으면 404 와 함께 빈 목록을 반환합니다.
    """
    comment_service = current_app.services['comments']
    query = CommentListQuerySchema().load(request.args)
    comments = comment_service.list_comments(profile_id, query['filter'], query['sortby'])
    body = {"result": CommentResponseSchema(many=True).dump(comments)}
    if not comments:
        return jsonify(body), 404
    return jsonify(body), 200

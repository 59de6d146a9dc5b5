# profile_app/api/likes/routes.py
from flask import Blueprint, current_app, jsonify, request

from profile_app.api.likes.schemas import LikeRequestSchema

likes_bp = Blueprint('likes_bp', __name__)

@likes_bp.route('/comments/<int:comment_id>/like', methods=['POST'])
def like_comment(comment_id: int):
    """댓글에 좋아요를 누릅니다. 이미 누른 경우 409 를 반환합니다."""
    like_service = current_app.services['likes']
    data = LikeRequestSchema().load(request.get_json(silent=True) or {})
    like_service.like(comment_id, data['user_id'])
    return jsonify({"result": "like added successfully"}), 201

@likes_bp.route('/comments/<int:comment_id>/unlike', methods=['DELETE'])
def unlike_comment(comment_id: int):
    like_service = current_app.services['likes']
    data = LikeRequestSchema().load(request.get_json(silent=True) or {})
    like_service.unlike(comment_id, data['user_id'])
    return jsonify({"result": "liked removed successfully"}), 200

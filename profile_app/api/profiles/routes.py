# profile_app/api/profiles/routes.py
from flask import Blueprint, current_app, jsonify, render_template, request

from profile_app.api.profiles.schemas import ProfileCreateSchema, ProfileResponseSchema

profiles_bp = Blueprint('profiles_bp', __name__)

@profiles_bp.route('/profiles/<int:profile_id>', methods=['GET'])
def get_profile(profile_id: int):
    """
    프로필 하나를 조회합니다.
    - 기본 응답은 렌더링된 프로필 화면이며, application/json 을 명시적으로 선호하는 클라이언트에만 JSON 을 반환합니다.
    """
    profile_service = current_app.services['profiles']
    profile = profile_service.get_profile(profile_id)
    profile['image'] = current_app.config['DEFAULT_PROFILE_IMAGE'] # 모든 프로필에 같은 이미지
    body = ProfileResponseSchema().dump(profile)

    if request.accept_mimetypes.best_match(['text/html', 'application/json']) == 'application/json':
        return jsonify(body), 200
    return render_template('profile_template.html', profile=body)

@profiles_bp.route('/profiles', methods=['POST'])
def create_profile():
    profile_service = current_app.services['profiles']
    data = ProfileCreateSchema().load(request.get_json(silent=True) or {})
    profile_service.create_profile(data)
    return jsonify({"result": "profile created successfully"}), 201

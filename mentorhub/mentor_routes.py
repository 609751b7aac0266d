from flask import Blueprint, request, jsonify, current_app
from mentorhub import mentors
from mentorhub.auth import login_required
from mentorhub.schemas import parse_skills

mentors_bp = Blueprint('mentors', __name__)


@mentors_bp.route('/skills', methods=['GET'])
def list_skills():
    current_app.logger.info("controller > mentors > find_all_skills")
    return jsonify([skill.to_dict() for skill in mentors.find_all_skills()]), 200


@mentors_bp.route('/knowledgeAreas/list', methods=['GET'])
def list_knowledge_areas():
    current_app.logger.info("controller > mentors > find_all_knowledge_areas")
    return jsonify([area.to_dict() for area in mentors.find_all_knowledge_areas()]), 200


@mentors_bp.route('', methods=['GET'])
def list_mentors():
    current_app.logger.info("controller > mentors > find_all_mentors")
    return jsonify([mentors.mentor_to_dict(m) for m in mentors.find_all_mentors()]), 200


@mentors_bp.route('/<mentor_id>', methods=['GET'])
def get_mentor(mentor_id):
    current_app.logger.info(f"controller > mentors > find_mentor_by_id id={mentor_id}")
    mentor = mentors.find_mentor_by_id(mentor_id)
    return jsonify({'status': 200, 'content': mentors.mentor_to_dict(mentor)}), 200


@mentors_bp.route('/<knowledge_area_id>/knowledgeAreas', methods=['GET'])
def list_mentors_by_knowledge_area(knowledge_area_id):
    current_app.logger.info(f"controller > mentors > find_mentors_by_knowledge_area area={knowledge_area_id}")
    found = mentors.find_mentors_by_knowledge_area(knowledge_area_id)
    return jsonify([mentors.mentor_to_dict(m) for m in found]), 200


@mentors_bp.route('/<mentor_id>/createSkills', methods=['POST'])
@login_required
def create_skills(mentor_id):
    current_app.logger.info(f"controller > mentors > add_new_skill id={mentor_id}")
    skills, many = parse_skills(request.get_json(silent=True))

    created = [skill.to_dict() for skill in mentors.add_new_skill(mentor_id, skills)]
    content = created if many else created[0]
    return jsonify({'status': 201, 'content': content}), 201

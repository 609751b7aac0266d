from flask import current_app
from sqlalchemy.orm import selectinload
from mentorhub import db
from mentorhub.errors import NotFoundError
from mentorhub.models import MENTOR, Account, KnowledgeArea, Skill
from mentorhub.utils import new_id


def skill_to_dict(skill):
    data = skill.to_dict()
    area = skill.knowledge_area
    data['knowledge_area'] = area.to_dict() if area is not None else None
    return data


def mentor_to_dict(account):
    """Profile fields plus role and skills with their knowledge areas."""
    data = account.to_dict()
    data['skills'] = [skill_to_dict(skill) for skill in account.skills]
    return data


def _with_skills(query):
    return query.options(selectinload(Account.skills).joinedload(Skill.knowledge_area))


def find_all_mentors():
    mentors = _with_skills(Account.query.filter_by(role=MENTOR)).order_by(Account.name).all()
    current_app.logger.debug(f"mentors > find_all_mentors > {len(mentors)} mentors")
    return mentors


def find_mentor_by_id(mentor_id):
    mentor = _with_skills(Account.query.filter_by(id=mentor_id, role=MENTOR)).first()
    if mentor is None:
        raise NotFoundError('Mentor not found')
    return mentor


def find_mentors_by_knowledge_area(knowledge_area_id):
    """Accounts owning at least one skill in the area. Empty is a valid answer."""
    query = Account.query.filter(
        Account.skills.any(Skill.knowledge_area_id == knowledge_area_id)
    )
    mentors = _with_skills(query).order_by(Account.name).all()
    current_app.logger.debug(
        f"mentors > find_mentors_by_knowledge_area > area={knowledge_area_id} found={len(mentors)}"
    )
    return mentors


def find_all_knowledge_areas():
    return KnowledgeArea.query.order_by(KnowledgeArea.name).all()


def find_all_skills():
    return Skill.query.order_by(Skill.name).all()


def find_skills_for_account(account_id):
    return Skill.query.filter_by(user_id=account_id).order_by(Skill.name).all()


def create_knowledge_area(name):
    area = KnowledgeArea(id=new_id(), name=name)
    try:
        db.session.add(area)
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("mentors > create_knowledge_area > exception")
        raise
    return area


def add_new_skill(account_id, skills):
    """
    Replace every skill owned by ``account_id`` with ``skills``.

    ``skills`` is a list of ``CreateSkillInput``. Delete and insert are
    committed together; on failure nothing changes.
    """
    current_app.logger.info(f"mentors > add_new_skill > account={account_id} count={len(skills)}")

    created = [
        Skill(
            id=new_id(),
            name=skill.name,
            user_id=account_id,
            knowledge_area_id=skill.knowledge_area_id,
        )
        for skill in skills
    ]
    try:
        Skill.query.filter_by(user_id=account_id).delete()
        db.session.add_all(created)
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("mentors > add_new_skill > exception")
        raise

    return created

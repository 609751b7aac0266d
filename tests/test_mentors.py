from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError
from mentorhub import mentors
from mentorhub.errors import NotFoundError
from mentorhub.models import Skill
from mentorhub.schemas import CreateSkillInput


def skill(name, area):
    return CreateSkillInput(name=name, knowledgeAreaId=area.id)


def test_find_all_mentors_filters_by_role(make_account, mentor):
    make_account(name='Plain Mentee', email='mentee@example.com')

    found = mentors.find_all_mentors()

    assert [m.id for m in found] == [mentor.id]


def test_mentor_projection_includes_skills_and_areas(mentor, knowledge_area):
    mentors.add_new_skill(mentor.id, [skill('SQL', knowledge_area)])

    data = mentors.mentor_to_dict(mentors.find_mentor_by_id(mentor.id))

    assert data['role'] == 'mentor'
    assert data['company'] == 'ACME'
    assert 'password' not in data
    assert data['skills'][0]['name'] == 'SQL'
    assert data['skills'][0]['knowledge_area'] == {'id': knowledge_area.id, 'name': 'Databases'}


def test_find_mentor_by_id_missing_raises(app):
    with pytest.raises(NotFoundError) as excinfo:
        mentors.find_mentor_by_id('does-not-exist')

    assert excinfo.value.message == 'Mentor not found'


def test_find_mentor_by_id_rejects_non_mentor(make_account):
    mentee = make_account(email='mentee@example.com')

    with pytest.raises(NotFoundError):
        mentors.find_mentor_by_id(mentee.id)


def test_add_new_skill_replaces_previous_set(mentor, knowledge_area):
    other_area = mentors.create_knowledge_area('Programming')
    mentors.add_new_skill(mentor.id, [skill('Java', other_area)])

    mentors.add_new_skill(mentor.id, [skill('SQL', knowledge_area)])

    names = [s.name for s in mentors.find_skills_for_account(mentor.id)]
    assert names == ['SQL']


def test_add_new_skill_accepts_several(mentor, knowledge_area):
    created = mentors.add_new_skill(mentor.id, [skill('SQL', knowledge_area), skill('Postgres', knowledge_area)])

    assert len({s.id for s in created}) == 2
    assert sorted(s.name for s in mentors.find_skills_for_account(mentor.id)) == ['Postgres', 'SQL']


def test_add_new_skill_only_touches_that_account(make_account, mentor, knowledge_area):
    other = make_account(email='other@example.com', role='mentor')
    mentors.add_new_skill(other.id, [skill('Python', knowledge_area)])

    mentors.add_new_skill(mentor.id, [skill('SQL', knowledge_area)])

    assert [s.name for s in mentors.find_skills_for_account(other.id)] == ['Python']


def test_add_new_skill_rolls_back_on_failure(mentor, knowledge_area):
    mentors.add_new_skill(mentor.id, [skill('Java', knowledge_area)])
    # name is NOT NULL, so the insert fails after the delete ran
    broken = SimpleNamespace(name=None, knowledge_area_id=knowledge_area.id)

    with pytest.raises(IntegrityError):
        mentors.add_new_skill(mentor.id, [broken])

    assert [s.name for s in mentors.find_skills_for_account(mentor.id)] == ['Java']


def test_find_mentors_by_knowledge_area(mentor, make_account, knowledge_area):
    other_area = mentors.create_knowledge_area('Design')
    designer = make_account(name='Dora', email='dora@example.com', role='mentor')
    mentors.add_new_skill(mentor.id, [skill('SQL', knowledge_area)])
    mentors.add_new_skill(designer.id, [skill('Figma', other_area)])

    found = mentors.find_mentors_by_knowledge_area(knowledge_area.id)

    assert [m.id for m in found] == [mentor.id]


def test_find_mentors_by_unknown_knowledge_area_is_empty(app):
    assert mentors.find_mentors_by_knowledge_area('nope') == []


def test_listings(mentor, knowledge_area):
    mentors.add_new_skill(mentor.id, [skill('SQL', knowledge_area)])

    assert [a.name for a in mentors.find_all_knowledge_areas()] == ['Databases']
    assert [s.name for s in mentors.find_all_skills()] == ['SQL']
    assert Skill.query.count() == 1

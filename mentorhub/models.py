from datetime import datetime
from mentorhub import db

MENTOR = 'mentor'
MENTEE = 'mentee'


class KnowledgeArea(db.Model):
    __tablename__ = 'knowledge_areas'

    id = db.Column(db.String(36), primary_key=True)
    name = db.Column(db.String(255), nullable=False)

    def to_dict(self):
        return {'id': self.id, 'name': self.name}


class Skill(db.Model):
    __tablename__ = 'skills'

    id = db.Column(db.String(36), primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    user_id = db.Column(db.String(36), db.ForeignKey('accounts.id', ondelete='CASCADE'), nullable=False, index=True)
    knowledge_area_id = db.Column(db.String(36), db.ForeignKey('knowledge_areas.id'), nullable=True, index=True)

    knowledge_area = db.relationship('KnowledgeArea', lazy='joined')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'user_id': self.user_id,
            'knowledge_area_id': self.knowledge_area_id,
        }


class Account(db.Model):
    __tablename__ = 'accounts'

    id = db.Column(db.String(36), primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password = db.Column(db.Text, nullable=False)
    username = db.Column(db.String(100), nullable=True)
    company = db.Column(db.String(255), nullable=True)
    position = db.Column(db.String(255), nullable=True)
    nationality = db.Column(db.String(100), nullable=True)
    verified = db.Column(db.Boolean, default=False, nullable=False)
    description = db.Column(db.Text, nullable=True)
    profile_img_url = db.Column(db.Text, nullable=True)
    phone_number = db.Column(db.String(30), nullable=True)
    role = db.Column(db.String(20), default=MENTEE, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    skills = db.relationship(
        'Skill',
        backref='account',
        cascade='all, delete-orphan',
        passive_deletes=True,
        order_by='Skill.name',
    )

    def to_dict(self):
        """Public representation; the password hash is never included."""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'username': self.username,
            'company': self.company,
            'position': self.position,
            'nationality': self.nationality,
            'verified': self.verified,
            'description': self.description,
            'profile_img_url': self.profile_img_url,
            'phone_number': self.phone_number,
            'role': self.role,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

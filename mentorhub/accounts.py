from flask import current_app
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from mentorhub import db
from mentorhub.errors import ConflictError, NotFoundError
from mentorhub.models import Account, Skill
from mentorhub.utils import hash_password, new_id


def find_all():
    current_app.logger.debug("accounts > find_all")
    query = Account.query.options(selectinload(Account.skills))
    return query.order_by(Account.created_at).all()


def find_by_email(email):
    """Return the account registered under ``email`` or None."""
    return Account.query.filter_by(email=email).first()


def find_by_id(account_id):
    account = db.session.get(Account, account_id)
    if account is None:
        raise NotFoundError('Account not found')
    return account


def create(name, email, password):
    current_app.logger.info(f"accounts > create > email={email}")

    if find_by_email(email):
        raise ConflictError('Email already exists')

    account = Account(
        id=new_id(),
        name=name,
        email=email,
        password=hash_password(password),
    )
    try:
        db.session.add(account)
        db.session.commit()
    except IntegrityError:
        # unique email index lost a race with a concurrent insert
        db.session.rollback()
        raise ConflictError('Email already exists')
    except Exception:
        db.session.rollback()
        current_app.logger.exception("accounts > create > exception")
        raise

    current_app.logger.info(f"accounts > create > success id={account.id}")
    return account


def update(account_id, fields):
    """Apply a partial update; only keys present in ``fields`` are written."""
    current_app.logger.info(f"accounts > update > id={account_id} fields={sorted(fields)}")

    account = find_by_id(account_id)

    new_email = fields.get('email')
    if new_email and new_email != account.email:
        other = find_by_email(new_email)
        if other is not None and other.id != account.id:
            raise ConflictError('Email already exists')

    for key, value in fields.items():
        if key == 'password':
            value = hash_password(value)
        setattr(account, key, value)

    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError('Email already exists')
    except Exception:
        db.session.rollback()
        current_app.logger.exception("accounts > update > exception")
        raise

    return account


def delete(account_id):
    # No existence check: deleting an unknown id is a no-op
    current_app.logger.info(f"accounts > delete > id={account_id}")
    try:
        Skill.query.filter_by(user_id=account_id).delete()
        Account.query.filter_by(id=account_id).delete()
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.exception("accounts > delete > exception")
        raise

import uuid
from flask import current_app
from mentorhub import bcrypt


def new_id():
    return str(uuid.uuid4())


def hash_password(password):
    rounds = current_app.config['BCRYPT_LOG_ROUNDS']
    return bcrypt.generate_password_hash(password, rounds).decode('utf-8')


def check_password(password_hash, password):
    # bcrypt comparison runs in constant time
    return bcrypt.check_password_hash(password_hash, password)

import jwt
from flask import request, g, current_app
from functools import wraps
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from mentorhub import accounts
from mentorhub.errors import UnauthorizedError
from mentorhub.utils import check_password

INVALID_CREDENTIALS = 'User or password is invalid'


def generate_token(account):
    """
    Generate a signed access token for the given account.
    The identity claim is the account email, not its id.
    """
    return create_access_token(identity=account.email)


def verify_token(token):
    """
    Decode and verify the token. Returns the email claim, or None when the
    signature, format or expiry check fails.
    """
    try:
        payload = decode_token(token)
        return payload[current_app.config.get('JWT_IDENTITY_CLAIM', 'sub')]
    except jwt.ExpiredSignatureError:
        return None
    except (jwt.InvalidTokenError, JWTExtendedException, KeyError):
        return None


def login(email, password):
    """
    Check credentials and issue a token.
    Unknown email and wrong password fail with the same error.
    """
    account = accounts.find_by_email(email)
    if account is None:
        raise UnauthorizedError(INVALID_CREDENTIALS)

    if not check_password(account.password, password):
        raise UnauthorizedError(INVALID_CREDENTIALS)

    current_app.logger.info(f"auth > login > success id={account.id}")
    return {
        'access_token': generate_token(account),
        'account': account.to_dict(),
    }


def login_required(f):
    """
    Decorator to protect endpoints with bearer authentication.
    The resolved account is stored on ``g.current_account``.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        header = request.headers.get('Authorization', '')
        if not header.startswith('Bearer '):
            raise UnauthorizedError('Token is missing')

        token = header[len('Bearer '):].strip()
        email = verify_token(token)
        if not email:
            raise UnauthorizedError('Invalid or expired token')

        account = accounts.find_by_email(email)
        if account is None:
            raise UnauthorizedError(INVALID_CREDENTIALS)

        g.current_account = account
        return f(*args, **kwargs)
    return decorated_function

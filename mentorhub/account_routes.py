from flask import Blueprint, request, jsonify, g, current_app
from mentorhub import accounts
from mentorhub.auth import login, login_required
from mentorhub.errors import ForbiddenError
from mentorhub.schemas import CreateAccountInput, LoginAccountInput, UpdateAccountInput

accounts_bp = Blueprint('accounts', __name__)


def require_owner(account_id):
    if g.current_account.id != account_id:
        raise ForbiddenError('You can only change your own account')


def account_with_skills(account):
    data = account.to_dict()
    data['skills'] = [{'id': skill.id, 'name': skill.name} for skill in account.skills]
    return data


@accounts_bp.route('', methods=['POST'])
def create_account():
    current_app.logger.info("controller > accounts > create")
    data = CreateAccountInput.model_validate(request.get_json(silent=True))

    account = accounts.create(data.name, data.email, data.password)
    return jsonify(account.to_dict()), 201


@accounts_bp.route('', methods=['GET'])
def list_accounts():
    current_app.logger.info("controller > accounts > find_all")
    return jsonify([account_with_skills(account) for account in accounts.find_all()]), 200


@accounts_bp.route('/login', methods=['POST'])
def login_account():
    current_app.logger.info("controller > accounts > login")
    data = LoginAccountInput.model_validate(request.get_json(silent=True))
    return jsonify(login(data.email, data.password)), 200


@accounts_bp.route('/me', methods=['GET'])
@login_required
def view_me():
    return jsonify(account_with_skills(g.current_account)), 200


@accounts_bp.route('/<account_id>', methods=['PATCH'])
@login_required
def update_account(account_id):
    current_app.logger.info(f"controller > accounts > update id={account_id}")
    require_owner(account_id)
    data = UpdateAccountInput.model_validate(request.get_json(silent=True))

    account = accounts.update(account_id, data.changes())
    return jsonify(account.to_dict()), 200


@accounts_bp.route('/<account_id>', methods=['DELETE'])
@login_required
def delete_account(account_id):
    current_app.logger.info(f"controller > accounts > delete id={account_id}")
    require_owner(account_id)
    accounts.delete(account_id)
    return '', 204

import logging
import click
from flask import Flask, jsonify
from flask.cli import AppGroup
from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from flask_jwt_extended import JWTManager
from flask_cors import CORS
from sqlalchemy import text

# Initialize extensions
db = SQLAlchemy()
bcrypt = Bcrypt()
jwt = JWTManager()


def create_app(config_object='mentorhub.config.Config'):
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Flask attaches its default stream handler to app.logger
    app.logger.setLevel(getattr(logging, app.config.get('LOG_LEVEL', 'DEBUG'), logging.DEBUG))

    # Initialize extensions
    db.init_app(app)
    bcrypt.init_app(app)
    jwt.init_app(app)
    CORS(app, resources={
        r"/*": {
            "origins": app.config['CORS_ORIGINS'] or "*",
            "methods": ["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
            "allow_headers": ["Authorization", "Content-Type"],
        }
    })

    from mentorhub.errors import register_error_handlers
    register_error_handlers(app)

    # Create tables if they don't exist
    with app.app_context():
        from mentorhub import models  # noqa: F401
        db.create_all()

    # Import and register Blueprints
    from mentorhub.account_routes import accounts_bp
    from mentorhub.mentor_routes import mentors_bp

    app.register_blueprint(accounts_bp, url_prefix='/accounts')
    app.register_blueprint(mentors_bp, url_prefix='/mentors')

    @app.route('/health', methods=['GET'])
    def health():
        try:
            db.session.execute(text("SELECT 1"))
        except Exception:
            app.logger.exception("DB health check failed")
            return jsonify({'status': 'ok', 'db': 'error'}), 503
        return jsonify({'status': 'ok', 'db': 'ok'}), 200

    app.cli.add_command(knowledge_areas_cli)

    return app


knowledge_areas_cli = AppGroup('knowledge-areas', help='Manage the knowledge area catalogue.')


@knowledge_areas_cli.command('add')
@click.argument('name')
def add_knowledge_area(name):
    """Create a knowledge area and print its id."""
    from mentorhub import mentors
    area = mentors.create_knowledge_area(name)
    click.echo(f"{area.id}\t{area.name}")


@knowledge_areas_cli.command('list')
def list_knowledge_areas():
    from mentorhub import mentors
    for area in mentors.find_all_knowledge_areas():
        click.echo(f"{area.id}\t{area.name}")

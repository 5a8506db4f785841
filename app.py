from flask import Flask
from config import Config
from extensions import db, migrate
from utils.errors import register_error_handlers


def create_app(config_class=Config):
    # Create and configure the app
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)  # Initialize Flask-Migrate

    # JSON error responses for every failure
    register_error_handlers(app)

    # Import models here so they are registered before create_all
    from models.check_in import CheckIn  # noqa: F401

    # Register blueprints
    from routes.analysis import analysis_bp
    from routes.check_ins import check_ins_bp
    from routes.insights import insights_bp
    from routes.resources import resources_bp

    app.register_blueprint(analysis_bp, url_prefix='/api')
    app.register_blueprint(check_ins_bp, url_prefix='/api')
    app.register_blueprint(insights_bp, url_prefix='/api')
    app.register_blueprint(resources_bp, url_prefix='/api')

    # Create database tables
    with app.app_context():
        db.create_all()

    return app

if __name__ == '__main__':
    app = create_app()
    app.run(debug=True)

from flask import Flask
from .config import Config
from .extensions import cors


def create_app(config_class: type[Config] = Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Extensions
    cors.init_app(app)

    # Blueprints
    from .routes.auth import bp as auth_bp
    from .routes.api import bp as api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    return app

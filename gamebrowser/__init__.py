import os
from typing import Optional
from flask import Flask
from .catalog import load_catalog
from .models import Catalog, LoadError
from .routes import bp as routes_bp

# Bind only localhost unless overridden
BIND = os.environ.get("BIND", "127.0.0.1")
PORT = int(os.environ.get("PORT", "3067"))
GAMES_JSON = os.environ.get("GAMES_JSON", "games.json")
APP_TITLE = os.environ.get("APP_TITLE", "Game Browser")

def ensure_catalog(catalog_file: str) -> Catalog:
    """Build the catalog or refuse to start; there is nothing to serve without one."""
    try:
        return load_catalog(catalog_file)
    except LoadError as e:
        raise SystemExit(f"Error loading game list: {e}")

def create_app(catalog_file: str, catalog: Optional[Catalog] = None) -> Flask:
    app = Flask(__name__)
    app.secret_key = os.environ.get("FLASK_SECRET", "dev-" + os.urandom(8).hex())
    app.config["CATALOG_FILE"] = catalog_file
    app.config["APP_TITLE"] = APP_TITLE
    app.config["ALLOWED_IMG_EXT"] = {".png", ".jpg", ".jpeg", ".webp", ".gif"}
    app.extensions["gamebrowser"] = catalog if catalog is not None else ensure_catalog(catalog_file)

    app.register_blueprint(routes_bp)
    return app

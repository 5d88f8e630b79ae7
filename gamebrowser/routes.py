from __future__ import annotations
import io
import re
from pathlib import Path
from flask import Blueprint, current_app, render_template_string, redirect, url_for, flash, send_file, jsonify
from markupsafe import escape

from .catalog import load_catalog
from .launch import launch
from .models import Catalog, LoadError, NotFound, EmptyCommand
from .utils import is_remote, resolve_box_art

from .templates import INDEX_HTML

bp = Blueprint("gamebrowser", __name__)

def _catalog() -> Catalog:
    return current_app.extensions["gamebrowser"]

def _error_status(error) -> int:
    if isinstance(error, NotFound):
        return 404
    if isinstance(error, EmptyCommand):
        return 422
    return 500

@bp.get("/")
def index():
    categories, entries = _catalog().view()
    return render_template_string(
        INDEX_HTML,
        app_title=current_app.config["APP_TITLE"],
        catalog_file=current_app.config["CATALOG_FILE"],
        categories=categories,
        entries=entries,
    )

@bp.route("/launch/<launch_id>", methods=["GET", "POST"])
def launch_game(launch_id):
    current_app.logger.info("Launch request: %s", launch_id)
    if not re.fullmatch(r"[+-]?[0-9]+", launch_id):
        return jsonify({"ok": False, "error": "Invalid launch ID"}), 400

    result = launch(_catalog(), int(launch_id))
    if not result.ok:
        return jsonify({"ok": False, "error": result.message}), _error_status(result.error)

    return jsonify({
        "ok": True,
        "message": result.message,
        "title": result.entry.title,
        "pid": result.pid,
    })

@bp.get("/boxart/<int:launch_id>")
def box_art(launch_id):
    try:
        entry = _catalog().get(launch_id)
    except NotFound:
        return ("", 404)
    if is_remote(entry.box_art):
        return redirect(entry.box_art)
    base_dir = Path(current_app.config["CATALOG_FILE"]).resolve().parent
    p = resolve_box_art(entry.box_art, base_dir, current_app.config["ALLOWED_IMG_EXT"])
    if p:
        return send_file(p)
    svg = f"""
    <svg xmlns="http://www.w3.org/2000/svg" width="600" height="800">
      <rect width="100%" height="100%" fill="#1f2630"/>
      <text x="50%" y="50%" fill="#e0e6ee" font-size="28" text-anchor="middle" dominant-baseline="middle">
        {escape(entry.title[:32])}
      </text>
    </svg>
    """
    return send_file(io.BytesIO(svg.encode("utf-8")), mimetype="image/svg+xml")

@bp.post("/reload")
def reload():
    path = current_app.config["CATALOG_FILE"]
    try:
        catalog = load_catalog(path)
    except LoadError as e:
        current_app.logger.warning("Reload failed, keeping current catalog: %s", e)
        flash(f"Reload failed: {e}")
        return redirect(url_for("gamebrowser.index"))
    current_app.extensions["gamebrowser"] = catalog
    flash(f"Reloaded {len(catalog)} games.")
    return redirect(url_for("gamebrowser.index"))

@bp.get("/favicon.ico")
def favicon():
    return ("", 204)

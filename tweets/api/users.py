"""User profile API endpoints."""
from flask import Blueprint, jsonify

from tweets.api.helpers import get_container, json_body, require_text
from tweets.domain.entities import User
from tweets.middleware.monitoring import track_api_request


users_blueprint = Blueprint("users", __name__)


@users_blueprint.route("/api/users", methods=["POST"])
@track_api_request("save_user")
def save_user():
    """
    Create or replace a user profile.
    
    Expected payload:
    {
        "name": "alice",
        "display_name": "Alice"  # optional
    }
    """
    body = json_body()
    user = User(name=require_text(body, "name").strip(), display_name=body.get("display_name"))
    get_container().get_user_repository().save(user)
    return jsonify({"status": "success", "name": user.name}), 201


@users_blueprint.route("/api/users/<user_name>", methods=["GET"])
@track_api_request("get_user")
def get_user(user_name: str):
    """Get a user profile."""
    user = get_container().get_user_repository().get(user_name)
    if user is None:
        return jsonify({"status": "error", "message": f"User {user_name} not found"}), 404
    return jsonify({"name": user.name, "display_name": user.display_name}), 200

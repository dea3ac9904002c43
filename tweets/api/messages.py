"""Messages API endpoints: post, list, like, unlike and popularity ranking."""
from flask import Blueprint, jsonify

from tweets.api.helpers import get_container, json_body, parse_message_id, require_text, require_user
from tweets.domain.entities import Message, User
from tweets.middleware.monitoring import (
    track_api_request,
    track_like_mutation,
    track_message_saved,
    track_ranking_duration,
)


messages_blueprint = Blueprint("messages", __name__)


@messages_blueprint.route("/api/messages", methods=["POST"])
@track_api_request("post_message")
def post_message():
    """
    Post a new message.
    
    Expected payload:
    {
        "user": "alice",
        "text": "hello"
    }
    
    Returns:
        JSON response with the new message id
    """
    body = json_body()
    message = Message(user=require_user(body), text=require_text(body, "text"))
    
    get_container().get_message_repository().save(message)
    track_message_saved()
    
    return jsonify({"status": "success", "id": str(message.id)}), 201


@messages_blueprint.route("/api/users/<user_name>/messages", methods=["GET"])
@track_api_request("user_messages")
def user_messages(user_name: str):
    """List messages authored by user_name, newest first."""
    messages = get_container().get_message_repository().get_messages(User(name=user_name))
    return jsonify([message.to_dict() for message in messages]), 200


@messages_blueprint.route("/api/messages/popular", methods=["GET"])
@track_api_request("popular_messages")
def popular_messages():
    """List the most liked messages."""
    with track_ranking_duration():
        messages = get_container().get_message_repository().get_popular_messages()
    return jsonify([message.to_dict() for message in messages]), 200


@messages_blueprint.route("/api/messages/<message_id>/like", methods=["POST"])
@track_api_request("like")
def like(message_id: str):
    """Like a message. Liking twice has no further effect."""
    user = require_user(json_body())
    get_container().get_message_repository().like(parse_message_id(message_id), user)
    track_like_mutation("like")
    return "", 204


@messages_blueprint.route("/api/messages/<message_id>/like", methods=["DELETE"])
@track_api_request("dislike")
def dislike(message_id: str):
    """Remove a like from a message. Removing a missing like has no effect."""
    user = require_user(json_body())
    get_container().get_message_repository().dislike(parse_message_id(message_id), user)
    track_like_mutation("dislike")
    return "", 204

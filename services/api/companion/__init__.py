# companion package: profiles, itineraries, documents, feed, messaging and discovery
from services.api.companion.errors import CompanionError, ConstraintViolation, NotFound
from services.api.companion.users import create_user, get_user, update_user
from services.api.companion.travel_plans import (
    create_travel_plan,
    delete_travel_plan,
    get_user_travel_plans,
    update_travel_plan,
)
from services.api.companion.documents import (
    create_travel_document,
    delete_travel_document,
    get_user_documents,
)
from services.api.companion.posts import create_post, delete_post, get_posts
from services.api.companion.messages import create_message, get_messages, mark_message_as_read
from services.api.companion.discovery import find_travelers

__all__ = [
    "CompanionError",
    "ConstraintViolation",
    "NotFound",
    "create_user",
    "get_user",
    "update_user",
    "create_travel_plan",
    "get_user_travel_plans",
    "update_travel_plan",
    "delete_travel_plan",
    "create_travel_document",
    "get_user_documents",
    "delete_travel_document",
    "create_post",
    "get_posts",
    "delete_post",
    "create_message",
    "get_messages",
    "mark_message_as_read",
    "find_travelers",
]

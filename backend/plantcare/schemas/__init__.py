from plantcare.schemas.event import ValidEvent, PartialEvent, EventResponse
from plantcare.schemas.plant import ValidPlant, PartialPlant, PlantResponse
from plantcare.schemas.user import ValidUser, PartialUser, UserResponse
from plantcare.schemas.post import (
    ValidPost, PartialPost, ValidComment, PostResponse, CommentResponse,
)

__all__ = [
    "ValidEvent", "PartialEvent", "EventResponse",
    "ValidPlant", "PartialPlant", "PlantResponse",
    "ValidUser", "PartialUser", "UserResponse",
    "ValidPost", "PartialPost", "ValidComment", "PostResponse", "CommentResponse",
]

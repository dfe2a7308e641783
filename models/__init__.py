from .user import Role, User, SessionUser
from .message import Message
from .trail import Park, Settlement, Trail, trail_details, TRAIL_DETAILS_VIEW_SQL
from .session import LoginSession

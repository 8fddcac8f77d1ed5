from timetrack_admin.schemas.common import CamelModel


class UserSearchResponse(CamelModel):
    """User lookup result, limited to identity and contact fields"""

    id: str
    first_name: str | None
    last_name: str | None
    email: str

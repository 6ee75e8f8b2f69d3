"""Response models shared by the routers."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Body of every error and plain acknowledgement.

    :param message: Human-readable outcome of the request
    """

    message: str

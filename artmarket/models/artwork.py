from pydantic import BaseModel, ConfigDict


class Artwork(BaseModel):
    """
    An artwork listed in the gallery.

    Only the fields the synchronizers and pricing need are modeled;
    anything else the server sends is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str = ""
    price: float = 0.0
    category: str | None = None
    image: str | None = None
    artist: str | None = None

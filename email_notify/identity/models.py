"""Identity models."""

from pydantic import BaseModel, Field


class Identity(BaseModel):
    """A user record addressable by (username, realm).

    Attributes are multi-valued, as in a directory entry.
    """

    username: str
    realm: str = "/"
    attributes: dict[str, list[str]] = Field(default_factory=dict)

    def get_attribute(self, name: str) -> list[str] | None:
        """Values of an attribute, or None when the identity does not hold it."""
        values = self.attributes.get(name)
        if values is None:
            return None
        return list(values)

"""Asset store contract and the image model passed to it"""

from abc import ABC, abstractmethod
from io import BytesIO

from PIL import Image as PILImage
from pydantic import BaseModel, Field


class Image(BaseModel):
    """Data model for Image contents and associated metadata."""

    content: bytes
    content_type: str = Field(
        description="Content type of the Image. Can be 'image/png', 'image/jpeg', 'image'"
    )

    def get_dimensions(self) -> tuple[int, int]:
        """Get image dimensions and properly close the file"""
        with PILImage.open(BytesIO(self.content)) as img:
            return img.size


class BaseAssetStore(ABC):
    """Byte-addressed store that hands back a public URL for every write."""

    @abstractmethod
    def save_file(self, path: str, content: bytes, content_type: str) -> str:
        """Write `content` at `path`, overwriting any previous object, and return its URL."""
        ...

    @abstractmethod
    def get_file(self, path: str) -> bytes:
        """Return the bytes stored at `path`."""
        ...

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Remove the object at `path`. Missing objects are ignored."""
        ...

    @abstractmethod
    def get_public_url(self, path: str) -> str:
        """Return the public URL an object at `path` is served from."""
        ...

    def save_image(self, image: Image, path: str) -> str:
        """Store an Image and return its public URL."""
        return self.save_file(path, image.content, image.content_type)

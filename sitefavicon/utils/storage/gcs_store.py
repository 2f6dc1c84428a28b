"""Google Cloud Storage backed asset store"""

import logging
from urllib.parse import urljoin

from google.cloud.storage import Blob, Bucket, Client

from sitefavicon.utils.storage import initialize_storage_client
from sitefavicon.utils.storage.models import BaseAssetStore

logger = logging.getLogger(__name__)


class GcsAssetStore(BaseAssetStore):
    """Upload assets to a GCS bucket, optionally served through a CDN hostname."""

    storage_client: Client
    bucket_name: str
    cdn_hostname: str

    def __init__(
        self,
        destination_gcp_project: str,
        destination_bucket_name: str,
        destination_cdn_hostname: str = "",
    ) -> None:
        self.storage_client = initialize_storage_client(
            destination_gcp_project=destination_gcp_project
        )
        self.bucket_name = destination_bucket_name
        self.cdn_hostname = destination_cdn_hostname

    def _bucket(self) -> Bucket:
        return self.storage_client.bucket(self.bucket_name)

    def save_file(self, path: str, content: bytes, content_type: str) -> str:
        """Upload the content, always overwriting, then return the public URL.

        Upload errors propagate to the caller.
        """
        destination_blob: Blob = self._bucket().blob(path)
        logger.info(f"Uploading blob: {destination_blob.name}")
        destination_blob.upload_from_string(content, content_type=content_type)
        destination_blob.make_public()

        public_url = self._get_public_url(destination_blob, path)
        logger.info(f"Content public url: {public_url}")
        return public_url

    def get_file(self, path: str) -> bytes:
        """Download a blob's bytes."""
        return bytes(self._bucket().blob(path).download_as_bytes())

    def delete_file(self, path: str) -> None:
        """Delete the blob if it exists."""
        blob: Blob = self._bucket().blob(path)
        if blob.exists():
            blob.delete()

    def get_public_url(self, path: str) -> str:
        """Get the public URL of a blob without touching the bucket."""
        return self._get_public_url(self._bucket().blob(path), path)

    def _get_public_url(self, blob: Blob, path: str) -> str:
        if self.cdn_hostname:
            base_url = (
                f"https://{self.cdn_hostname}"
                if "https" not in self.cdn_hostname
                else self.cdn_hostname
            )
            return urljoin(base_url, path)
        else:
            return str(blob.public_url)

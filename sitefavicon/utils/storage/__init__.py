"""Asset stores the favicon pipeline writes rendered variants to"""

from google.cloud.storage import Client

from sitefavicon.configs import settings


def initialize_storage_client(*, destination_gcp_project: str) -> Client:
    """Initialize a Google Cloud Storage client.

    Credentials are picked up from the environment (ADC file or metadata server).
    """
    return Client(destination_gcp_project)


def create_asset_store(driver: str | None = None):
    """Build the asset store selected by `driver`, defaulting to `asset_store.driver`.

    Raises:
        AssetStoreError: if the driver is unknown.
    """
    from sitefavicon.exceptions import AssetStoreError
    from sitefavicon.utils.storage.gcs_store import GcsAssetStore
    from sitefavicon.utils.storage.local_store import LocalAssetStore

    store_settings = settings.asset_store
    driver = (driver or store_settings.driver).lower()

    match driver:
        case "local":
            return LocalAssetStore(
                root_path=store_settings.local.root_path,
                public_base_url=store_settings.local.public_base_url,
            )
        case "gcs":
            return GcsAssetStore(
                destination_gcp_project=store_settings.gcs.gcp_project,
                destination_bucket_name=store_settings.gcs.bucket_name,
                destination_cdn_hostname=store_settings.gcs.cdn_hostname,
            )
        case _:
            raise AssetStoreError(f"Unsupported asset storage driver: {driver}")

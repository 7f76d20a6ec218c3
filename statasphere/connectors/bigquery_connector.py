"""
BigQuery warehouse connector
Builds the client used by the performance queries
"""
from typing import Any, Dict, Optional
from google.auth.credentials import AnonymousCredentials
from google.cloud import bigquery
from google.oauth2 import service_account
from statasphere.config import Settings
from statasphere.utils.credentials import parse_credentials
from statasphere.utils.logger import log

BIGQUERY_SCOPES = ["https://www.googleapis.com/auth/bigquery"]


class BigQueryConnector:
    """Connector for the BigQuery performance warehouse.

    Construction never touches the network or validates credentials; the
    ``bigquery.Client`` is built on first use by :meth:`connect`.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        credentials_info: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ):
        self.name = "BigQuery"
        self.project_id = project_id
        self.credentials_info = credentials_info or {}
        self.timeout = timeout
        self.client: Optional[bigquery.Client] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "BigQueryConnector":
        """Build a connector from process settings"""
        return cls(
            project_id=settings.gcp_project_id,
            credentials_info=parse_credentials(settings.google_application_credentials),
            timeout=settings.bigquery_timeout_seconds,
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.credentials_info)

    def connect(self) -> bigquery.Client:
        """Return the BigQuery client, creating it on first call"""
        if self.client is not None:
            return self.client

        if self.has_credentials:
            credentials = service_account.Credentials.from_service_account_info(
                self.credentials_info,
                scopes=BIGQUERY_SCOPES,
            )
        else:
            log.warning("No BigQuery credentials configured; warehouse requests will be unauthenticated")
            credentials = AnonymousCredentials()

        project = self.project_id or self.credentials_info.get("project_id")
        self.client = bigquery.Client(project=project, credentials=credentials)
        log.info(f"Connected to BigQuery project {project}")
        return self.client

    def get_status(self) -> Dict[str, Any]:
        """Get connector status"""
        return {
            "name": self.name,
            "project_id": self.project_id or self.credentials_info.get("project_id"),
            "has_credentials": self.has_credentials,
            "connected": self.client is not None,
            "timeout": self.timeout,
        }

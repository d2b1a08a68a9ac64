from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Optional

import gspread
from google.auth.exceptions import GoogleAuthError

from ..core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS
from ..core.exceptions import DownstreamFailure

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


@dataclass
class SheetsConfig:
    service_account_email: str
    private_key: str
    staff_sheet_id: str
    attendance_sheet_id: str
    timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    def credentials_info(self) -> dict:
        # Keys pasted into .env files carry literal "\n" sequences.
        return {
            "type": "service_account",
            "client_email": self.service_account_email,
            "private_key": self.private_key.replace("\\n", "\n"),
            "token_uri": "https://oauth2.googleapis.com/token",
        }


class SpreadsheetConnection:
    """Singleton-like Google Sheets client factory.

    Note: The gspread client is created lazily on first use, so building the
    app (or the container) never touches the network.
    """

    _instance: Optional["SpreadsheetConnection"] = None

    def __init__(self, config: SheetsConfig):
        self._config = config
        self._client: Optional[gspread.Client] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> SheetsConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: SheetsConfig) -> "SpreadsheetConnection":
        if cls._instance is None:
            cls._instance = SpreadsheetConnection(config)
        return cls._instance

    def client(self) -> gspread.Client:
        with self._lock:
            if self._client is None:
                logger.info("Authorizing Google Sheets client for %s", self._config.service_account_email)
                try:
                    client = gspread.service_account_from_dict(self._config.credentials_info(), scopes=SCOPES)
                except (ValueError, GoogleAuthError) as e:
                    # Malformed GOOGLE_PRIVATE_KEY or rejected service account.
                    logger.error("Google Sheets authorization failed: %s", e)
                    raise DownstreamFailure(f"Spreadsheet authorization failed: {e}") from e
                client.set_timeout(self._config.timeout_seconds)
                self._client = client
            return self._client

    def spreadsheet(self, spreadsheet_id: str) -> gspread.Spreadsheet:
        return self.client().open_by_key(spreadsheet_id)

    def worksheet(self, spreadsheet_id: str, title: str) -> gspread.Worksheet:
        return self.spreadsheet(spreadsheet_id).worksheet(title)

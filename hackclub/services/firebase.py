import logging
from functools import lru_cache
from typing import Any, Dict, Optional

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from firebase_admin.exceptions import FirebaseError

from hackclub.core.config.settings import get_settings
from hackclub.core.errors import AuthenticationFailed

logger = logging.getLogger("hackclub.firebase")

APP_NAME = "hackclub"


class FirebaseVerifier:
    """Verifies Firebase ID tokens with the Admin SDK

    The SDK app is initialized on first use, from a service account file when
    a path is configured, otherwise from the individual credential settings.
    """

    def __init__(
        self,
        project_id: Optional[str] = None,
        client_email: Optional[str] = None,
        private_key: Optional[str] = None,
        service_account_path: Optional[str] = None,
    ):
        self.project_id = project_id
        self.client_email = client_email
        self.private_key = private_key
        self.service_account_path = service_account_path
        self._app = None

    @property
    def is_configured(self) -> bool:
        return bool(
            self.service_account_path
            or (self.project_id and self.client_email and self.private_key)
        )

    def _get_app(self):
        if self._app is not None:
            return self._app

        if self.service_account_path:
            cred = credentials.Certificate(self.service_account_path)
        elif self.is_configured:
            cred = credentials.Certificate({
                "type": "service_account",
                "project_id": self.project_id,
                "client_email": self.client_email,
                # Keys set through environment variables carry escaped newlines
                "private_key": self.private_key.replace("\\n", "\n"),
                "token_uri": "https://oauth2.googleapis.com/token",
            })
        else:
            raise AuthenticationFailed("Firebase is not configured")

        try:
            self._app = firebase_admin.get_app(APP_NAME)
        except ValueError:
            self._app = firebase_admin.initialize_app(cred, name=APP_NAME)
        logger.info("Firebase Admin initialized")
        return self._app

    def verify(self, id_token: str) -> Dict[str, Any]:
        """
        Verify an ID token and return its claims

        Raises:
            AuthenticationFailed: Firebase is not configured or the token is invalid
        """
        app = self._get_app()
        try:
            return firebase_auth.verify_id_token(id_token, app=app)
        except (ValueError, FirebaseError) as e:
            logger.warning(f"Firebase token verification failed: {str(e)}")
            raise AuthenticationFailed("Invalid Firebase token")


@lru_cache()
def get_firebase_verifier() -> FirebaseVerifier:
    settings = get_settings()
    return FirebaseVerifier(
        project_id=settings.FIREBASE_PROJECT_ID,
        client_email=settings.FIREBASE_CLIENT_EMAIL,
        private_key=settings.FIREBASE_PRIVATE_KEY,
        service_account_path=settings.FIREBASE_SERVICE_ACCOUNT_PATH,
    )

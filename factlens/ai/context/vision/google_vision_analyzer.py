"""
Google Cloud Vision client (image-analysis provider).

Sends image bytes with LABEL_DETECTION, TEXT_DETECTION and WEB_DETECTION in one
annotate request and maps the answer to ImageAnalysisResult.

The Vision SDK is blocking, so the request runs in a worker thread.
Credentials come from, in order:
1. GOOGLE_SERVICE_ACCOUNT_KEY (inline service-account JSON)
2. GOOGLE_SERVICE_ACCOUNT_KEY_PATH (service-account key file)
3. application default credentials
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from google.cloud import vision
from google.oauth2 import service_account

from factlens.models import (
    ImageAnalysisResult,
    ImageLabel,
    WebEntity,
    InvalidInput,
    ProviderCallFailed,
    ProviderUnavailable,
)
from factlens.observability.logger import get_logger, PipelineStep

logger = get_logger(__name__, PipelineStep.IMAGE_ANALYSIS)

PROVIDER = "google_vision"


def load_vision_credentials(
    service_account_key: Optional[str] = None,
    service_account_key_path: Optional[str] = None,
) -> Optional[service_account.Credentials]:
    """
    build service-account credentials, or None to fall back to default credentials.

    raises:
        ProviderUnavailable: the inline key is not valid JSON or not a service account
    """
    if service_account_key:
        try:
            info = json.loads(service_account_key)
            return service_account.Credentials.from_service_account_info(info)
        except (ValueError, KeyError) as e:
            logger.error(f"failed to parse GOOGLE_SERVICE_ACCOUNT_KEY: {e}")
            raise ProviderUnavailable(
                "Vision credentials are invalid. GOOGLE_SERVICE_ACCOUNT_KEY must be a service-account JSON string."
            ) from e

    if service_account_key_path:
        logger.info(f"using vision key file: {service_account_key_path}")
        try:
            return service_account.Credentials.from_service_account_file(service_account_key_path)
        except (OSError, ValueError, KeyError) as e:
            logger.error(f"failed to load vision key file {service_account_key_path}: {e}")
            raise ProviderUnavailable(
                f"Vision credentials could not be loaded from {service_account_key_path}."
            ) from e

    return None


class GoogleVisionAnalyzer:
    """
    image analysis with Google Cloud Vision.

    the SDK client is created on first use so that a missing or broken
    credential only fails image requests, not process start.

    Example:
        >>> analyzer = GoogleVisionAnalyzer(service_account_key_path="google-key.json")
        >>> result = await analyzer.analyze("/tmp/factlens-uploads/image-1700000000000-ab12.png")
        >>> result.search_query()
        'MOON LANDING HOAX Moon Astronaut'
    """

    def __init__(
        self,
        service_account_key: Optional[str] = None,
        service_account_key_path: Optional[str] = None,
        max_results: int = 10,
        client: Optional[Any] = None,
    ):
        self.service_account_key = service_account_key
        self.service_account_key_path = service_account_key_path
        self.max_results = max_results
        self._client = client

    def _get_client(self) -> Any:
        if self._client is None:
            credentials = load_vision_credentials(
                self.service_account_key, self.service_account_key_path
            )
            try:
                self._client = vision.ImageAnnotatorClient(credentials=credentials)
            except Exception as e:
                logger.error(f"could not create vision client: {type(e).__name__}: {e}")
                raise ProviderUnavailable(
                    "Vision API credentials are not configured. "
                    "Set GOOGLE_SERVICE_ACCOUNT_KEY or GOOGLE_SERVICE_ACCOUNT_KEY_PATH."
                ) from e
        return self._client

    def _annotate(self, image_path: str) -> Any:
        path = Path(image_path)
        try:
            content = path.read_bytes()
        except FileNotFoundError as e:
            raise InvalidInput("Image file not found. Please check file path and permissions.") from e
        except OSError as e:
            raise InvalidInput(f"Image file could not be read: {e.strerror}") from e

        logger.info(f"sending {len(content)} bytes to vision api")
        request = vision.AnnotateImageRequest(
            image=vision.Image(content=content),
            features=[
                vision.Feature(type_=vision.Feature.Type.LABEL_DETECTION, max_results=self.max_results),
                vision.Feature(type_=vision.Feature.Type.TEXT_DETECTION),
                vision.Feature(type_=vision.Feature.Type.WEB_DETECTION, max_results=self.max_results),
            ],
        )
        return self._get_client().annotate_image(request)

    async def analyze(self, image_path: str) -> ImageAnalysisResult:
        """
        annotate one image file.

        raises:
            InvalidInput: the file does not exist or cannot be read
            ProviderUnavailable: vision credentials missing or invalid
            ProviderCallFailed: the annotate request failed
        """
        try:
            response = await asyncio.to_thread(self._annotate, image_path)
        except (InvalidInput, ProviderUnavailable):
            raise
        except Exception as e:
            logger.error(f"vision api request failed: {type(e).__name__}: {e}")
            raise ProviderCallFailed(PROVIDER, str(e)) from e

        if response.error.message:
            logger.error(f"vision api returned error: {response.error.message}")
            raise ProviderCallFailed(PROVIDER, response.error.message)

        result = self._parse_response(response)
        logger.info(
            f"vision api detected {len(result.extracted_text)} chars of text, "
            f"{len(result.labels)} label(s), {len(result.web_entities)} web entit(ies)"
        )
        return result

    def _parse_response(self, response: Any) -> ImageAnalysisResult:
        # the first text annotation holds the full detected text
        text_annotations = list(response.text_annotations or [])
        extracted_text = text_annotations[0].description if text_annotations else ""

        labels = [
            ImageLabel(description=label.description, confidence=label.score)
            for label in (response.label_annotations or [])
            if label.description
        ]

        web_entities = []
        if response.web_detection:
            web_entities = [
                WebEntity(description=entity.description, score=entity.score)
                for entity in (response.web_detection.web_entities or [])
                if entity.description
            ]

        return ImageAnalysisResult(
            extracted_text=extracted_text or "",
            labels=labels,
            web_entities=web_entities,
        )

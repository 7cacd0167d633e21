"""Per-document input capture.

A ``DocumentSlot`` holds what the user has provided for one document (the
resume or the job description): the active input mode and the current
``DocumentInput``. Every mutation replaces the ``DocumentInput`` wholesale and
notifies the ``on_change`` callback.
"""

from typing import Callable, Optional

from resume_match.config.logging_config import get_logger
from resume_match.constants.ui_constants import UIConstants
from resume_match.error_handling.exceptions import UnsupportedFileTypeError
from resume_match.models.data_models import DocumentInput, InputMode
from resume_match.utils.image_utils import encode_data_uri, is_image_mime_type

logger = get_logger(__name__)

OnChange = Callable[[DocumentInput], None]


class DocumentSlot:
    """Input state for one document panel."""

    def __init__(self, label: str, on_change: Optional[OnChange] = None):
        self.label = label
        self.mode = InputMode.TEXT
        self._data = DocumentInput()
        self._on_change = on_change

    @property
    def data(self) -> DocumentInput:
        return self._data

    @property
    def preview(self) -> Optional[str]:
        """Data URI of the uploaded image, if any."""
        return self._data.image

    @property
    def text(self) -> str:
        return self._data.text

    def set_mode(self, mode: InputMode) -> None:
        """Switch between the text and image panels. Data is kept."""
        self.mode = InputMode(mode)

    def set_text(self, text: str) -> None:
        """Replace the document with pasted text, dropping any image."""
        self._update(DocumentInput(text=text or ""))

    def select_file(self, file_name: str, mime_type: Optional[str], content: bytes) -> None:
        """Accept an uploaded image file.

        Args:
            file_name: Name of the uploaded file
            mime_type: Declared MIME type of the upload
            content: Raw file bytes

        Raises:
            UnsupportedFileTypeError: If the file is not an image. The slot
                is left unchanged.
        """
        if not is_image_mime_type(mime_type):
            logger.warning(
                "Rejected non-image upload for %s: %s (%s)", self.label, file_name, mime_type
            )
            raise UnsupportedFileTypeError(
                UIConstants.UNSUPPORTED_FILE_MESSAGE, mime_type=mime_type
            )

        self._update(
            DocumentInput(
                text=f"{UIConstants.FILE_TEXT_PREFIX}{file_name}",
                image=encode_data_uri(content, mime_type),
                file_name=file_name,
            )
        )
        logger.debug("Accepted image %s (%d bytes) for %s", file_name, len(content), self.label)

    def clear_image(self) -> None:
        """Remove the uploaded image, leaving the slot empty."""
        if self._data.image is None:
            return
        self._update(DocumentInput())

    def _update(self, data: DocumentInput) -> None:
        self._data = data
        if self._on_change is not None:
            self._on_change(data)

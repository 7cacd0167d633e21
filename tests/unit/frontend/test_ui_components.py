"""Tests for the Streamlit component renderers."""

from unittest.mock import MagicMock, patch

import pytest

from resume_match.constants.ui_constants import UIConstants
from resume_match.core.app_controller import AnalysisController
from resume_match.core.input_capture import DocumentSlot
from resume_match.frontend import callbacks, ui_components
from resume_match.models.data_models import AnalysisResult, AnalysisStatus, InputMode


def _columns(spec):
    count = spec if isinstance(spec, int) else len(spec)
    return tuple(MagicMock() for _ in range(count))


@pytest.fixture
def mock_st():
    fake_st = MagicMock()
    fake_st.session_state = {}
    fake_st.columns.side_effect = _columns
    with patch("resume_match.frontend.ui_components.st", fake_st), patch(
        "resume_match.frontend.callbacks.st", fake_st
    ):
        yield fake_st


def _markdown_texts(mock_st):
    return [c.args[0] for c in mock_st.markdown.call_args_list]


def _upload(name, mime_type, content):
    uploaded = MagicMock()
    uploaded.name = name
    uploaded.type = mime_type
    uploaded.getvalue.return_value = content
    return uploaded


class TestInputSection:
    def test_text_survives_mode_round_trip(self, mock_st):
        slot = DocumentSlot("resume")
        slot.set_text("Senior Python engineer")
        mock_st.radio.return_value = InputMode.TEXT.value

        # Widget state is gone after the panel was shown in Image mode.
        assert "resume_slot_text" not in mock_st.session_state
        ui_components.display_input_section("Resume", "resume_slot", slot, "Paste...")

        assert mock_st.session_state["resume_slot_text"] == "Senior Python engineer"
        assert mock_st.text_area.call_args.kwargs["key"] == "resume_slot_text"

    def test_existing_widget_text_is_not_overwritten(self, mock_st):
        slot = DocumentSlot("resume")
        slot.set_text("saved")
        mock_st.session_state["resume_slot_text"] = "being edited"
        mock_st.radio.return_value = InputMode.TEXT.value

        ui_components.display_input_section("Resume", "resume_slot", slot, "Paste...")

        assert mock_st.session_state["resume_slot_text"] == "being edited"

    def test_image_document_seeds_empty_text(self, mock_st):
        slot = DocumentSlot("resume")
        slot.select_file("cv.png", "image/png", b"png")
        mock_st.radio.return_value = InputMode.TEXT.value

        ui_components.display_input_section("Resume", "resume_slot", slot, "Paste...")

        assert mock_st.session_state["resume_slot_text"] == ""

    def test_rejected_upload_keeps_preview_and_warns(self, mock_st):
        slot = DocumentSlot("resume")
        slot.select_file("cv.png", "image/png", b"png")
        preview = slot.preview
        mock_st.session_state["resume_slot"] = slot
        mock_st.session_state["resume_slot_file"] = _upload("cv.pdf", "application/pdf", b"%PDF")
        mock_st.radio.return_value = InputMode.IMAGE.value

        callbacks.handle_file_upload("resume_slot")
        ui_components.display_input_section("Resume", "resume_slot", slot, "Paste...")

        mock_st.warning.assert_called_once_with(UIConstants.UNSUPPORTED_FILE_MESSAGE)
        mock_st.image.assert_called_once()
        assert mock_st.image.call_args.args[0] == preview
        mock_st.text_area.assert_not_called()


class TestAnalyzeControls:
    def test_button_disabled_while_loading(self, mock_st):
        controller = AnalysisController()
        controller.status = AnalysisStatus.LOADING

        ui_components.display_analyze_controls(controller)

        assert mock_st.button.call_args.kwargs["disabled"] is True

    def test_button_enabled_and_error_shown(self, mock_st):
        controller = AnalysisController()
        controller.status = AnalysisStatus.ERROR
        controller.error = UIConstants.MISSING_RESUME_MESSAGE

        ui_components.display_analyze_controls(controller)

        assert mock_st.button.call_args.kwargs["disabled"] is False
        mock_st.error.assert_called_once_with(UIConstants.MISSING_RESUME_MESSAGE)


class TestResults:
    def test_strong_fit_report(self, mock_st, sample_result):
        ui_components.display_results(sample_result)

        figure = mock_st.plotly_chart.call_args.args[0]
        assert "87%" in figure.layout.annotations[0].text

        texts = _markdown_texts(mock_st)
        assert any("Data Engineer" in text for text in texts)
        assert '*"Strong fit"*' in texts
        assert ":green-background[Python] :green-background[SQL]" in texts
        assert ":red-background[Kubernetes]" in texts

        tips = [text for text in texts if text.startswith("**")]
        assert tips == ["**1.** Add cloud experience", "**2.** Quantify impact"]

    def test_empty_lists_show_placeholders(self, mock_st, sample_result_payload):
        sample_result_payload.update(matchingSkills=[], missingSkills=[])
        ui_components.display_results(AnalysisResult.model_validate(sample_result_payload))

        captions = [c.args[0] for c in mock_st.caption.call_args_list]
        assert captions == [UIConstants.NO_MATCHING_SKILLS, UIConstants.NO_MISSING_SKILLS]

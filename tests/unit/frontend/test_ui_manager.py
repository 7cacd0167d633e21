"""Tests for page composition in UIManager."""

from unittest.mock import MagicMock, Mock, patch

import pytest

from resume_match.error_handling.exceptions import ConfigurationError
from resume_match.frontend.ui_manager import UIManager


@pytest.fixture
def state_manager():
    manager = Mock()
    manager.controller.result = None
    return manager


@pytest.fixture
def mock_st():
    with patch("resume_match.frontend.ui_manager.st", new_callable=MagicMock) as fake_st:
        fake_st.columns.return_value = (MagicMock(), MagicMock())
        yield fake_st


class TestUIManager:
    @patch("resume_match.frontend.ui_manager.display_results")
    @patch("resume_match.frontend.ui_manager.display_analyze_controls")
    @patch("resume_match.frontend.ui_manager.display_input_section")
    @patch("resume_match.frontend.ui_manager.display_header")
    def test_full_ui_without_result(
        self, mock_header, mock_inputs, mock_controls, mock_results, mock_st, state_manager
    ):
        UIManager(state_manager).render_full_ui()

        mock_header.assert_called_once()
        assert mock_inputs.call_count == 2
        mock_controls.assert_called_once_with(state_manager.controller)
        mock_results.assert_not_called()
        mock_st.warning.assert_not_called()

    @patch("resume_match.frontend.ui_manager.display_results")
    def test_results_rendered_when_present(self, mock_results, mock_st, state_manager, sample_result):
        state_manager.controller.result = sample_result

        UIManager(state_manager).render_results()

        mock_results.assert_called_once_with(sample_result)

    @patch("resume_match.error_handling.boundaries.st", new_callable=MagicMock)
    @patch("resume_match.frontend.ui_manager.display_results")
    def test_results_failure_is_contained(
        self, mock_results, mock_boundary_st, mock_st, state_manager, sample_result
    ):
        state_manager.controller.result = sample_result
        mock_results.side_effect = KeyError("matching_skills")

        UIManager(state_manager).render_results()

        mock_boundary_st.warning.assert_called_once()

    def test_configuration_warning(self, mock_st, state_manager):
        error = ConfigurationError("No Gemini API key configured.")

        UIManager(state_manager, startup_error=error).render_configuration_warning()

        mock_st.warning.assert_called_once_with("⚠️ No Gemini API key configured.")
